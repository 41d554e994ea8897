"""Structural and value mutations on genomes."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .config import global_config
from .genome import Genome, LinkGene, LinkID, NeuronGene, mutate_delta, new_value


def _is_output(genome: Genome, neuron_id: int) -> bool:
    return 0 <= neuron_id < genome.num_outputs


def _choose_input_or_hidden(genome: Genome) -> int:
    candidates = [n.id for n in genome.neurons if not _is_output(genome, n.id)]
    if not candidates:
        raise ValueError("genome has no input or hidden neurons")
    return random.choice(candidates)


def _choose_output_or_hidden(genome: Genome) -> int:
    candidates = [n.id for n in genome.neurons if n.id >= 0]
    if not candidates:
        raise ValueError("genome has no output or hidden neurons")
    return random.choice(candidates)


def _choose_hidden(genome: Genome) -> int | None:
    hidden = [n.id for n in genome.neurons if n.id >= genome.num_outputs]
    return random.choice(hidden) if hidden else None


def would_create_cycle(links: Iterable[LinkGene], in_id: int, out_id: int) -> bool:
    """Return True if a link in_id -> out_id would close a loop."""
    if in_id == out_id:
        return True
    links = list(links)
    visited: set[int] = set()
    stack = [out_id]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        if current == in_id:
            return True
        stack.extend(l.id.out_id for l in links if l.id.in_id == current)
    return False


def mutate_add_link(genome: Genome) -> bool:
    """Add a random feed-forward link; an existing one is re-enabled instead."""
    input_id = _choose_input_or_hidden(genome)
    output_id = _choose_output_or_hidden(genome)
    link_id = LinkID(input_id, output_id)

    existing = genome.find_link(link_id)
    if existing is not None:
        existing.is_enabled = True
        return False

    if would_create_cycle(genome.links, input_id, output_id):
        return False

    genome.links.append(LinkGene(link_id, random.random() * 2.0 - 1.0, True))
    return True


def mutate_remove_link(genome: Genome) -> bool:
    if not genome.links:
        return False
    del genome.links[random.randrange(len(genome.links))]
    return True


def mutate_add_neuron(genome: Genome) -> bool:
    """Split a random link with a new neuron."""
    if not genome.links:
        return False

    to_split = random.choice(genome.links)
    to_split.is_enabled = False

    neuron = NeuronGene(len(genome.neurons), random.random() * 2.0 - 1.0)
    genome.neurons.append(neuron)
    genome.links.append(LinkGene(LinkID(to_split.id.in_id, neuron.id), 1.0, True))
    genome.links.append(LinkGene(LinkID(neuron.id, to_split.id.out_id), to_split.weight, True))
    return True


def mutate_remove_neuron(genome: Genome) -> bool:
    """Remove a random hidden neuron and every link touching it."""
    if not genome.links:
        return False
    neuron_id = _choose_hidden(genome)
    if neuron_id is None:
        return False

    genome.links = [
        l for l in genome.links if l.id.in_id != neuron_id and l.id.out_id != neuron_id
    ]
    neuron = genome.find_neuron(neuron_id)
    if neuron is None:
        return False
    genome.neurons.remove(neuron)
    return True


def _mutated_value(value: float) -> float:
    cfg = global_config()
    if random.random() < cfg.mutation_rate:
        if random.random() < cfg.shift_weight_prob:
            return mutate_delta(value)
        if random.random() < cfg.random_weight_prob:
            return new_value()
    return value


def mutate_weights(genome: Genome) -> bool:
    if not genome.links:
        return False
    for link in genome.links:
        link.weight = _mutated_value(link.weight)
    return True


def mutate_biases(genome: Genome) -> bool:
    if not genome.neurons:
        return False
    for neuron in genome.neurons:
        neuron.bias = _mutated_value(neuron.bias)
    return True


def mutate(genome: Genome) -> None:
    """Mutate values always, and structure with the configured probabilities."""
    mutate_weights(genome)
    mutate_biases(genome)

    cfg = global_config()
    if random.random() < cfg.add_link_prob:
        mutate_add_link(genome)
    if random.random() < cfg.add_node_prob:
        mutate_add_neuron(genome)