"""Combining two parent genomes into an offspring."""

from __future__ import annotations

import random
from dataclasses import replace

from .genome import Genome, Individual, LinkGene, NeuronGene, next_genome_id


def crossover_neuron(a: NeuronGene, b: NeuronGene) -> NeuronGene:
    if a.id != b.id:
        raise ValueError(f"neuron ids differ: {a.id} != {b.id}")
    return NeuronGene(a.id, random.choice((a.bias, b.bias)))


def crossover_link(a: LinkGene, b: LinkGene) -> LinkGene:
    if a.id != b.id:
        raise ValueError(f"link ids differ: {a.id} != {b.id}")
    return LinkGene(
        a.id,
        random.choice((a.weight, b.weight)),
        random.choice((a.is_enabled, b.is_enabled)),
    )


def crossover(dominant: Individual, recessive: Individual) -> Genome:
    """Build an offspring with the dominant parent's structure.

    Neuron biases shared with the recessive parent are picked at random;
    links are inherited from the dominant parent.
    """
    parent = dominant.genome
    neurons = []
    for neuron in parent.neurons:
        other = recessive.genome.find_neuron(neuron.id)
        neurons.append(replace(neuron) if other is None else crossover_neuron(neuron, other))
    links = [crossover_link(link, link) for link in parent.links]
    return Genome(next_genome_id(), parent.num_inputs, parent.num_outputs, neurons, links)