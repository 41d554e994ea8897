"""Genome representation for NEAT and the value helpers its genes use."""

from __future__ import annotations

import itertools
import random
import threading
from dataclasses import dataclass, field

from .config import global_config

_id_counter = itertools.count(1)
_id_lock = threading.Lock()


def next_genome_id() -> int:
    """Return a fresh, strictly increasing genome id."""
    with _id_lock:
        return next(_id_counter)


def clamp(x: float) -> float:
    """Clamp a weight or bias to the configured range."""
    cfg = global_config()
    return min(cfg.max, max(cfg.min, x))


def new_value() -> float:
    """Draw a fresh weight or bias from the initial distribution."""
    cfg = global_config()
    return clamp(random.gauss(cfg.init_mean, cfg.init_stdev))


def mutate_delta(value: float) -> float:
    """Perturb a value by a clamped normal step, keeping it in range."""
    cfg = global_config()
    delta = clamp(random.gauss(0.0, cfg.mutate_power))
    return clamp(value + delta)


@dataclass
class NeuronGene:
    id: int
    bias: float


@dataclass(frozen=True)
class LinkID:
    in_id: int
    out_id: int


@dataclass
class LinkGene:
    id: LinkID
    weight: float
    is_enabled: bool = True


@dataclass
class Genome:
    """Neurons and links of one network. Inputs have negative ids, outputs 0..n-1."""

    id: int
    num_inputs: int
    num_outputs: int
    neurons: list[NeuronGene] = field(default_factory=list)
    links: list[LinkGene] = field(default_factory=list)

    @classmethod
    def random(cls, num_inputs: int, num_outputs: int) -> Genome:
        """Build a fully connected input-to-output genome with random values."""
        genome = cls(next_genome_id(), num_inputs, num_outputs)
        genome.neurons.extend(NeuronGene(i, new_value()) for i in range(num_outputs))
        for i in range(num_inputs):
            input_id = -i - 1
            genome.neurons.append(NeuronGene(input_id, new_value()))
            genome.links.extend(
                LinkGene(LinkID(input_id, output_id), new_value(), True)
                for output_id in range(num_outputs)
            )
        return genome

    def find_neuron(self, neuron_id: int) -> NeuronGene | None:
        return next((n for n in self.neurons if n.id == neuron_id), None)

    def find_link(self, link_id: LinkID) -> LinkGene | None:
        return next((l for l in self.links if l.id == link_id), None)

    def input_ids(self) -> list[int]:
        return [-(i + 1) for i in range(self.num_inputs)]

    def output_ids(self) -> list[int]:
        return list(range(self.num_outputs))


@dataclass
class Individual:
    genome: Genome
    fitness: float = 0.0