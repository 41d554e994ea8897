"""Feed-forward neural networks built from genomes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .genome import Genome, LinkGene


def relu(x: float) -> float:
    return max(x, 0.0)


@dataclass
class NeuronInput:
    input_id: int
    weight: float


@dataclass
class Neuron:
    id: int
    bias: float
    inputs: list[NeuronInput] = field(default_factory=list)


def required_for_output(
    inputs: Iterable[int], outputs: Iterable[int], links: Iterable[LinkGene]
) -> set[int]:
    """Return the non-input nodes whose values can reach an output."""
    input_set = set(inputs)
    links = list(links)
    required = set(outputs)
    reached = set(required)

    while True:
        layer = {
            l.id.in_id
            for l in links
            if l.id.out_id in reached and l.id.in_id not in reached
        }
        if not layer:
            break
        layer_nodes = layer - input_set
        if not layer_nodes:
            break
        required |= layer_nodes
        reached |= layer
    return required


def feed_forward_layers(
    inputs: Iterable[int], outputs: Iterable[int], links: Iterable[LinkGene]
) -> list[list[int]]:
    """Group required nodes into layers that can be evaluated in order."""
    inputs = list(inputs)
    links = list(links)
    required = required_for_output(inputs, outputs, links)
    available = set(inputs)
    layers: list[list[int]] = []

    while True:
        candidates = {
            l.id.out_id
            for l in links
            if l.id.in_id in available and l.id.out_id not in available
        }
        next_layer = [
            node
            for node in sorted(candidates)
            if node in required
            and all(
                l.id.in_id in available
                for l in links
                if l.id.out_id == node and l.id.in_id in required
            )
        ]
        if not next_layer:
            break
        layers.append(next_layer)
        available.update(next_layer)
    return layers


@dataclass
class FeedForwardNetwork:
    """Evaluates neurons in topological order; outputs are left linear."""

    input_ids: list[int]
    output_ids: list[int]
    neurons: list[Neuron] = field(default_factory=list)

    def activate(self, inputs: Sequence[float]) -> list[float]:
        if len(inputs) != len(self.input_ids):
            raise ValueError(
                f"expected {len(self.input_ids)} inputs, got {len(inputs)}"
            )

        values: dict[int, float] = dict(zip(self.input_ids, inputs))
        values.update((i, 0.0) for i in range(len(self.output_ids)))
        output_set = set(self.output_ids)

        for neuron in self.neurons:
            total = 0.0
            for source in neuron.inputs:
                if source.input_id not in values:
                    raise ValueError(
                        f"missing input {source.input_id} for neuron {neuron.id}"
                    )
                total += values[source.input_id] * source.weight
            total += neuron.bias
            if neuron.id not in output_set:
                total = relu(total)
            values[neuron.id] = total

        try:
            return [values[output_id] for output_id in self.output_ids]
        except KeyError as exc:
            raise ValueError(f"output {exc.args[0]} was never computed") from None

    @classmethod
    def from_genome(cls, genome: Genome) -> FeedForwardNetwork:
        """Build a network from the enabled links of a genome."""
        inputs = genome.input_ids()
        outputs = genome.output_ids()
        enabled = [l for l in genome.links if l.is_enabled]

        neurons: list[Neuron] = []
        for layer in feed_forward_layers(inputs, outputs, enabled):
            for neuron_id in layer:
                gene = genome.find_neuron(neuron_id)
                if gene is None:
                    continue
                neuron_inputs = [
                    NeuronInput(l.id.in_id, l.weight)
                    for l in enabled
                    if l.id.out_id == neuron_id
                ]
                neurons.append(Neuron(gene.id, gene.bias, neuron_inputs))
        return cls(inputs, outputs, neurons)