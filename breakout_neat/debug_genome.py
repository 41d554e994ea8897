"""Inspect a fresh random genome and the game it plays."""

from __future__ import annotations

from collections.abc import Sequence

from .config import global_config
from .genome import Genome, Individual
from .nn import FeedForwardNetwork
from .training import choose_action, evaluate_individual

_CASES = (
    ("Ball left (0.2), Paddle right (0.8)", [0.2, 0.5, 0.8]),
    ("Ball right (0.8), Paddle left (0.2)", [0.8, 0.5, 0.2]),
    ("Ball center (0.5), Paddle center (0.5)", [0.5, 0.5, 0.5]),
)


def describe_genome(genome: Genome) -> str:
    """Return a readable listing of a genome's neurons and links."""
    lines = [
        "Genome structure:",
        f"  Inputs: {genome.num_inputs}",
        f"  Outputs: {genome.num_outputs}",
        "",
        "Neurons:",
    ]
    lines.extend(f"  ID: {n.id:3}, Bias: {n.bias:7.4f}" for n in genome.neurons)
    lines.extend(["", "Links:"])
    lines.extend(
        f"  {l.id.in_id:3} -> {l.id.out_id:3}: weight={l.weight:7.4f}, "
        f"enabled={str(l.is_enabled).lower()}"
        for l in genome.links
    )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    print("=== Testing Initial Genome ===\n")
    cfg = global_config()
    genome = Genome.random(cfg.num_inputs, cfg.num_outputs)
    print(describe_genome(genome))

    network = FeedForwardNetwork.from_genome(genome)
    print("\n=== Testing Network Outputs ===")
    for number, (label, inputs) in enumerate(_CASES, start=1):
        print(f"\nTest {number}: {label}")
        outputs = network.activate(inputs)
        print(f"  Outputs: L={outputs[0]:.4f}, S={outputs[1]:.4f}, R={outputs[2]:.4f}")
        print(f"  Action: {choose_action(outputs).name}")

    print("\n=== Simulating One Game ===")
    fitness = evaluate_individual(Individual(genome, 0.0), cfg.num_steps)
    print(f"Fitness: {fitness:.2f}")
    print(f"Expected frames alive: ~{fitness:.0f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())