# breakout_neat

A small Breakout game together with a NEAT-style neuroevolution trainer that
evolves feed-forward neural networks to keep the ball in play.

The network sees three inputs: the ball's x and y position and the paddle's
x position, each divided by the screen size. Its three outputs are left,
stay and right. The action taken is the strictly largest of left and right;
if neither is strictly larger than both other outputs, the paddle stays.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Play Breakout yourself in a pygame window. Space launches the ball, the left
and right arrow keys move the paddle, and R restarts after a game over:

```
breakout-game
```

Train a population of networks. Each generation prints the evaluation time
and the average, minimum and maximum fitness. When training ends, the best
individual is written to `best_individual.pb` and its genome to
`best_genome.pb` in the current directory:

```
breakout-train
breakout-train --num-gens 50 --num-steps 3000
breakout-train --prev
```

`--prev` fills the whole population with copies of the genome in
`best_genome.pb` instead of random genomes; if that file cannot be read, the
command prints an error and exits with status 1. The defaults are 100
generations of 150 individuals, with up to 5000 frames per evaluation.

Watch a trained network play. This loads `best_genome.pb`; with `--champion`
it loads `best_of_the_best.pb` instead. The up and down arrow keys raise or
lower the game speed by 0.1, and R restarts after a game over:

```
breakout-ai
breakout-ai --champion
```

Inspect a freshly generated random genome, see its outputs for three fixed
inputs, and the fitness it reaches in one game:

```
breakout-debug-genome
```

## How evolution works

- `breakout_neat.config.global_config()` returns the fixed `Config` with all
  tuning values (population size, mutation rates, value range and so on).
- `Genome.random(num_inputs, num_outputs)` builds a genome with every input
  linked to every output. Inputs have ids -1, -2, ...; outputs 0, 1, ...
- Each generation every individual plays one game with a randomised launch
  angle and paddle position (`training.evaluate_individual`). Fitness is one
  point per frame survived plus 50 points per destroyed block.
- `Population.reproduce()` keeps the fittest 20% (rounded up), picks two
  parents at random from them for each child, combines them with
  `crossover.crossover` and applies `mutation.mutate`, which perturbs weights
  and biases and, with small probability, adds a link or splits a link with
  a new neuron. Links never form cycles.
- `nn.FeedForwardNetwork.from_genome` builds the network from the enabled
  links. Hidden neurons use ReLU; outputs stay linear.

## Library use

```python
from breakout_neat.genome import Genome, Individual
from breakout_neat.nn import FeedForwardNetwork
from breakout_neat.training import evaluate_individual, choose_action
from breakout_neat.serialization import save_genome, load_genome

genome = Genome.random(3, 3)
network = FeedForwardNetwork.from_genome(genome)
outputs = network.activate([0.2, 0.5, 0.8])
print(choose_action(outputs))

fitness = evaluate_individual(Individual(genome, 0.0), 5000)
save_genome(genome, "my_genome.pb")
assert load_genome("my_genome.pb").id == genome.id
```

`breakout_neat.engine.BreakoutEngine` can also be driven directly with
`step(action, delta)`, `get_state()` and `calculate_fitness()`.

Genomes and individuals are stored in the protocol buffer wire format
(`serialization.encode_genome`, `decode_genome`, `encode_individual`,
`decode_individual`); malformed data raises `ValueError`.

## What it does not do

- Nothing in the package writes `best_of_the_best.pb`; `breakout-ai
  --champion` only reads it if you put a genome there yourself, for example
  by copying a `best_genome.pb` you want to keep.
- There is no speciation: the compatibility settings in `Config` are not
  used, and selection is plain truncation over the whole population.
- The tuning values in `Config` cannot be changed from the command line,
  apart from the number of generations and steps.
- Individuals are evaluated one after another in a single process.