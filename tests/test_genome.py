from breakout_neat.config import global_config
from breakout_neat.genome import (
    Genome,
    Individual,
    LinkGene,
    LinkID,
    NeuronGene,
    clamp,
    mutate_delta,
    new_value,
    next_genome_id,
)


def test_next_genome_id_increases():
    a = next_genome_id()
    b = next_genome_id()
    assert b > a


def test_clamp_bounds():
    cfg = global_config()
    assert clamp(100.0) == cfg.max
    assert clamp(-100.0) == cfg.min
    assert clamp(1.5) == 1.5


def test_new_value_within_range():
    cfg = global_config()
    for _ in range(200):
        assert cfg.min <= new_value() <= cfg.max


def test_mutate_delta_within_range():
    cfg = global_config()
    for _ in range(200):
        assert cfg.min <= mutate_delta(cfg.max) <= cfg.max
        assert cfg.min <= mutate_delta(cfg.min) <= cfg.max


def test_random_genome_structure():
    g = Genome.random(3, 3)
    assert [n.id for n in g.neurons] == [0, 1, 2, -1, -2, -3]
    assert [(l.id.in_id, l.id.out_id) for l in g.links] == [
        (i, o) for i in (-1, -2, -3) for o in (0, 1, 2)
    ]
    assert all(l.is_enabled for l in g.links)


def test_random_genomes_get_distinct_ids():
    first = Genome.random(2, 2)
    second = Genome.random(2, 2)
    assert second.id == first.id + 1


def test_find_neuron_and_link():
    g = Genome.random(3, 3)
    assert g.find_neuron(-2).id == -2
    assert g.find_neuron(99) is None
    link = g.find_link(LinkID(-3, 2))
    assert link.id == LinkID(-3, 2)
    assert g.find_link(LinkID(0, -1)) is None


def test_input_and_output_ids():
    g = Genome.random(3, 3)
    assert g.input_ids() == [-1, -2, -3]
    assert g.output_ids() == [0, 1, 2]


def test_link_id_hashable_and_equal():
    assert LinkID(-1, 0) == LinkID(-1, 0)
    assert len({LinkID(-1, 0), LinkID(-1, 0), LinkID(-2, 0)}) == 2


def test_individual_default_fitness():
    g = Genome(7, 1, 1, [NeuronGene(0, 0.0), NeuronGene(-1, 0.0)],
               [LinkGene(LinkID(-1, 0), 0.5)])
    ind = Individual(g)
    assert ind.fitness == 0.0
    assert ind.genome.links[0].is_enabled is True