import re

from breakout_neat.debug_genome import describe_genome, main
from breakout_neat.genome import Genome, LinkGene, LinkID, NeuronGene


def _genome():
    return Genome(
        5,
        1,
        2,
        [NeuronGene(0, 0.5), NeuronGene(1, -0.25), NeuronGene(-1, 0.0)],
        [
            LinkGene(LinkID(-1, 0), 1.5, True),
            LinkGene(LinkID(-1, 1), -2.0, False),
        ],
    )


def test_describe_lists_counts():
    text = describe_genome(_genome())
    assert "Inputs: 1" in text
    assert "Outputs: 2" in text


def test_describe_has_one_line_per_neuron():
    lines = describe_genome(_genome()).splitlines()
    assert len([l for l in lines if "Bias:" in l]) == 3


def test_describe_has_one_line_per_link():
    lines = describe_genome(_genome()).splitlines()
    link_lines = [l for l in lines if "->" in l]
    assert len(link_lines) == 2
    assert link_lines[1].endswith("enabled=false")


def test_main_reports_three_actions(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    actions = re.findall(r"Action: (\w+)", out)
    assert len(actions) == 3
    assert set(actions) <= {"LEFT", "RIGHT", "STAY"}


def test_main_reports_positive_fitness(capsys):
    main([])
    out = capsys.readouterr().out
    match = re.search(r"Fitness: ([\d.]+)", out)
    assert match is not None
    assert float(match.group(1)) >= 1.0