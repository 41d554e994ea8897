[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "breakout_neat"
version = "0.1.0"
description = "A Breakout game with NEAT neuroevolution that trains neural networks to play it"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["neat", "neuroevolution", "breakout", "genetic-algorithm", "neural-network", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
breakout-game = "breakout_neat.game:main"
breakout-train = "breakout_neat.train_cli:main"
breakout-ai = "breakout_neat.play_ai:main"
breakout-debug-genome = "breakout_neat.debug_genome:main"

[tool.hatch.build.targets.wheel]
packages = ["breakout_neat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
