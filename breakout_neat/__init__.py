"""Breakout game, NEAT-style neuroevolution and commands to play, train and inspect networks."""

__version__ = "0.1.0"