"""Pygame clock, flappy block and snake games, plus state for Julia-set fractal viewers."""

__version__ = "0.1.0"