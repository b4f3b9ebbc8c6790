"""Rules engine and scene geometry for a two-player hex board game."""

__version__ = "0.1.0"