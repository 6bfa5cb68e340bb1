"""A four-lane terminal rhythm game with a metronome and timing judgement."""

__version__ = "0.1.0"