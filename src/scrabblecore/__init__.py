"""Rules and scoring engine for a two-player word-placement game."""

__version__ = "0.1.0"
