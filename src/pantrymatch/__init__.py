"""Pantrymatch - which recipes can we make, and who is left hungry."""

__version__ = "0.1.0"
