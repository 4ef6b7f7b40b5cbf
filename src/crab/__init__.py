"""Crab - a beach arcade game about catching fish and dodging birds."""

__version__ = "0.1.0"
