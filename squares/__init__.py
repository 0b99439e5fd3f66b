"""Squares board game with the StrategoMax search agent."""

__version__ = "0.1.0"
