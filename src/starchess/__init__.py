"""Starchess: a two-player chess set with click-to-move turn management."""

__version__ = "0.1.0"
