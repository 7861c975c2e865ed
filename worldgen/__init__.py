"""Procedural star system and mainworld generation."""

__version__ = "0.1.0"
