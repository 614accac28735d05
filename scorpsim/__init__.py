"""Building blocks for a toric-world predator/prey simulation: vectors, colliders, JSON, random draws and graphs."""

__version__ = "0.1.0"