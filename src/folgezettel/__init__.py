"""Hierarchical zettel IDs: derive children, siblings, parents and the next note."""

__version__ = "0.1.0"
