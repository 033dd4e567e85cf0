"""Reduced ordered binary decision diagram manager with Graphviz export and a small command."""

__version__ = "0.1.0"
__all__ = ["cli", "manager"]