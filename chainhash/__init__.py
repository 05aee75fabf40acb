"""A fixed-size hash table of string keys with sorted collision chains, and a demonstration."""

__version__ = "0.1.0"

__all__ = ["chain", "table", "demo"]