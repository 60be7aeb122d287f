"""Rolling 64-bit hashing of byte records, serial or threaded, with a scope timer, Julia-set rendering and an iota checker."""

__version__ = "0.1.0"