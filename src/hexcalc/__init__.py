"""HEXCALC

Exact-precision decimal arithmetic behind a ports-and-adapters core.
Every completed calculation is handed to an observer and persisted to a
store, neither of which the arithmetic knows anything about.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
