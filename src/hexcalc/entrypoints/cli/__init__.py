"""HEXCALC command-line interface."""
