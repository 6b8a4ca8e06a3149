"""Contract tests.

Each suite parametrizes a fixture over every adapter of one port (calculation
stores, id generators) and asserts only the port's public behavior, so the
adapters stay interchangeable.
"""
