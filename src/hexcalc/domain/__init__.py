"""Domain layer for HEXCALC.

Contains business rules: the immutable `Calculation` model, its value objects,
and the domain error taxonomy. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `hexcalc.adapters` or `hexcalc.entrypoints`.
"""
