"""Interfaces (application boundary) for HEXCALC.

Defines framework-free output-port contracts as ABCs: the calculation
observer, the calculation store, and the ID generator that stores use to mint
identifiers. Business rules stay out of this package.

Dependency rule: this package may only import from `hexcalc.domain`. It may be
imported by `hexcalc.service_layer`, `hexcalc.adapters`, and
`hexcalc.bootstrap`.
"""
