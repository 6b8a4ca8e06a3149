"""Adapters for HEXCALC.

Concrete implementations of the output ports declared in `hexcalc.interfaces`:
observers, calculation stores (in-memory and SQLAlchemy-backed), ID generators,
and the database plumbing (engine, metadata, custom types, migrations) the
durable store needs.

Dependency rule: may import `hexcalc.interfaces` and `hexcalc.domain`; must not
import `hexcalc.service_layer`, `hexcalc.bootstrap` or `hexcalc.entrypoints`.
"""
