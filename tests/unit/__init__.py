"""Unit tests.

The calculator, message bus and handlers run against recording fakes of the
observer and store ports. The SQLAlchemy helpers may use an in-memory SQLite
engine, which is fast enough to count as a unit.
"""
