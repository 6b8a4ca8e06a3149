"""Integration tests.

Adapters, bootstrap and migrations against real SQLite files migrated with
Alembic. Behavior common to all stores belongs in the contract suite instead.
"""
