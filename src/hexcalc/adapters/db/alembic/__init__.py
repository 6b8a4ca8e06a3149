"""Alembic migration scripts for the HEXCALC database schema."""
