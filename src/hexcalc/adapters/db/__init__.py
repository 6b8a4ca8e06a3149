"""Database plumbing shared by the SQLAlchemy-backed adapters."""
