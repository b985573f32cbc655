"""Relational persistence (SQLAlchemy async)."""
