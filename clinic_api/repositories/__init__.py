"""Persistence repositories over SQLAlchemy Core tables."""
