"""Savings-account building blocks: models, SQLite storage, services, Flask handlers and migrations."""

__version__ = "0.1.0"