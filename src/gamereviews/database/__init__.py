"""
Database module for the Game Reviews API
"""

from .store import InMemoryDatabase, get_database, init_database, reset_database

__all__ = ["InMemoryDatabase", "get_database", "init_database", "reset_database"]
