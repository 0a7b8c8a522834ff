"""
Database module - MongoDB connection pool and collection definitions.
"""
from profiles_app.database.connections import ConnectionPool
from profiles_app.database.registry import create_indexes
from profiles_app.database.databases import profiles_db

__all__ = [
    "ConnectionPool",
    "create_indexes",
    "profiles_db",
]
