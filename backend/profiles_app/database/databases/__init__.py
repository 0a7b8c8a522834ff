"""
Database definitions and collection constants.
"""
from profiles_app.database.databases import profiles_db

__all__ = ["profiles_db"]
