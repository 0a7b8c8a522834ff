"""
API routers.
"""
from profiles_app.routers import auth, health, users

__all__ = ["auth", "health", "users"]
