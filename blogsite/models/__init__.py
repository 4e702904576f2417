# blogsite/models/__init__.py
"""Tablas users, user_blogs y blogs."""
from .user import User, OwnedBlog
from .blog import Blog

__all__ = ["User", "OwnedBlog", "Blog"]
