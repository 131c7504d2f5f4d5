"""API routes package"""

from . import comments, bookmarks, recipes, profiles, health

__all__ = ["comments", "bookmarks", "recipes", "profiles", "health"]
