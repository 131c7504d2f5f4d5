"""
Domain enums for the CookingRecipes application.
"""

import enum


class Role(str, enum.Enum):
    """Authorization roles carried in the bearer token"""

    USER = "User"
    ADMIN = "Admin"
