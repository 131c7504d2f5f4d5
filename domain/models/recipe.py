"""
Recipe-related database models.
"""

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    LargeBinary,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base, SCHEMA, utcnow


class RecipeCategory(Base):
    """Recipe category (soups, desserts, ...)"""

    __tablename__ = "RecipeCategory"
    __table_args__ = {"schema": SCHEMA}

    id = Column("Id", Integer, primary_key=True, index=True, unique=True)
    name = Column("Name", String(50), nullable=False)

    recipes = relationship(
        "CookingRecipe", back_populates="recipe_category", cascade="all, delete-orphan"
    )


class CookingRecipe(Base):
    """Published cooking recipe"""

    __tablename__ = "CookingRecipe"
    __table_args__ = {"schema": SCHEMA}

    id = Column("Id", Integer, primary_key=True, index=True, unique=True)
    name = Column("Name", String(50), nullable=False)
    description = Column("Description", Text, nullable=True)
    image = Column("Image", LargeBinary, nullable=True)
    publication_time = Column(
        "PublicationTime", DateTime(timezone=True), nullable=False, default=utcnow
    )
    publisher_id = Column(
        "PublisherId",
        Integer,
        ForeignKey(f"{SCHEMA}.UserProfile.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipe_category_id = Column(
        "RecipeCategoryId",
        Integer,
        ForeignKey(f"{SCHEMA}.RecipeCategory.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    publisher = relationship("UserProfile", back_populates="recipes")
    recipe_category = relationship("RecipeCategory", back_populates="recipes")
    ingredients = relationship(
        "IngredientsList", back_populates="cooking_recipe", cascade="all, delete-orphan"
    )
    comments = relationship(
        "Comment", back_populates="recipe", cascade="all, delete-orphan"
    )
    bookmarks = relationship(
        "Bookmark", back_populates="recipe", cascade="all, delete-orphan"
    )


class IngredientUnit(Base):
    """Measurement unit for an ingredient line ("g", "cup", ...)"""

    __tablename__ = "IngredientUnit"
    __table_args__ = {"schema": SCHEMA}

    id = Column("Id", Integer, primary_key=True, index=True, unique=True)
    name = Column("Name", String(20), nullable=False)

    ingredients_lists = relationship(
        "IngredientsList", back_populates="ingredient_unit", cascade="all, delete-orphan"
    )


class IngredientsList(Base):
    """One ingredient line of a recipe"""

    __tablename__ = "IngredientsList"
    __table_args__ = {"schema": SCHEMA}

    id = Column("Id", Integer, primary_key=True, index=True, unique=True)
    name = Column("Name", String(50), nullable=False)
    value = Column("Value", Float, nullable=False)
    ingredient_unit_id = Column(
        "IngredientUnitId",
        Integer,
        ForeignKey(f"{SCHEMA}.IngredientUnit.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    cooking_recipe_id = Column(
        "CookingRecipeId",
        Integer,
        ForeignKey(f"{SCHEMA}.CookingRecipe.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    ingredient_unit = relationship("IngredientUnit", back_populates="ingredients_lists")
    cooking_recipe = relationship("CookingRecipe", back_populates="ingredients")
