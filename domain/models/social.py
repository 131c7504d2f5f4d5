"""
Comments, bookmarks and recommendations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base, SCHEMA, utcnow

MIN_RATING = 0
MAX_RATING = 5


class Comment(Base):
    """Rated text remark by a profile on a recipe"""

    __tablename__ = "Comment"
    __table_args__ = (
        CheckConstraint(
            f'"Rating" BETWEEN {MIN_RATING} AND {MAX_RATING}', name="Rating_Constraint"
        ),
        UniqueConstraint("ProfileId", "RecipeId", name="Comment_Profile_Recipe_Key"),
        {"schema": SCHEMA},
    )

    id = Column("Id", Integer, primary_key=True, index=True, unique=True)
    text = Column("Text", String(200), nullable=True)
    rating = Column("Rating", Float, nullable=False)
    profile_id = Column(
        "ProfileId",
        Integer,
        ForeignKey(f"{SCHEMA}.UserProfile.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipe_id = Column(
        "RecipeId",
        Integer,
        ForeignKey(f"{SCHEMA}.CookingRecipe.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    publication_time = Column(
        "PublicationTime", DateTime(timezone=True), nullable=False, default=utcnow
    )

    profile = relationship("UserProfile", back_populates="comments")
    recipe = relationship("CookingRecipe", back_populates="comments")


class Bookmark(Base):
    """A recipe saved by a profile"""

    __tablename__ = "Bookmark"
    __table_args__ = (
        UniqueConstraint("ProfileId", "RecipeId", name="Bookmark_Profile_Recipe_Key"),
        {"schema": SCHEMA},
    )

    id = Column("Id", Integer, primary_key=True, index=True, unique=True)
    profile_id = Column(
        "ProfileId",
        Integer,
        ForeignKey(f"{SCHEMA}.UserProfile.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipe_id = Column(
        "RecipeId",
        Integer,
        ForeignKey(f"{SCHEMA}.CookingRecipe.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    add_time = Column("AddTime", DateTime(timezone=True), nullable=False, default=utcnow)

    profile = relationship("UserProfile", back_populates="bookmarks")
    recipe = relationship("CookingRecipe", back_populates="bookmarks")


class Recommendation(Base):
    """A recipe recommended by one profile to another"""

    __tablename__ = "Recommendation"
    __table_args__ = {"schema": SCHEMA}

    id = Column("Id", Integer, primary_key=True, index=True, unique=True)
    from_user_id = Column(
        "FromUserId",
        Integer,
        ForeignKey(f"{SCHEMA}.UserProfile.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    to_user_id = Column(
        "ToUserId",
        Integer,
        ForeignKey(f"{SCHEMA}.UserProfile.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipe_id = Column(
        "RecipeId",
        Integer,
        ForeignKey(f"{SCHEMA}.CookingRecipe.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text = Column("Text", String(200), nullable=False)

    from_user = relationship("UserProfile", foreign_keys=[from_user_id])
    to_user = relationship("UserProfile", foreign_keys=[to_user_id])
    recipe = relationship("CookingRecipe")
