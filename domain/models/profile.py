"""
Profile-related database models.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    LargeBinary,
    String,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base, SCHEMA, utcnow


class UserProfile(Base):
    """Registered user of the application"""

    __tablename__ = "UserProfile"
    __table_args__ = {"schema": SCHEMA}

    id = Column("Id", Integer, primary_key=True, index=True, unique=True)
    name = Column("Name", String(50), nullable=False)
    surname = Column("Surname", String(50), nullable=False)
    email = Column("Email", String(100), nullable=False)
    image = Column("Image", LargeBinary, nullable=True)
    is_admin = Column("IsAdmin", Boolean, nullable=False, default=False)
    reference_link = Column("ReferenceLink", String(100), nullable=False)

    # Relationships
    authorization = relationship(
        "Authorization",
        back_populates="user_profile",
        uselist=False,
        cascade="all, delete-orphan",
    )
    bookmarks = relationship(
        "Bookmark", back_populates="profile", cascade="all, delete-orphan"
    )
    comments = relationship(
        "Comment", back_populates="profile", cascade="all, delete-orphan"
    )
    recipes = relationship(
        "CookingRecipe", back_populates="publisher", cascade="all, delete-orphan"
    )


class Authorization(Base):
    """Login credentials, one-to-one with a profile"""

    __tablename__ = "Authorization"
    __table_args__ = {"schema": SCHEMA}

    id = Column("Id", Integer, primary_key=True, index=True, unique=True)
    login = Column("Login", String(50), nullable=False, unique=True, index=True)
    # Stored already hashed
    password = Column("Password", String(100), nullable=False)
    user_profile_id = Column(
        "UserProfileId",
        Integer,
        ForeignKey(f"{SCHEMA}.UserProfile.Id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )

    user_profile = relationship("UserProfile", back_populates="authorization")


class FriendList(Base):
    """Directional friendship: requester -> addressee"""

    __tablename__ = "FriendList"
    __table_args__ = {"schema": SCHEMA}

    id = Column("Id", Integer, primary_key=True, index=True, unique=True)
    requester_id = Column(
        "RequesterId",
        Integer,
        ForeignKey(f"{SCHEMA}.UserProfile.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    addressee_id = Column(
        "AddresseeId",
        Integer,
        ForeignKey(f"{SCHEMA}.UserProfile.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date_time = Column("DateTime", DateTime(timezone=True), nullable=False, default=utcnow)

    requester = relationship("UserProfile", foreign_keys=[requester_id])
    addressee = relationship("UserProfile", foreign_keys=[addressee_id])
