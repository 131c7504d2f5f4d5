"""
Comment domain mappers.
Handles transformation between ORM models and DTOs for comments and profiles.
"""

from typing import List, Optional

from domain.models import Comment, UserProfile
from domain.schemas.comment_schemas import CommentResponse
from domain.schemas.profile_schemas import ProfileInfo


class ProfileMapper:
    """Mapper for the public part of a profile."""

    @staticmethod
    def to_info(profile: Optional[UserProfile]) -> Optional[ProfileInfo]:
        if profile is None:
            return None
        return ProfileInfo(
            id=profile.id,
            name=profile.name,
            surname=profile.surname,
            image=profile.image,
        )


class CommentMapper:
    """Mapper for comment transformations."""

    @staticmethod
    def to_response(comment: Comment) -> CommentResponse:
        """
        Convert a Comment ORM model to a CommentResponse DTO.

        Args:
            comment: Comment ORM instance; its author is loaded lazily

        Returns:
            CommentResponse DTO including the author's public profile
        """
        return CommentResponse(
            id=comment.id,
            text=comment.text,
            rating=comment.rating,
            publication_time=comment.publication_time,
            recipe_id=comment.recipe_id,
            profile_id=comment.profile_id,
            profile=ProfileMapper.to_info(comment.profile),
        )

    @staticmethod
    def to_response_list(comments: List[Comment]) -> List[CommentResponse]:
        return [CommentMapper.to_response(c) for c in comments]
