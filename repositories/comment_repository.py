"""
Comment Repository - Data access layer for recipe comments
"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import Comment


class CommentRepository(BaseRepository[Comment]):
    """Repository for comment data access"""

    def __init__(self, db: Session):
        super().__init__(db, Comment)

    def get_by_recipe_and_profile(
        self, recipe_id: int, profile_id: int
    ) -> Optional[Comment]:
        """Get the comment a profile left on a recipe"""
        return (
            self.db.query(Comment)
            .filter(Comment.recipe_id == recipe_id, Comment.profile_id == profile_id)
            .order_by(Comment.id)
            .first()
        )

    def get_by_profile(
        self,
        profile_id: int,
        text_filter: Optional[str] = None,
        reverse_order: bool = False,
    ) -> List[Comment]:
        """
        Get all comments of a profile.

        Args:
            profile_id: Author profile id
            text_filter: Case-insensitive substring the comment text must contain
            reverse_order: Newest first instead of oldest first

        Returns:
            Comments ordered by publication time (ties broken by Id)
        """
        query = (
            self.db.query(Comment)
            .options(selectinload(Comment.profile))
            .filter(Comment.profile_id == profile_id)
        )
        if text_filter:
            query = query.filter(Comment.text.icontains(text_filter, autoescape=True))

        if reverse_order:
            query = query.order_by(Comment.publication_time.desc(), Comment.id.desc())
        else:
            query = query.order_by(Comment.publication_time.asc(), Comment.id.asc())
        return query.all()

    def delete_comment(self, comment: Comment) -> None:
        self.db.delete(comment)
        self.db.commit()
