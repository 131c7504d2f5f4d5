from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from app.exceptions import ConflictError, NotFoundError, ServiceValidationError
from app.security import Caller
from domain.enums import Role
from domain.models import Comment, MIN_RATING, MAX_RATING
from repositories import CommentRepository, ProfileRepository, RecipeRepository
from services.authorization import ensure_allowed

logger = logging.getLogger("cookingrecipes.comments")


class CommentService:
    """Business logic for the comment lifecycle"""

    @staticmethod
    def validate_rating(rating: float) -> None:
        if rating is None or not (MIN_RATING <= rating <= MAX_RATING):
            raise ServiceValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}",
                details={"rating": rating},
            )

    @staticmethod
    def _commit(db: Session, comment: Comment, action: str) -> Comment:
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.error(f"comment_{action}_failed error={str(e)}")
            raise ServiceValidationError(f"Database integrity error during comment {action}")
        db.refresh(comment)
        return comment

    @staticmethod
    def add_comment(
        db: Session,
        profile_id: int,
        recipe_id: int,
        text: Optional[str],
        rating: float,
    ) -> Comment:
        """
        Add a comment by a profile to a recipe.

        Raises:
            ServiceValidationError: rating outside [0, 5]
            NotFoundError: the profile or the recipe does not exist
            ConflictError: the profile already commented on the recipe
        """
        CommentService.validate_rating(rating)

        if not ProfileRepository(db).exists(profile_id):
            raise NotFoundError(f"Profile {profile_id} not found")
        if not RecipeRepository(db).exists(recipe_id):
            raise NotFoundError(f"Recipe {recipe_id} not found")

        comment_repo = CommentRepository(db)
        if comment_repo.get_by_recipe_and_profile(recipe_id, profile_id):
            raise ConflictError(
                f"Profile {profile_id} already commented on recipe {recipe_id}"
            )

        comment = Comment(
            profile_id=profile_id, recipe_id=recipe_id, text=text, rating=rating
        )
        db.add(comment)
        try:
            db.commit()
        except IntegrityError as e:
            # Unique (ProfileId, RecipeId) key
            db.rollback()
            logger.warning(f"comment_add_conflict error={str(e)}")
            raise ConflictError(
                f"Profile {profile_id} already commented on recipe {recipe_id}"
            )
        db.refresh(comment)

        logger.info(
            f"comment_added comment_id={comment.id} profile_id={profile_id} "
            f"recipe_id={recipe_id}"
        )
        return comment

    @staticmethod
    def _apply_edit(db: Session, comment: Comment, text: Optional[str], rating: float) -> Comment:
        comment.text = text
        comment.rating = rating
        CommentService._commit(db, comment, "edit")
        logger.info(f"comment_edited comment_id={comment.id}")
        return comment

    @staticmethod
    def edit_comment(
        db: Session, comment_id: int, text: Optional[str], rating: float
    ) -> Comment:
        """Edit any comment (Admin variant)"""
        CommentService.validate_rating(rating)
        comment = CommentRepository(db).get_by_id(comment_id)
        if not comment:
            logger.warning(f"comment_not_found comment_id={comment_id}")
            raise NotFoundError(f"Comment {comment_id} not found")
        return CommentService._apply_edit(db, comment, text, rating)

    @staticmethod
    def edit_comment_by_token(
        db: Session,
        caller: Caller,
        text: Optional[str],
        rating: float,
        recipe_id: Optional[int] = None,
        comment_id: Optional[int] = None,
    ) -> Comment:
        """
        Edit the caller's own comment.

        The comment is addressed either by comment_id or by the recipe it was
        left on. Addressing someone else's comment raises ForbiddenError.
        """
        CommentService.validate_rating(rating)
        comment_repo = CommentRepository(db)

        if comment_id is not None:
            comment = comment_repo.get_by_id(comment_id)
            if not comment:
                raise NotFoundError(f"Comment {comment_id} not found")
            ensure_allowed(
                caller,
                Role.USER,
                owner_id=comment.profile_id,
                message="Only the author can edit this comment",
            )
        elif recipe_id is not None:
            comment = comment_repo.get_by_recipe_and_profile(recipe_id, caller.profile_id)
            if not comment:
                raise NotFoundError(
                    f"No comment by profile {caller.profile_id} on recipe {recipe_id}"
                )
        else:
            raise ServiceValidationError("Either recipeId or commentId is required")

        return CommentService._apply_edit(db, comment, text, rating)

    @staticmethod
    def delete_comment(db: Session, comment_id: int) -> None:
        """Delete any comment by id (Admin variant)"""
        comment_repo = CommentRepository(db)
        comment = comment_repo.get_by_id(comment_id)
        if not comment:
            logger.warning(f"comment_not_found comment_id={comment_id}")
            raise NotFoundError(f"Comment {comment_id} not found")
        comment_repo.delete_comment(comment)
        logger.info(f"comment_deleted comment_id={comment_id}")

    @staticmethod
    def delete_comment_by_token(db: Session, caller: Caller, recipe_id: int) -> None:
        """Delete the caller's comment on a recipe; nothing is deleted when there is none"""
        comment_repo = CommentRepository(db)
        comment = comment_repo.get_by_recipe_and_profile(recipe_id, caller.profile_id)
        if not comment:
            logger.warning(
                f"comment_not_found recipe_id={recipe_id} profile_id={caller.profile_id}"
            )
            raise NotFoundError(
                f"No comment by profile {caller.profile_id} on recipe {recipe_id}"
            )
        comment_id = comment.id
        comment_repo.delete_comment(comment)
        logger.info(
            f"comment_deleted comment_id={comment_id} profile_id={caller.profile_id}"
        )

    @staticmethod
    def get_comment(
        db: Session,
        comment_id: Optional[int] = None,
        recipe_id: Optional[int] = None,
        profile_id: Optional[int] = None,
    ) -> Comment:
        """Look a comment up by id, or by the (recipe, author) pair"""
        comment_repo = CommentRepository(db)
        if comment_id is not None:
            comment = comment_repo.get_by_id(comment_id)
            if not comment:
                raise NotFoundError(f"Comment {comment_id} not found")
            return comment

        if recipe_id is None or profile_id is None:
            raise ServiceValidationError(
                "Either commentId or both recipeId and profileId are required"
            )
        comment = comment_repo.get_by_recipe_and_profile(recipe_id, profile_id)
        if not comment:
            raise NotFoundError(
                f"No comment by profile {profile_id} on recipe {recipe_id}"
            )
        return comment

    @staticmethod
    def get_comment_by_token(db: Session, caller: Caller, recipe_id: int) -> Comment:
        return CommentService.get_comment(
            db, recipe_id=recipe_id, profile_id=caller.profile_id
        )

    @staticmethod
    def get_profile_comments(
        db: Session,
        profile_id: int,
        text_filter: Optional[str] = None,
        reverse_order: bool = False,
    ) -> List[Comment]:
        """All comments of a profile, optionally text-filtered and newest first"""
        comments = CommentRepository(db).get_by_profile(
            profile_id, text_filter=text_filter, reverse_order=reverse_order
        )
        logger.info(
            f"profile_comments_fetched profile_id={profile_id} count={len(comments)}"
        )
        return comments
