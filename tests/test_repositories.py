"""
Tests for the repository classes against a real (SQLite) database.

This test suite validates the data access layer directly:
- ProfileRepository: profile + credentials creation
- RecipeRepository: recipe creation with ingredient lines, detail loading
- CommentRepository: lookup by (recipe, profile), filtering and ordering
- BookmarkRepository: bookmarked recipes in bookmark order
- AuditRepository: append-only LoggingInfo rows
"""

import pytest
from datetime import datetime, timedelta
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from test_fixtures import db_session, make_profile, make_recipe, make_comment
from app.exceptions import ConflictError
from domain.models import (
    Authorization,
    Bookmark,
    Comment,
    IngredientUnit,
    LoggingInfo,
    RecipeCategory,
    UserProfile,
)
from repositories import (
    AuditRepository,
    BookmarkRepository,
    CommentRepository,
    IngredientUnitRepository,
    ProfileRepository,
    RecipeCategoryRepository,
    RecipeRepository,
)


# =============================================================================
# PROFILE REPOSITORY TESTS
# =============================================================================


def test_profile_repository_creates_authorization(db_session: Session):
    """
    Verifies:
    - Profile gets an integer Id
    - The one-to-one Authorization row is created with it
    """
    profile = make_profile(db_session)

    assert isinstance(profile.id, int)
    assert profile.authorization is not None
    assert profile.authorization.user_profile_id == profile.id

    stored = db_session.query(Authorization).one()
    assert stored.user_profile_id == profile.id
    assert stored.login.startswith("sarah-")


def test_profile_repository_duplicate_login_conflicts(db_session: Session):
    repo = ProfileRepository(db_session)
    repo.create_profile(
        name="Anna",
        surname="Ivanova",
        email="anna@example.com",
        reference_link="https://example.com/anna",
        login="anna",
        password_hash="hash",
    )

    with pytest.raises(ConflictError):
        repo.create_profile(
            name="Anna",
            surname="Petrova",
            email="anna.p@example.com",
            reference_link="https://example.com/anna-p",
            login="anna",
            password_hash="hash",
        )

    assert db_session.query(UserProfile).count() == 1


def test_profile_repository_delete_missing_returns_false(db_session: Session):
    assert ProfileRepository(db_session).delete_profile(999) is False


# =============================================================================
# RECIPE REPOSITORY TESTS
# =============================================================================


def test_recipe_repository_create_with_ingredients(db_session: Session):
    """
    Verifies:
    - Ingredient lines are persisted with their units
    - get_with_details loads ingredients, comments and publisher
    """
    publisher = make_profile(db_session, "chef")
    recipe = make_recipe(
        db_session,
        publisher.id,
        name="Olivier salad",
        category="Salads",
        ingredients=(("potato", 3, "pcs"), ("mayonnaise", 150, "g")),
    )

    loaded = RecipeRepository(db_session).get_with_details(recipe.id)

    assert loaded.name == "Olivier salad"
    assert loaded.recipe_category.name == "Salads"
    assert loaded.publisher.id == publisher.id
    assert sorted(i.name for i in loaded.ingredients) == ["mayonnaise", "potato"]
    assert {i.ingredient_unit.name for i in loaded.ingredients} == {"pcs", "g"}
    assert loaded.comments == []


def test_recipe_repository_get_with_details_missing(db_session: Session):
    assert RecipeRepository(db_session).get_with_details(12345) is None


def test_lookup_get_or_create_is_idempotent(db_session: Session):
    categories = RecipeCategoryRepository(db_session)
    units = IngredientUnitRepository(db_session)

    first = categories.get_or_create("Desserts")
    second = categories.get_or_create("Desserts")
    assert first.id == second.id
    assert db_session.query(RecipeCategory).count() == 1

    assert units.get_or_create("ml").id == units.get_or_create("ml").id
    assert db_session.query(IngredientUnit).count() == 1


# =============================================================================
# COMMENT REPOSITORY TESTS
# =============================================================================


def test_comment_repository_get_by_recipe_and_profile(db_session: Session):
    author = make_profile(db_session)
    other = make_profile(db_session, "casual")
    recipe = make_recipe(db_session, author.id)
    comment = make_comment(db_session, author.id, recipe.id, "Great soup", 5)

    repo = CommentRepository(db_session)
    assert repo.get_by_recipe_and_profile(recipe.id, author.id).id == comment.id
    assert repo.get_by_recipe_and_profile(recipe.id, other.id) is None


def test_comment_repository_filter_is_case_insensitive(db_session: Session):
    author = make_profile(db_session)
    first = make_recipe(db_session, author.id, name="Borscht")
    second = make_recipe(db_session, author.id, name="Pancakes")
    third = make_recipe(db_session, author.id, name="Kvass")
    make_comment(db_session, author.id, first.id, "Very TASTY indeed", 5)
    make_comment(db_session, author.id, second.id, "tasty enough", 4)
    make_comment(db_session, author.id, third.id, "Too sour", 2)

    found = CommentRepository(db_session).get_by_profile(author.id, text_filter="Tasty")

    assert [c.recipe_id for c in found] == [first.id, second.id]


def test_comment_repository_filter_escapes_wildcards(db_session: Session):
    author = make_profile(db_session)
    first = make_recipe(db_session, author.id, name="Borscht")
    second = make_recipe(db_session, author.id, name="Pancakes")
    make_comment(db_session, author.id, first.id, "100% recommended", 5)
    make_comment(db_session, author.id, second.id, "100 times better", 4)

    found = CommentRepository(db_session).get_by_profile(author.id, text_filter="100%")

    assert [c.recipe_id for c in found] == [first.id]


def test_comment_repository_ordering(db_session: Session):
    """
    Verifies:
    - Default order is oldest first by publication time
    - reverse_order gives newest first
    """
    author = make_profile(db_session)
    recipes = [make_recipe(db_session, author.id, name=f"Recipe {i}") for i in range(3)]
    base = datetime(2024, 1, 1, 12, 0, 0)
    # Insert out of chronological order
    for offset, recipe in zip((2, 0, 1), recipes):
        db_session.add(
            Comment(
                profile_id=author.id,
                recipe_id=recipe.id,
                text=f"day {offset}",
                rating=3,
                publication_time=base + timedelta(days=offset),
            )
        )
    db_session.commit()

    repo = CommentRepository(db_session)
    assert [c.text for c in repo.get_by_profile(author.id)] == ["day 0", "day 1", "day 2"]
    assert [c.text for c in repo.get_by_profile(author.id, reverse_order=True)] == [
        "day 2",
        "day 1",
        "day 0",
    ]


def test_comment_rating_check_constraint(db_session: Session):
    """Ratings outside [0, 5] are rejected by the database itself"""
    author = make_profile(db_session)
    recipe = make_recipe(db_session, author.id)

    db_session.add(Comment(profile_id=author.id, recipe_id=recipe.id, text="x", rating=7))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()

    assert db_session.query(Comment).count() == 0


def test_comment_requires_existing_recipe(db_session: Session):
    author = make_profile(db_session)

    db_session.add(Comment(profile_id=author.id, recipe_id=424242, text="x", rating=3))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_comment_unique_per_profile_and_recipe(db_session: Session):
    """A second comment by the same profile on the same recipe is rejected by the database"""
    author = make_profile(db_session)
    recipe = make_recipe(db_session, author.id)
    make_comment(db_session, author.id, recipe.id, "first", 4)

    db_session.add(Comment(profile_id=author.id, recipe_id=recipe.id, text="second", rating=2))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()

    assert [c.text for c in db_session.query(Comment).all()] == ["first"]


def test_comment_repository_get_by_profile_loads_authors(db_session: Session):
    """
    Verifies:
    - Authors come back with the comments, so mapping them issues no per-row query
    """
    author = make_profile(db_session)
    recipes = [make_recipe(db_session, author.id, name=f"Dish {i}") for i in range(3)]
    for recipe in recipes:
        make_comment(db_session, author.id, recipe.id)
    db_session.expire_all()

    found = CommentRepository(db_session).get_by_profile(author.id)

    assert len(found) == 3
    assert all("profile" not in inspect(c).unloaded for c in found)


# =============================================================================
# BOOKMARK REPOSITORY TESTS
# =============================================================================


def test_bookmark_repository_returns_recipes_in_bookmark_order(db_session: Session):
    reader = make_profile(db_session, "casual")
    publisher = make_profile(db_session, "chef")
    soup = make_recipe(db_session, publisher.id, name="Mushroom soup")
    cake = make_recipe(db_session, publisher.id, name="Honey cake")
    base = datetime(2024, 3, 1, 9, 0, 0)
    db_session.add(Bookmark(profile_id=reader.id, recipe_id=cake.id, add_time=base))
    db_session.add(
        Bookmark(profile_id=reader.id, recipe_id=soup.id, add_time=base + timedelta(hours=1))
    )
    db_session.commit()

    repo = BookmarkRepository(db_session)
    assert [r.name for r in repo.get_bookmarked_recipes(reader.id)] == [
        "Honey cake",
        "Mushroom soup",
    ]
    assert [r.name for r in repo.get_bookmarked_recipes(reader.id, reverse_order=True)] == [
        "Mushroom soup",
        "Honey cake",
    ]
    assert [r.name for r in repo.get_bookmarked_recipes(reader.id, text_filter="SOUP")] == [
        "Mushroom soup"
    ]
    assert repo.get_bookmarked_recipes(publisher.id) == []


def test_bookmark_unique_per_profile_and_recipe(db_session: Session):
    reader = make_profile(db_session, "casual")
    recipe = make_recipe(db_session, reader.id)
    db_session.add(Bookmark(profile_id=reader.id, recipe_id=recipe.id))
    db_session.commit()

    db_session.add(Bookmark(profile_id=reader.id, recipe_id=recipe.id))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()

    assert db_session.query(Bookmark).count() == 1


# =============================================================================
# AUDIT REPOSITORY TESTS
# =============================================================================


def test_audit_repository_truncates_to_column_size(db_session: Session):
    repo = AuditRepository(db_session)
    entry = repo.record("AddComment", "u" * 250)

    assert len(entry.user_info) == 100
    assert entry.date_time is not None
    stored = db_session.query(LoggingInfo).one()
    assert stored.id == entry.id
    assert stored.method_name == "AddComment"


def test_authorization_is_removed_with_profile(db_session: Session):
    profile = make_profile(db_session)

    assert ProfileRepository(db_session).delete_profile(profile.id) is True
    assert db_session.query(Authorization).count() == 0
