"""
Saved recipe store tests.

Covers the bookmark relation at the service level: idempotent saves,
no-op removals, per-user isolation and cascade on recipe/user deletion.
"""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from test_fixtures import db_session, create_user, create_recipe
from domain.models import SavedRecipe
from repositories import SavedRecipeRepository
from services.recipe_service import RecipeService
from services.saved_recipe_service import SavedRecipeService
from services.user_service import UserService
from app.exceptions import NotFoundError


def test_save_and_list(db_session: Session):
    user = create_user(db_session)
    soup = create_recipe(db_session, title="Tomato Soup", category="Soup")

    edge = SavedRecipeService.add(db_session, user.user_id, soup.recipe_id)

    assert edge.saved_id is not None
    assert SavedRecipeService.list_for_user(db_session, user.user_id) == {soup.recipe_id}
    assert SavedRecipeService.is_saved(db_session, user.user_id, soup.recipe_id)


def test_save_twice_keeps_one_edge(db_session: Session):
    user = create_user(db_session)
    recipe = create_recipe(db_session)

    first = SavedRecipeService.add(db_session, user.user_id, recipe.recipe_id)
    second = SavedRecipeService.add(db_session, user.user_id, recipe.recipe_id)

    assert first.saved_id == second.saved_id
    assert db_session.query(SavedRecipe).count() == 1


def test_unique_pair_enforced_by_database(db_session: Session):
    user = create_user(db_session)
    recipe = create_recipe(db_session)
    repo = SavedRecipeRepository(db_session)

    repo.create_edge(user.user_id, recipe.recipe_id)
    with pytest.raises(IntegrityError):
        repo.create_edge(user.user_id, recipe.recipe_id)
    db_session.rollback()


def test_remove_then_remove_again(db_session: Session):
    user = create_user(db_session)
    recipe = create_recipe(db_session)
    SavedRecipeService.add(db_session, user.user_id, recipe.recipe_id)

    assert SavedRecipeService.remove(db_session, user.user_id, recipe.recipe_id) == 1
    assert SavedRecipeService.remove(db_session, user.user_id, recipe.recipe_id) == 0
    assert SavedRecipeService.list_for_user(db_session, user.user_id) == set()


def test_remove_unsaved_pair_is_noop(db_session: Session):
    assert SavedRecipeService.remove(db_session, uuid.uuid4(), uuid.uuid4()) == 0


def test_saved_sets_are_per_user(db_session: Session):
    alice = create_user(db_session, name="Alice Baker")
    bob = create_user(db_session, name="Bob Stone")
    cake = create_recipe(db_session, title="Chocolate Cake", category="Dessert")
    salad = create_recipe(db_session, title="Garden Salad", category="Salad")

    SavedRecipeService.add(db_session, alice.user_id, cake.recipe_id)
    SavedRecipeService.add(db_session, bob.user_id, salad.recipe_id)

    assert SavedRecipeService.list_for_user(db_session, alice.user_id) == {cake.recipe_id}
    assert SavedRecipeService.list_for_user(db_session, bob.user_id) == {salad.recipe_id}
    assert not SavedRecipeService.is_saved(db_session, alice.user_id, salad.recipe_id)


def test_list_saved_recipes_materializes_catalog_rows(db_session: Session):
    user = create_user(db_session)
    cake = create_recipe(db_session, title="Chocolate Cake", category="Dessert")
    create_recipe(db_session, title="Ribeye Steak")

    SavedRecipeService.add(db_session, user.user_id, cake.recipe_id)

    saved = SavedRecipeService.list_saved_recipes(db_session, user.user_id)
    assert [r.title for r in saved] == ["Chocolate Cake"]


def test_save_requires_existing_user_and_recipe(db_session: Session):
    user = create_user(db_session)
    recipe = create_recipe(db_session)

    with pytest.raises(NotFoundError):
        SavedRecipeService.add(db_session, uuid.uuid4(), recipe.recipe_id)
    with pytest.raises(NotFoundError):
        SavedRecipeService.add(db_session, user.user_id, uuid.uuid4())


def test_deleting_recipe_drops_saved_edges(db_session: Session):
    user = create_user(db_session)
    recipe = create_recipe(db_session)
    SavedRecipeService.add(db_session, user.user_id, recipe.recipe_id)

    assert RecipeService.delete_recipe(db_session, recipe.recipe_id) is True

    db_session.expire_all()
    assert SavedRecipeService.list_for_user(db_session, user.user_id) == set()
    assert db_session.query(SavedRecipe).count() == 0


def test_deleting_user_drops_saved_edges(db_session: Session):
    user = create_user(db_session)
    recipe = create_recipe(db_session)
    SavedRecipeService.add(db_session, user.user_id, recipe.recipe_id)

    assert UserService.delete_user(db_session, user.user_id) is True

    db_session.expire_all()
    assert db_session.query(SavedRecipe).count() == 0
