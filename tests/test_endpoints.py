import uuid

from fastapi.testclient import TestClient

from main import app
from test_fixtures import (
    client,
    admin_client,
    db_session,
    unique_email,
    make_recipe,
    recipe_payload,
    create_user,
    create_recipe,
)
from services.recipe_service import RecipeService
from services.user_service import UserService


def test_health_check():
    r = client.get("/api/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["service"] == "Chef Fest"
    assert body["database"] == "ok"
    assert "X-Request-ID" in r.headers


# =============================================================================
# RECIPES
# =============================================================================


def test_recipes_list_uses_camel_case(db_session):
    create_recipe(db_session, title="Tomato Soup", category="Soup", is_vegetarian=True)

    r = client.get("/api/recipes")

    assert r.status_code == 200
    [recipe] = r.json()
    assert recipe["title"] == "Tomato Soup"
    assert recipe["isVegetarian"] is True
    assert recipe["imageUrl"] == "https://example.com/chicken.jpg"
    assert recipe["rating"] == 0.0
    assert recipe["reviewCount"] == 0
    assert "id" in recipe


def test_recipes_list_filters_by_query_params(db_session):
    create_recipe(db_session, title="Tomato Soup", category="Soup", price=9.0, is_vegetarian=True)
    create_recipe(db_session, title="Lemon Chicken", price=15.0)
    create_recipe(db_session, title="Chicken Pie", price=12.0, is_trending=True)

    r = client.get("/api/recipes", params={"priceRange": "10-20"})
    assert sorted(x["title"] for x in r.json()) == ["Chicken Pie", "Lemon Chicken"]

    r = client.get("/api/recipes", params={"q": "chicken", "trending": "true"})
    assert [x["title"] for x in r.json()] == ["Chicken Pie"]

    r = client.get("/api/recipes", params={"category": "Soup", "vegetarian": "true"})
    assert [x["title"] for x in r.json()] == ["Tomato Soup"]

    r = client.get("/api/recipes", params={"priceRange": "Under $10"})
    assert [x["title"] for x in r.json()] == ["Tomato Soup"]


def test_recipes_list_rejects_unknown_price_range():
    r = client.get("/api/recipes", params={"priceRange": "cheap"})
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert "price" in body["error"].lower()


def test_recipes_list_with_monkeypatched_service(monkeypatch):
    recipes = [make_recipe(title="Stubbed Stew")]
    monkeypatch.setattr(RecipeService, "list_recipes", lambda db, criteria=None: recipes)

    r = client.get("/api/recipes")

    assert r.status_code == 200
    assert r.json()[0]["title"] == "Stubbed Stew"


def test_recipe_categories():
    r = client.get("/api/recipes/categories")
    assert r.status_code == 200
    body = r.json()
    assert body["categories"][0] == "All"
    assert "under-10" in body["priceRanges"]


def test_get_recipe_and_not_found(db_session):
    recipe = create_recipe(db_session, title="Chocolate Cake", category="Dessert")

    r = client.get(f"/api/recipes/{recipe.recipe_id}")
    assert r.status_code == 200
    assert r.json()["id"] == str(recipe.recipe_id)

    r = client.get(f"/api/recipes/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Recipe not found"}


def test_recipe_writes_require_admin():
    r = client.post("/api/recipes", json=recipe_payload())
    assert r.status_code == 401
    assert r.json()["success"] is False

    r = client.delete(f"/api/recipes/{uuid.uuid4()}")
    assert r.status_code == 401


def test_admin_recipe_crud(admin_client):
    r = admin_client.post("/api/recipes", json=recipe_payload(rating=5))
    assert r.status_code == 201
    created = r.json()
    assert created["title"] == "Garden Salad"
    assert created["rating"] == 0.0
    recipe_id = created["id"]

    r = admin_client.patch(f"/api/recipes/{recipe_id}", json={"price": 9.0, "isTrending": True})
    assert r.status_code == 200
    assert r.json()["price"] == 9.0
    assert r.json()["isTrending"] is True
    assert r.json()["title"] == "Garden Salad"

    r = admin_client.delete(f"/api/recipes/{recipe_id}")
    assert r.status_code == 200
    assert r.json() == {"success": True}

    r = admin_client.delete(f"/api/recipes/{recipe_id}")
    assert r.status_code == 404


def test_admin_create_recipe_validation(admin_client):
    r = admin_client.post("/api/recipes", json=recipe_payload(price=-1))
    assert r.status_code == 422
    assert r.json()["success"] is False

    r = admin_client.post("/api/recipes", json=recipe_payload(ingredients=["  "]))
    assert r.status_code == 422


# =============================================================================
# SAVED RECIPES
# =============================================================================


def test_saved_recipes_flow(db_session):
    user = create_user(db_session)
    recipe = create_recipe(db_session, title="Chocolate Cake")
    user_id, recipe_id = str(user.user_id), str(recipe.recipe_id)

    body = {"userId": user_id, "recipeId": recipe_id}
    r1 = client.post("/api/saved-recipes", json=body)
    r2 = client.post("/api/saved-recipes", json=body)
    assert r1.status_code == 201
    assert r2.status_code == 201
    assert r1.json()["id"] == r2.json()["id"]

    r = client.get(f"/api/saved-recipes/{user_id}")
    assert r.json() == [{"recipeId": recipe_id}]

    r = client.get(f"/api/saved-recipes/{user_id}/recipes")
    assert [x["title"] for x in r.json()] == ["Chocolate Cake"]

    r = client.delete(f"/api/saved-recipes/{user_id}/{recipe_id}")
    assert r.json() == {"success": True}
    r = client.delete(f"/api/saved-recipes/{user_id}/{recipe_id}")
    assert r.status_code == 200

    assert client.get(f"/api/saved-recipes/{user_id}").json() == []


def test_save_unknown_recipe_is_404(db_session):
    user = create_user(db_session)
    r = client.post(
        "/api/saved-recipes",
        json={"userId": str(user.user_id), "recipeId": str(uuid.uuid4())},
    )
    assert r.status_code == 404


# =============================================================================
# REVIEWS
# =============================================================================


def test_review_flow_updates_rating(db_session, admin_client):
    user = create_user(db_session, name="Emma Johnson")
    recipe = create_recipe(db_session)
    recipe_id = str(recipe.recipe_id)

    ids = []
    for rating in (5, 3, 4):
        r = client.post(
            "/api/reviews",
            json={
                "userId": str(user.user_id),
                "recipeId": recipe_id,
                "rating": rating,
                "text": "Really good",
            },
        )
        assert r.status_code == 201
        assert r.json()["userName"] == "Emma Johnson"
        ids.append(r.json()["id"])

    assert client.get(f"/api/recipes/{recipe_id}").json()["rating"] == 4.0

    r = client.get(f"/api/reviews/{recipe_id}")
    assert len(r.json()) == 3

    r = admin_client.delete(f"/api/reviews/{ids[1]}")
    assert r.json() == {"success": True}
    assert client.get(f"/api/recipes/{recipe_id}").json()["rating"] == 4.5

    r = admin_client.get("/api/all-reviews")
    assert r.status_code == 200
    assert len(r.json()) == 2


def test_review_rating_out_of_range(db_session):
    user = create_user(db_session)
    recipe = create_recipe(db_session)
    r = client.post(
        "/api/reviews",
        json={
            "userId": str(user.user_id),
            "recipeId": str(recipe.recipe_id),
            "rating": 6,
            "text": "Too good",
        },
    )
    assert r.status_code == 422
    assert client.get(f"/api/recipes/{recipe.recipe_id}").json()["reviewCount"] == 0


def test_reviews_of_unknown_recipe():
    r = client.get(f"/api/reviews/{uuid.uuid4()}")
    assert r.status_code == 404


def test_all_reviews_requires_admin():
    assert client.get("/api/all-reviews").status_code == 401


# =============================================================================
# USERS
# =============================================================================


def test_users_create_get_update():
    r = client.post(
        "/api/users",
        json={"email": unique_email("sarah"), "name": "Sarah Martinez", "password": "hunter22"},
    )
    assert r.status_code == 201
    created = r.json()
    assert "password" not in created
    assert "passwordHash" not in created
    user_id = created["id"]

    r = client.get(f"/api/users/{user_id}")
    assert r.status_code == 200
    assert r.json()["name"] == "Sarah Martinez"

    r = client.patch(f"/api/users/{user_id}", json={"name": "Sarah M."})
    assert r.status_code == 200
    assert r.json()["name"] == "Sarah M."


def test_users_duplicate_email_conflict():
    email = unique_email("dup")
    assert client.post("/api/users", json={"email": email, "name": "First"}).status_code == 201
    r = client.post("/api/users", json={"email": email, "name": "Second"})
    assert r.status_code == 409
    assert r.json()["success"] is False


def test_users_invalid_email():
    r = client.post("/api/users", json={"email": "not-an-email", "name": "Someone"})
    assert r.status_code == 422


def test_get_unknown_user_404():
    assert client.get(f"/api/users/{uuid.uuid4()}").status_code == 404


def test_user_admin_routes(db_session, admin_client):
    user = create_user(db_session)

    r = admin_client.get("/api/users")
    assert r.status_code == 200
    assert [u["id"] for u in r.json()] == [str(user.user_id)]

    r = admin_client.delete(f"/api/users/{user.user_id}")
    assert r.json() == {"success": True}
    assert admin_client.delete(f"/api/users/{user.user_id}").status_code == 404


def test_users_list_with_monkeypatched_service(monkeypatch, admin_client):
    monkeypatch.setattr(UserService, "list_users", lambda db: [])
    r = admin_client.get("/api/users")
    assert r.status_code == 200
    assert r.json() == []


def test_startup_creates_schema_and_serves():
    with TestClient(app) as started:
        r = started.get("/api/health-check")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_openapi_documents_error_responses():
    schema = client.get("/api/openapi.json").json()

    assert "ErrorResponse" in schema["components"]["schemas"]
    not_found = schema["paths"]["/api/recipes/{recipe_id}"]["get"]["responses"]["404"]
    assert not_found["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
    assert "409" in schema["paths"]["/api/users"]["post"]["responses"]
