from pathlib import Path

from fastapi.testclient import TestClient

from fujirecipes.app import app, get_store
from fujirecipes.db.config import StoreConfig
from fujirecipes.db.store import RecipeStore
from fujirecipes.recommendations.engine import recommend
from fujirecipes.recommendations.models import StructuredInput

ACROS_EXPLANATION = (
    "Perfect for black and white photography. "
    "Acros with red filter enhances contrast and drama."
)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


# ── Engine ───────────────────────────────────────────────────────────────


def test_recommend_returns_scored_items(seeded_store):
    items = recommend(StructuredInput(colorPreference="bw"), seeded_store)
    assert len(items) == 3
    assert items[0].recipe.name == "Acros Street Mono"
    assert items[0].score == 100
    assert all(item.score == 0 for item in items[1:])


def test_recommend_on_empty_store(store):
    assert recommend(StructuredInput(lighting="night"), store) == []


# ── Structured recommendations ───────────────────────────────────────────


def test_structured_returns_at_most_three_sorted(client):
    resp = client.post(
        "/recommend/structured",
        json={"lighting": "golden_hour", "subject": "portrait", "mood": "vintage", "colorPreference": "warm"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert 0 < len(body) <= 3
    scores = [item["score"] for item in body]
    assert scores == sorted(scores, reverse=True)
    for item in body:
        assert 0 <= item["score"] <= 100
        assert item["explanation"].endswith(".")
        assert "settings" in item["recipe"]


def test_structured_black_and_white(client):
    resp = client.post("/recommend/structured", json={"colorPreference": "bw"})
    top = resp.json()[0]
    assert top["recipe"]["name"] == "Acros Street Mono"
    assert top["recipe"]["film_simulation"] == "Acros+R"
    assert top["score"] == 100
    assert top["explanation"] == ACROS_EXPLANATION


def test_structured_ignores_unrecognised_values(client):
    resp = client.post("/recommend/structured", json={"lighting": "underwater", "colorPreference": "bw"})
    assert resp.status_code == 200
    assert resp.json()[0]["recipe"]["name"] == "Acros Street Mono"


def test_structured_empty_body_scores_zero_in_id_order(client, seeded_store):
    resp = client.post("/recommend/structured", json={})
    assert resp.status_code == 200
    body = resp.json()
    expected_ids = list(seeded_store.fetch_corpus()["id"])[:3]
    assert [item["recipe"]["id"] for item in body] == expected_ids
    assert all(item["score"] == 0 for item in body)
    assert body[0]["explanation"] == "Classic Chrome provides a timeless, muted film look."


def test_structured_store_failure_returns_500(tmp_path: Path):
    closed = RecipeStore(StoreConfig(db_path=tmp_path / "missing.db"))
    app.dependency_overrides[get_store] = lambda: closed
    try:
        resp = TestClient(app).post("/recommend/structured", json={"lighting": "night"})
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 500
    assert resp.json()["detail"].startswith("Failed to get recommendations")


# ── Natural language recommendations ─────────────────────────────────────


def test_natural_returns_parsed_and_recommendations(client):
    resp = client.post("/recommend/natural", json={"prompt": "Moody night street photography"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["parsed"] == {"lighting": "night", "subject": "street", "mood": "moody"}
    assert 0 < len(body["recommendations"]) <= 3


def test_natural_black_and_white_prompt(client):
    resp = client.post("/recommend/natural", json={"prompt": "black and white"})
    body = resp.json()
    assert body["parsed"] == {"colorPreference": "bw"}
    assert body["recommendations"][0]["explanation"] == ACROS_EXPLANATION


def test_natural_empty_prompt_rejected(client):
    resp = client.post("/recommend/natural", json={"prompt": ""})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Prompt is required"


def test_natural_blank_prompt_rejected(client):
    resp = client.post("/recommend/natural", json={"prompt": "   "})
    assert resp.status_code == 400


def test_natural_missing_prompt_is_invalid(client):
    resp = client.post("/recommend/natural", json={})
    assert resp.status_code == 422


def test_natural_overlong_prompt_is_invalid(client):
    resp = client.post("/recommend/natural", json={"prompt": "night " * 200})
    assert resp.status_code == 422


def test_natural_prompt_without_keywords(client):
    resp = client.post("/recommend/natural", json={"prompt": "just a camera"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["parsed"] == {}
    assert len(body["recommendations"]) == 3


# ── Catalogue ────────────────────────────────────────────────────────────


def test_list_recipes(client):
    resp = client.get("/recipes")
    assert resp.status_code == 200
    names = [r["name"] for r in resp.json()]
    assert len(names) == 12
    assert names == sorted(names)


def test_get_recipe_detail(client):
    recipe_id = client.get("/recipes").json()[0]["id"]
    resp = client.get(f"/recipes/{recipe_id}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == recipe_id
    assert len(body["compatible_cameras"]) == 10
    assert body["tags"]


def test_get_recipe_not_found(client):
    resp = client.get("/recipes/9999")
    assert resp.status_code == 404


def test_tags_grouped_by_category(client):
    resp = client.get("/recipes/meta/tags")
    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"lighting", "subject", "mood", "color", "location", "season"}
    assert "monochrome" in [t["name"] for t in body["color"]]


def test_list_cameras(client):
    resp = client.get("/recipes/meta/cameras")
    assert resp.status_code == 200
    assert "X-T5" in [c["model"] for c in resp.json()]


# ── Import ───────────────────────────────────────────────────────────────


def test_import_endpoint(client):
    resp = client.post("/import/recipes", json={
        "recipes": [
            {"name": "Reala Ace Everyday", "filmSimulation": "Reala Ace", "whiteBalance": "Auto"},
            {"name": "Kodak Portra 400"},
        ],
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["imported"] == 1
    assert body["skipped"] == 1
    assert len(client.get("/recipes").json()) == 13


def test_import_endpoint_rejects_empty_batch(client):
    resp = client.post("/import/recipes", json={"recipes": []})
    assert resp.status_code == 422
