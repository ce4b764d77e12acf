"""
Tests for the writing prompt catalogue.
"""
import random
from journal_api.core.constants import PromptCategory
from journal_api.models import JournalPrompt
from journal_api.services import prompt_service
from journal_api.tests.conftest import auth_headers

GRATITUDE = "What are three things you are grateful for today?"


def add_prompt(db, text, category=PromptCategory.REFLECTION, is_active=True):
    prompt = JournalPrompt(text=text, category=category, is_active=is_active)
    db.add(prompt)
    db.commit()
    db.refresh(prompt)
    return prompt


def test_admin_creates_prompt(client, admin):
    response = client.post(
        "/api/prompts",
        json={"text": f"  {GRATITUDE} ", "category": "gratitude"},
        headers=auth_headers(admin),
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["text"] == GRATITUDE
    assert data["category"] == "gratitude"
    assert data["is_active"] is True


def test_non_admin_cannot_write_prompts(client, db, alice):
    prompt = add_prompt(db, "Describe a moment that made you smile.")
    headers = auth_headers(alice)

    response = client.post("/api/prompts", json={"text": GRATITUDE, "category": "gratitude"}, headers=headers)
    assert response.status_code == 403
    assert response.json()["message"] == "Access denied. Admin privileges required."
    assert client.put(f"/api/prompts/{prompt.id}", json={"is_active": False}, headers=headers).status_code == 403
    assert client.delete(f"/api/prompts/{prompt.id}", headers=headers).status_code == 403


def test_prompt_writes_require_authentication(client):
    response = client.post("/api/prompts", json={"text": GRATITUDE, "category": "gratitude"})
    assert response.status_code == 401


def test_duplicate_prompt_conflicts(client, admin):
    payload = {"text": GRATITUDE, "category": "gratitude"}
    assert client.post("/api/prompts", json=payload, headers=auth_headers(admin)).status_code == 201
    assert client.post("/api/prompts", json=payload, headers=auth_headers(admin)).status_code == 409


def test_invalid_prompt_payloads(client, admin):
    headers = auth_headers(admin)
    assert client.post("/api/prompts", json={"text": "Too short", "category": "goals"}, headers=headers).status_code == 400
    assert client.post("/api/prompts", json={"text": "x" * 501, "category": "goals"}, headers=headers).status_code == 400
    assert client.post("/api/prompts", json={"text": GRATITUDE, "category": "cooking"}, headers=headers).status_code == 400


def test_public_listing_shows_active_prompts_only(client, db):
    add_prompt(db, "Where do you want to be in five years?", PromptCategory.GOALS)
    add_prompt(db, "What did you learn about yourself today?")
    add_prompt(db, "This prompt has been retired for good.", is_active=False)

    response = client.get("/api/prompts")
    assert response.status_code == 200
    data = response.json()["data"]
    assert [p["category"] for p in data] == ["goals", "reflection"]


def test_prompts_by_category(client, db):
    add_prompt(db, "Where do you want to be in five years?", PromptCategory.GOALS)
    add_prompt(db, "What did you learn about yourself today?")

    data = client.get("/api/prompts/category/goals").json()["data"]
    assert [p["text"] for p in data] == ["Where do you want to be in five years?"]
    assert client.get("/api/prompts/category/mindfulness").json()["data"] == []
    assert client.get("/api/prompts/category/unknown").status_code == 400


def test_random_prompt(client, db):
    goal = add_prompt(db, "Where do you want to be in five years?", PromptCategory.GOALS)
    add_prompt(db, "What did you learn about yourself today?")

    response = client.get("/api/prompts/random")
    assert response.status_code == 200
    assert response.json()["data"]["category"] in ("goals", "reflection")

    data = client.get("/api/prompts/random?category=goals").json()["data"]
    assert data["id"] == goal.id


def test_random_prompt_when_none_exist(client, db):
    add_prompt(db, "This prompt has been retired for good.", is_active=False)
    response = client.get("/api/prompts/random")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"] is None


def test_random_prompt_is_seedable(db):
    for i in range(5):
        add_prompt(db, f"Seeded prompt number {i} for testing.")
    first = prompt_service.random_prompt(db, rng=random.Random(42))
    second = prompt_service.random_prompt(db, rng=random.Random(42))
    assert first.id == second.id


def test_update_and_delete_prompt(client, db, admin):
    prompt = add_prompt(db, "What did you learn about yourself today?")
    headers = auth_headers(admin)

    response = client.put(
        f"/api/prompts/{prompt.id}", json={"category": "personal_growth", "is_active": False}, headers=headers
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["category"] == "personal_growth"
    assert data["is_active"] is False
    assert data["text"] == "What did you learn about yourself today?"

    assert client.delete(f"/api/prompts/{prompt.id}", headers=headers).status_code == 200
    assert client.delete(f"/api/prompts/{prompt.id}", headers=headers).status_code == 404
    assert client.put(f"/api/prompts/{prompt.id}", json={"is_active": True}, headers=headers).status_code == 404
