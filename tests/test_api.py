"""
HTTP tests covering every endpoint, status mapping and error body shape.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.container import build_container
from app.main import create_app
from app.modules.generation.fallbacks import FALLBACK_BODIES, FALLBACK_CTAS, NICHE_HOOKS
from app.seed import DEMO_EMAIL, DEMO_SCRIPTS, seed_demo_community
from tests.conftest import StubGenerationClient, auth_headers, script_payload, signup

SCRIPT_KEYS = {
    "id",
    "userId",
    "title",
    "niche",
    "contentType",
    "tone",
    "length",
    "notes",
    "hook",
    "body",
    "cta",
    "isFavorite",
    "createdAt",
    "updatedAt",
}


def _save(client, token, **overrides):
    response = client.post("/api/scripts/save", json=script_payload(**overrides), headers=auth_headers(token))
    assert response.status_code == 200, response.text
    return response.json()


# ─────────────────────────────────────────────────────────────────────────────
# Auth
# ─────────────────────────────────────────────────────────────────────────────

class TestAuth:
    def test_signup_returns_token_and_public_user(self, client):
        data = signup(client)

        assert data["token"]
        assert data["user"] == {
            "id": data["user"]["id"],
            "email": "alice@creators.io",
            "username": "alice",
            "fullName": "Alice Example",
        }

    def test_duplicate_email_rejected(self, client, container):
        signup(client)

        response = client.post(
            "/api/auth/signup",
            json={"email": "alice@creators.io", "password": "secret123", "username": "alice2", "fullName": "A"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "User with this email already exists"}
        assert client.portal.call(container.users.count) == 1

    def test_duplicate_username_rejected(self, client, container):
        signup(client)

        response = client.post(
            "/api/auth/signup",
            json={"email": "other@creators.io", "password": "secret123", "username": "alice", "fullName": "A"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Username already taken"}
        assert client.portal.call(container.users.count) == 1

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "alice@creators.io", "password": "123", "username": "alice", "fullName": "A"},
            {"email": "not-an-email", "password": "secret123", "username": "alice", "fullName": "A"},
            {"email": "alice@creators.io", "password": "secret123", "fullName": "A"},
        ],
    )
    def test_invalid_signup_payload_is_400(self, client, payload):
        response = client.post("/api/auth/signup", json=payload)

        assert response.status_code == 400
        assert set(response.json()) == {"message"}

    def test_login_token_identifies_user(self, client, container):
        user = signup(client)["user"]

        response = client.post("/api/auth/login", json={"email": "alice@creators.io", "password": "secret123"})

        assert response.status_code == 200
        claims = container.token_issuer.verify(response.json()["token"])
        assert claims.user_id == user["id"]
        assert response.json()["user"]["username"] == "alice"

    @pytest.mark.parametrize("email, password", [("alice@creators.io", "wrong-pass"), ("bob@creators.io", "secret123")])
    def test_bad_credentials_are_401_without_token(self, client, email, password):
        signup(client)

        response = client.post("/api/auth/login", json={"email": email, "password": password})

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid email or password"}

    def test_me_returns_profile_without_hash(self, client):
        token = signup(client)["token"]

        response = client.get("/api/auth/me", headers=auth_headers(token))

        assert response.status_code == 200
        assert set(response.json()["user"]) == {"id", "email", "username", "fullName"}
        assert "password" not in response.text.lower()

    def test_me_without_token_is_401(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json() == {"message": "Access token required"}

    def test_me_with_bad_token_is_403(self, client):
        response = client.get("/api/auth/me", headers=auth_headers("garbage.token.value"))

        assert response.status_code == 403
        assert response.json() == {"message": "Invalid or expired token"}

    def test_me_for_vanished_user_is_404(self, client, container):
        token = container.token_issuer.issue("no-such-user", "ghost@creators.io")

        response = client.get("/api/auth/me", headers=auth_headers(token))

        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}


# ─────────────────────────────────────────────────────────────────────────────
# Generation
# ─────────────────────────────────────────────────────────────────────────────

class TestGenerate:
    BRIEF = {"niche": "Technology", "contentType": "TikTok", "tone": "Witty", "length": "30 seconds"}

    def test_remote_failure_is_absorbed(self, client, generation_client):
        token = signup(client)["token"]

        response = client.post("/api/scripts/generate", json=self.BRIEF, headers=auth_headers(token))

        assert response.status_code == 200
        data = response.json()
        assert generation_client.calls == 1
        assert data["hook"] in NICHE_HOOKS["Technology"]
        assert data["body"] in FALLBACK_BODIES
        assert data["cta"] in FALLBACK_CTAS

    def test_remote_output_returned(self, settings, rng, clock):
        stub = StubGenerationClient("HOOK: Big news\nBODY: The details\nCTA: Follow!")
        app = create_app(container=build_container(settings, rng=rng, generation_client=stub, clock=clock))
        with TestClient(app) as client:
            token = signup(client)["token"]
            response = client.post(
                "/api/scripts/generate",
                json={**self.BRIEF, "notes": "Keep it short"},
                headers=auth_headers(token),
            )

        assert response.json() == {"hook": "Big news", "body": "The details", "cta": "Follow!"}
        assert "Keep it short" in stub.prompts[0]

    def test_requires_token(self, client):
        assert client.post("/api/scripts/generate", json=self.BRIEF).status_code == 401

    def test_empty_niche_is_400(self, client):
        token = signup(client)["token"]

        response = client.post(
            "/api/scripts/generate", json={**self.BRIEF, "niche": ""}, headers=auth_headers(token)
        )

        assert response.status_code == 400

    def test_unexpected_error_is_generic_500(self, settings, rng, clock):
        class BrokenClient:
            async def generate_text(self, prompt):
                raise RuntimeError("internal detail that must not leak")

        app = create_app(container=build_container(settings, rng=rng, generation_client=BrokenClient(), clock=clock))
        with TestClient(app, raise_server_exceptions=False) as client:
            token = signup(client)["token"]
            response = client.post("/api/scripts/generate", json=self.BRIEF, headers=auth_headers(token))

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}


# ─────────────────────────────────────────────────────────────────────────────
# Saved scripts
# ─────────────────────────────────────────────────────────────────────────────

class TestScripts:
    def test_save_returns_script_record(self, client):
        token = signup(client)["token"]

        script = _save(client, token)

        assert set(script) == SCRIPT_KEYS
        assert script["isFavorite"] == 0
        assert script["contentType"] == "Instagram Reel"
        assert script["createdAt"] == script["updatedAt"]

    def test_save_missing_field_is_400_and_stores_nothing(self, client):
        token = signup(client)["token"]

        response = client.post(
            "/api/scripts/save", json=script_payload(cta=""), headers=auth_headers(token)
        )

        assert response.status_code == 400
        assert "cta" in response.json()["message"]
        assert client.get("/api/scripts", headers=auth_headers(token)).json() == []

    def test_list_is_newest_first_and_idempotent(self, client, clock):
        token = signup(client)["token"]
        first = _save(client, token, title="first")
        clock.advance(minutes=5)
        second = _save(client, token, title="second")

        listed = client.get("/api/scripts", headers=auth_headers(token)).json()
        again = client.get("/api/scripts", headers=auth_headers(token)).json()

        assert [script["id"] for script in listed] == [second["id"], first["id"]]
        assert listed == again

    def test_update_toggles_favorite_and_refreshes_timestamp(self, client, clock):
        token = signup(client)["token"]
        script = _save(client, token)
        clock.advance(hours=1)

        response = client.put(
            f"/api/scripts/{script['id']}",
            json={"isFavorite": 1, "userId": "someone-else"},
            headers=auth_headers(token),
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["isFavorite"] == 1
        assert updated["userId"] == script["userId"]
        assert updated["updatedAt"] != script["updatedAt"]
        assert updated["createdAt"] == script["createdAt"]

    def test_update_rejects_out_of_range_favorite(self, client):
        token = signup(client)["token"]
        script = _save(client, token)

        response = client.put(f"/api/scripts/{script['id']}", json={"isFavorite": 5}, headers=auth_headers(token))

        assert response.status_code == 400

    def test_update_of_foreign_or_missing_script_is_404(self, client):
        owner = signup(client)["token"]
        intruder = signup(client, email="bob@creators.io", username="bob")["token"]
        script = _save(client, owner)

        foreign = client.put(f"/api/scripts/{script['id']}", json={"title": "x"}, headers=auth_headers(intruder))
        missing = client.put("/api/scripts/does-not-exist", json={"title": "x"}, headers=auth_headers(owner))

        assert foreign.status_code == 404
        assert missing.status_code == 404
        assert foreign.json() == missing.json()

    def test_delete_is_owner_scoped(self, client):
        owner = signup(client)["token"]
        intruder = signup(client, email="bob@creators.io", username="bob")["token"]
        script = _save(client, owner)

        response = client.delete(f"/api/scripts/{script['id']}", headers=auth_headers(intruder))

        assert response.status_code == 404
        assert response.json() == {"message": "Script not found or unauthorized"}
        remaining = client.get("/api/scripts", headers=auth_headers(owner)).json()
        assert [item["id"] for item in remaining] == [script["id"]]

    def test_owner_delete_confirms(self, client):
        token = signup(client)["token"]
        script = _save(client, token)

        response = client.delete(f"/api/scripts/{script['id']}", headers=auth_headers(token))

        assert response.status_code == 200
        assert response.json() == {"message": "Script deleted successfully"}
        assert client.get("/api/scripts", headers=auth_headers(token)).json() == []

    def test_scripts_require_token(self, client):
        assert client.get("/api/scripts").status_code == 401
        assert client.get("/api/scripts", headers=auth_headers("bad")).status_code == 403


# ─────────────────────────────────────────────────────────────────────────────
# Analytics and community
# ─────────────────────────────────────────────────────────────────────────────

class TestAnalytics:
    def test_stats_for_new_user(self, client):
        token = signup(client)["token"]

        response = client.get("/api/analytics/stats", headers=auth_headers(token))

        assert response.json() == {"totalScripts": 0, "weeklyScripts": 0, "favoriteScripts": 0, "successRate": 0}

    def test_stats_reflect_saved_scripts(self, client):
        token = signup(client)["token"]
        favorite = _save(client, token)
        _save(client, token)
        client.put(f"/api/scripts/{favorite['id']}", json={"isFavorite": 1}, headers=auth_headers(token))

        stats = client.get("/api/analytics/stats", headers=auth_headers(token)).json()

        assert stats == {"totalScripts": 2, "weeklyScripts": 2, "favoriteScripts": 1, "successRate": 89}


class TestCommunity:
    def test_feed_is_public_and_empty_by_default(self, client):
        response = client.get("/api/community/scripts")

        assert response.status_code == 200
        assert response.json() == []

    def test_deleted_script_is_omitted(self, client, container):
        token = signup(client)["token"]
        kept = _save(client, token, title="kept")
        removed = _save(client, token, title="removed")
        for script in (kept, removed):
            client.portal.call(container.script_service.promote_to_community, script["id"], "anon")

        client.delete(f"/api/scripts/{removed['id']}", headers=auth_headers(token))

        feed = client.get("/api/community/scripts").json()
        assert [item["scriptId"] for item in feed] == [kept["id"]]
        assert feed[0]["script"]["title"] == "kept"
        assert set(feed[0]) == {
            "id",
            "scriptId",
            "anonymousUsername",
            "likes",
            "shares",
            "isVisible",
            "createdAt",
            "script",
        }

    def test_feed_capped_at_six_and_sorted_by_likes(self, client, container):
        token = signup(client)["token"]
        for index in range(8):
            script = _save(client, token, title=f"s{index}")
            client.portal.call(container.script_service.promote_to_community, script["id"], f"anon{index}")

        feed = client.get("/api/community/scripts").json()

        assert len(feed) == 6
        likes = [item["likes"] for item in feed]
        assert likes == sorted(likes, reverse=True)


def test_feed_limit_follows_configuration(settings, rng, clock):
    limited = settings.model_copy(update={"community": settings.community.model_copy(update={"feed_limit": 2})})
    container = build_container(limited, rng=rng, generation_client=None, clock=clock)

    with TestClient(create_app(container=container)) as client:
        token = signup(client)["token"]
        for index in range(4):
            script = _save(client, token, title=f"s{index}")
            client.portal.call(container.script_service.promote_to_community, script["id"], f"anon{index}")

        feed = client.get("/api/community/scripts").json()

    assert len(feed) == 2


def test_demo_seed_populates_feed(settings, rng, clock):
    seeded = settings.model_copy(update={"community": settings.community.model_copy(update={"seed_demo": True})})
    app = create_app(container=build_container(seeded, rng=rng, generation_client=None, clock=clock))

    with TestClient(app) as client:
        feed = client.get("/api/community/scripts").json()

    assert 0 < len(feed) <= 6
    assert all(item["script"]["hook"] for item in feed)


async def test_demo_seed_runs_once(settings, rng, clock):
    container = build_container(settings, rng=rng, generation_client=None, clock=clock)

    assert await seed_demo_community(container) == len(DEMO_SCRIPTS)
    assert await seed_demo_community(container) == 0
    assert await container.account_service.get_by_email(DEMO_EMAIL) is not None


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
