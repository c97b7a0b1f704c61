from datetime import timedelta

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.errors import ConflictError, LimitExceededError, NotFoundError, StorageConstraintError
from app.db.base import utcnow
from app.db.session import get_db
from app.web.debug_routes import router as debug_router


def test_healthcheck(client):
    resp = client.get("/healthcheck")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["timestamp"].endswith("Z")


def test_not_found_error_body(client):
    resp = client.get("/dashboard/9999")

    assert resp.status_code == 404
    assert resp.json() == {
        "error": "not_found",
        "detail": "User not found",
        "details": {"entity": "User", "id": 9999},
    }


def test_error_kinds_map_to_status_codes():
    assert NotFoundError("Tutorial").status_code == 404
    assert ConflictError("dup").status_code == 409
    assert LimitExceededError(10, 10).status_code == 429
    assert StorageConstraintError("constraint").status_code == 409


def test_limit_error_details():
    err = LimitExceededError(limit=10, used=10)

    assert err.to_dict() == {
        "error": "limit_exceeded",
        "detail": "Daily AI query limit exceeded",
        "details": {"limit": 10, "used": 10},
    }


def test_debug_routes_disabled_by_default(client):
    assert client.get("/debug/ai-usage").status_code == 404


def test_debug_ai_usage_flags_stale_counters(db_session, make_user):
    fresh = make_user(ai_queries_used_today=2)
    stale = make_user(
        subscription_plan="pro",
        ai_queries_used_today=9,
        ai_queries_reset_on=utcnow().date() - timedelta(days=1),
    )
    debug_app = FastAPI()
    debug_app.include_router(debug_router)
    debug_app.dependency_overrides[get_db] = lambda: db_session

    rows = TestClient(debug_app).get("/debug/ai-usage").json()

    assert [(r["id"], r["used"], r["stale"]) for r in rows] == [(fresh.id, 2, False), (stale.id, 9, True)]
    assert [r["limit"] for r in rows] == [10, 100]


def test_debug_ai_diagnostics_without_key():
    debug_app = FastAPI()
    debug_app.include_router(debug_router)

    body = TestClient(debug_app).get("/debug/diagnostics/ai").json()

    assert body["key_present"] is False
    assert set(body) == {"key_present", "key_fingerprint", "model", "last_error"}
