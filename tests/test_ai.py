from datetime import timedelta

import pytest

from app.ai import handlers, tutor
from app.ai.models import ChatMessage
from app.core.errors import LimitExceededError, NotFoundError
from app.db.base import utcnow


def test_fallback_reply_without_api_key(make_user, db_session):
    user = make_user()

    chat = handlers.send_message(db_session, user.id, "What is a closure?", context_type="general")

    assert chat.response == tutor.fallback_reply("general")
    assert chat.response.startswith(tutor.FALLBACK_PREFIX)
    db_session.refresh(user)
    assert user.ai_queries_used_today == 1


def test_free_user_at_limit_is_rejected(make_user, db_session):
    user = make_user(ai_queries_used_today=10)

    with pytest.raises(LimitExceededError, match="Daily AI query limit exceeded"):
        handlers.send_message(db_session, user.id, "One more?")
    assert db_session.query(ChatMessage).count() == 0


def test_free_user_below_limit_succeeds(make_user, db_session):
    user = make_user(ai_queries_used_today=9)

    handlers.send_message(db_session, user.id, "Last one for today")

    db_session.refresh(user)
    assert user.ai_queries_used_today == 10
    assert handlers.check_ai_usage_limit(db_session, user.id) == {"canUse": False, "queriesUsed": 10, "limit": 10}


def test_pro_user_gets_higher_limit(make_user, db_session):
    lifetime = make_user(subscription_plan="pro", subscription_expires_at=None, ai_queries_used_today=10)
    active = make_user(subscription_plan="pro", subscription_expires_at=utcnow() + timedelta(days=3))

    assert handlers.check_ai_usage_limit(db_session, lifetime.id) == {"canUse": True, "queriesUsed": 10, "limit": 100}
    assert handlers.check_ai_usage_limit(db_session, active.id)["limit"] == 100


def test_expired_pro_falls_back_to_free_limit(make_user, db_session):
    user = make_user(subscription_plan="pro", subscription_expires_at=utcnow() - timedelta(days=1))

    assert handlers.check_ai_usage_limit(db_session, user.id)["limit"] == 10


def test_counter_resets_on_a_new_day(make_user, db_session):
    user = make_user(
        ai_queries_used_today=10,
        ai_queries_reset_on=utcnow().date() - timedelta(days=1),
    )

    usage = handlers.check_ai_usage_limit(db_session, user.id)

    assert usage == {"canUse": True, "queriesUsed": 0, "limit": 10}
    db_session.refresh(user)
    assert user.ai_queries_reset_on == utcnow().date()


def test_unknown_user(db_session):
    with pytest.raises(NotFoundError, match="User not found"):
        handlers.check_ai_usage_limit(db_session, 77)
    with pytest.raises(NotFoundError):
        handlers.send_message(db_session, 77, "hi")


def test_chat_history_newest_first_and_capped(make_user, db_session):
    user = make_user(subscription_plan="pro")
    for i in range(52):
        db_session.add(ChatMessage(user_id=user.id, message=f"q{i}", response="a"))
    db_session.commit()

    history = handlers.get_chat_history(db_session, user.id)

    assert len(history) == 50
    assert history[0].message == "q51"


def test_context_title_lookup(make_user, make_tutorial, db_session):
    tutorial = make_tutorial(title="Async Python Explained")

    assert handlers._context_title(db_session, "tutorial", tutorial.id) == "Async Python Explained"
    assert handlers._context_title(db_session, "general", tutorial.id) is None
    assert handlers._context_title(db_session, "project", 999) is None


def test_tutorial_summary_from_headings(make_tutorial, db_session):
    tutorial = make_tutorial(
        title="Testing With Pytest",
        description="Write your first test. Use fixtures to share setup. Parametrize for coverage.",
    )

    summary = handlers.generate_tutorial_summary(db_session, tutorial.id)

    assert summary["summary"] == "Testing With Pytest: Write your first test. Use fixtures to share setup."
    assert summary["keyPoints"] == ["Introduction", "Setup", "Building"]


def test_tutorial_summary_default_key_points(make_tutorial, db_session):
    tutorial = make_tutorial(content="plain text without any headings " * 5)

    summary = handlers.generate_tutorial_summary(db_session, tutorial.id)

    assert summary["keyPoints"] == tutor.DEFAULT_KEY_POINTS


def test_tutorial_summary_unknown(db_session):
    with pytest.raises(NotFoundError, match="Tutorial not found"):
        handlers.generate_tutorial_summary(db_session, 5)


def test_message_routes(client, make_user):
    user = make_user()

    sent = client.post("/ai/messages", json={"user_id": user.id, "message": "Explain recursion", "context_type": "tutorial"})
    assert sent.status_code == 200
    assert sent.json()["response"] == tutor.fallback_reply("tutorial")

    history = client.get(f"/ai/messages/{user.id}")
    assert [m["message"] for m in history.json()] == ["Explain recursion"]

    usage = client.get(f"/ai/usage/{user.id}")
    assert usage.json() == {"canUse": True, "queriesUsed": 1, "limit": 10}


def test_message_route_limit_is_429(client, make_user):
    user = make_user(ai_queries_used_today=10)

    resp = client.post("/ai/messages", json={"user_id": user.id, "message": "hi"})

    assert resp.status_code == 429
    assert resp.json()["error"] == "limit_exceeded"


def test_message_route_rejects_long_message(client, make_user):
    user = make_user()

    resp = client.post("/ai/messages", json={"user_id": user.id, "message": "x" * 1001})

    assert resp.status_code == 422
