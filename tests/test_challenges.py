from datetime import timedelta

import pytest

from app.challenges import handlers
from app.challenges.badges import badges_for, describe_badges
from app.challenges.models import Certificate, UserPoints
from app.core.errors import ConflictError, NotFoundError
from app.db.base import utcnow


@pytest.mark.parametrize("total,expected", [
    (1100, ["high_achiever"]),
    (1000, ["high_achiever"]),
    (999, ["achiever"]),
    (500, ["achiever"]),
    (100, ["participant"]),
    (50, []),
    (0, []),
])
def test_badge_thresholds(total, expected):
    assert badges_for(total) == expected


def test_describe_badges_carries_labels():
    assert describe_badges(["achiever"])[0]["label"] == "Achiever"


def test_participation_records_points(make_user, make_challenge, db_session):
    user = make_user()
    challenge = make_challenge(points_reward=150)

    result = handlers.participate_in_challenge(db_session, user.id, challenge.id)

    assert result == {"success": True, "pointsEarned": 150}
    row = db_session.query(UserPoints).filter_by(user_id=user.id).one()
    assert row.points_earned == 150


def test_duplicate_participation_conflicts(make_user, make_challenge, db_session):
    user = make_user()
    challenge = make_challenge()

    handlers.participate_in_challenge(db_session, user.id, challenge.id)
    with pytest.raises(ConflictError, match="already participated"):
        handlers.participate_in_challenge(db_session, user.id, challenge.id)

    assert db_session.query(UserPoints).filter_by(user_id=user.id, challenge_id=challenge.id).count() == 1


@pytest.mark.parametrize("start,end", [
    (timedelta(days=1), timedelta(days=8)),
    (timedelta(days=-8), timedelta(days=-1)),
])
def test_participation_outside_window_conflicts(make_user, make_challenge, db_session, start, end):
    user = make_user()
    challenge = make_challenge(start_offset=start, end_offset=end)

    with pytest.raises(ConflictError, match="Challenge is not currently active"):
        handlers.participate_in_challenge(db_session, user.id, challenge.id)


def test_participation_in_deactivated_challenge_conflicts(make_user, make_challenge, db_session):
    user = make_user()
    challenge = make_challenge()
    challenge.is_active = False
    db_session.commit()

    with pytest.raises(ConflictError):
        handlers.participate_in_challenge(db_session, user.id, challenge.id)


def test_participation_unknown_challenge_or_user(make_user, make_challenge, db_session):
    user = make_user()
    challenge = make_challenge()

    with pytest.raises(NotFoundError, match="Challenge not found"):
        handlers.participate_in_challenge(db_session, user.id, 999)
    with pytest.raises(NotFoundError, match="User not found"):
        handlers.participate_in_challenge(db_session, 999, challenge.id)


def test_reward_change_does_not_touch_earned_points(make_user, make_challenge, db_session):
    user = make_user()
    challenge = make_challenge(points_reward=100)
    handlers.participate_in_challenge(db_session, user.id, challenge.id)

    challenge.points_reward = 999
    db_session.commit()

    assert handlers.get_user_rank(db_session, user.id)["totalPoints"] == 100


def test_create_challenge_checks_references(make_challenge):
    with pytest.raises(NotFoundError, match="Tutorial with id 42 does not exist"):
        make_challenge(tutorial_id=42)
    with pytest.raises(NotFoundError, match="Project with id 7 does not exist"):
        make_challenge(project_id=7)


def test_active_challenges_only_open_ones(make_challenge, db_session):
    open_now = make_challenge()
    make_challenge(start_offset=timedelta(days=2), end_offset=timedelta(days=9))
    closed = make_challenge()
    closed.is_active = False
    db_session.commit()

    assert [c.id for c in handlers.get_active_challenges(db_session)] == [open_now.id]


def test_leaderboard_ranking(make_user, make_challenge, db_session):
    top = make_user(full_name="Top")
    second = make_user(full_name="Second")
    make_user(full_name="No points")
    big = make_challenge(points_reward=200)
    small = make_challenge(points_reward=100)
    handlers.participate_in_challenge(db_session, top.id, big.id)
    handlers.participate_in_challenge(db_session, second.id, small.id)

    board = handlers.get_leaderboard(db_session)

    assert [(e["user_id"], e["rank"], e["total_points"]) for e in board] == [
        (top.id, 1, 200),
        (second.id, 2, 100),
    ]
    assert board[0]["user_name"] == "Top"
    assert handlers.get_user_rank(db_session, second.id)["rank"] == 2
    assert handlers.get_user_rank(db_session, top.id)["rank"] == 1


def test_high_achiever_after_eleven_challenges(make_user, make_challenge, db_session):
    user = make_user()
    for _ in range(11):
        challenge = make_challenge(points_reward=100)
        handlers.participate_in_challenge(db_session, user.id, challenge.id)

    entry = handlers.get_leaderboard(db_session)[0]

    assert entry["total_points"] == 1100
    assert "high_achiever" in entry["badges"]


def test_weekly_points_exclude_old_entries(make_user, make_challenge, db_session):
    user = make_user()
    old = make_challenge(points_reward=300)
    recent = make_challenge(points_reward=50)
    handlers.participate_in_challenge(db_session, user.id, old.id)
    handlers.participate_in_challenge(db_session, user.id, recent.id)

    row = db_session.query(UserPoints).filter_by(challenge_id=old.id).one()
    row.earned_at = utcnow() - timedelta(days=10)
    db_session.commit()

    rank = handlers.get_user_rank(db_session, user.id)
    entry = handlers.get_leaderboard(db_session)[0]

    assert rank == {"rank": 1, "totalPoints": 350, "weeklyPoints": 50}
    assert entry["weekly_points"] == 50


def test_rank_of_user_without_points(make_user, make_challenge, db_session):
    lonely = make_user()
    assert handlers.get_user_rank(db_session, lonely.id) == {"rank": 1, "totalPoints": 0, "weeklyPoints": 0}

    other = make_user()
    handlers.participate_in_challenge(db_session, other.id, make_challenge().id)

    assert handlers.get_user_rank(db_session, lonely.id)["rank"] == 2


def test_certificate_is_idempotent(make_user, make_challenge, db_session):
    user = make_user()
    challenge = make_challenge()
    handlers.participate_in_challenge(db_session, user.id, challenge.id)

    first = handlers.issue_certificate(db_session, user.id, challenge.id)
    second = handlers.issue_certificate(db_session, user.id, challenge.id)

    assert first.id == second.id
    assert first.certificate_url == second.certificate_url
    assert first.certificate_url.endswith(f"/challenge-{challenge.id}-user-{user.id}.pdf")
    assert db_session.query(Certificate).count() == 1


def test_certificate_requires_participation(make_user, make_challenge, db_session):
    user = make_user()
    challenge = make_challenge()

    with pytest.raises(ConflictError, match="has not participated"):
        handlers.issue_certificate(db_session, user.id, challenge.id)


def test_challenge_routes(client, make_user):
    user = make_user()
    now = utcnow()
    created = client.post(
        "/challenges",
        json={
            "title": "Weekend Quiz Sprint",
            "description": "Answer every question before Sunday night.",
            "type": "quiz",
            "points_reward": 120,
            "quiz_data": {"questions": [{"q": "2+2", "a": "4"}]},
            "start_date": (now - timedelta(hours=1)).isoformat() + "Z",
            "end_date": (now + timedelta(days=2)).isoformat() + "Z",
        },
    )
    assert created.status_code == 201
    challenge_id = created.json()["id"]
    assert created.json()["quiz_data"]["questions"][0]["a"] == "4"

    assert [c["id"] for c in client.get("/challenges/active").json()] == [challenge_id]

    joined = client.post(f"/challenges/{challenge_id}/participate", json={"user_id": user.id})
    assert joined.json() == {"success": True, "pointsEarned": 120}

    again = client.post(f"/challenges/{challenge_id}/participate", json={"user_id": user.id})
    assert again.status_code == 409

    board = client.get("/challenges/leaderboard").json()
    assert board[0]["badges"] == ["participant"]

    assert client.get(f"/challenges/rank/{user.id}").json()["rank"] == 1

    cert = client.post(f"/challenges/{challenge_id}/certificate", json={"user_id": user.id})
    assert cert.status_code == 200
    assert cert.json()["challenge_id"] == challenge_id


def test_challenge_route_rejects_inverted_window(client):
    now = utcnow()
    resp = client.post(
        "/challenges",
        json={
            "title": "Backwards Challenge",
            "description": "Ends before it begins, which is not allowed.",
            "type": "tutorial",
            "points_reward": 10,
            "start_date": (now + timedelta(days=2)).isoformat(),
            "end_date": now.isoformat(),
        },
    )
    assert resp.status_code == 422
