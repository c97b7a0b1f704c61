import pytest

from app.core.errors import NotFoundError, StorageConstraintError
from app.search.schemas import SearchFilters
from app.tutorials import handlers
from app.tutorials.models import UserLike


def test_create_tutorial_generates_slug(make_tutorial):
    tutorial = make_tutorial(title="Advanced React: Hooks & Context API!")

    assert tutorial.slug == "advanced-react-hooks-context-api"
    assert tutorial.likes_count == 0
    assert tutorial.views_count == 0


def test_duplicate_slug_is_storage_constraint(make_tutorial):
    make_tutorial(title="Same Title Here")

    with pytest.raises(StorageConstraintError):
        make_tutorial(title="Same title here!")


def test_get_tutorials_newest_first(make_tutorial, db_session):
    first = make_tutorial()
    second = make_tutorial()

    ids = [t.id for t in handlers.get_tutorials(db_session)]

    assert ids == [second.id, first.id]


def test_get_by_slug_counts_every_view(make_tutorial, db_session):
    tutorial = make_tutorial(title="Counting Views Tutorial")

    assert handlers.get_tutorial_by_slug(db_session, tutorial.slug).views_count == 1
    assert handlers.get_tutorial_by_slug(db_session, tutorial.slug).views_count == 2


def test_get_by_slug_unknown_returns_none(db_session):
    assert handlers.get_tutorial_by_slug(db_session, "does-not-exist") is None


def test_like_toggles_and_counts(make_tutorial, make_user, db_session):
    tutorial = make_tutorial()
    user = make_user()

    assert handlers.like_tutorial(db_session, tutorial.id, user.id) == {"liked": True, "likesCount": 1}
    assert handlers.like_tutorial(db_session, tutorial.id, user.id) == {"liked": False, "likesCount": 0}
    assert db_session.query(UserLike).count() == 0


def test_likes_from_two_users(make_tutorial, make_user, db_session):
    tutorial = make_tutorial()
    alice, bob = make_user(), make_user()

    handlers.like_tutorial(db_session, tutorial.id, alice.id)
    result = handlers.like_tutorial(db_session, tutorial.id, bob.id)

    assert result == {"liked": True, "likesCount": 2}


def test_like_unknown_tutorial_or_user(make_tutorial, make_user, db_session):
    tutorial = make_tutorial()
    user = make_user()

    with pytest.raises(NotFoundError, match="Tutorial not found"):
        handlers.like_tutorial(db_session, 999, user.id)
    with pytest.raises(NotFoundError, match="User not found"):
        handlers.like_tutorial(db_session, tutorial.id, 999)


def test_search_matches_title_description_or_content(make_tutorial, db_session):
    by_title = make_tutorial(title="Mastering Rust Ownership")
    by_content = make_tutorial(title="Systems programming basics", content="x" * 100 + " borrow checker and RUST lifetimes")
    make_tutorial(title="Something else entirely")

    ids = {t.id for t in handlers.search_tutorials(db_session, "rust")}

    assert ids == {by_title.id, by_content.id}


def test_search_tech_stack_is_or_over_terms(make_tutorial, db_session):
    react = make_tutorial(tech_stack=["react"])
    vue = make_tutorial(tech_stack=["vue"])
    make_tutorial(tech_stack=["angular"])

    found = handlers.search_tutorials(
        db_session, "tutorial", filters=SearchFilters(tech_stack=["react", "vue"])
    )

    assert {t.id for t in found} == {react.id, vue.id}


def test_search_tech_stack_matches_whole_terms(make_tutorial, db_session):
    make_tutorial(tech_stack=["javascript"])

    found = handlers.search_tutorials(db_session, "tutorial", filters=SearchFilters(tech_stack=["java"]))

    assert found == []


def test_search_filters_difficulty_and_pro(make_tutorial, db_session):
    match = make_tutorial(difficulty="advanced", is_pro=True)
    make_tutorial(difficulty="advanced", is_pro=False)
    make_tutorial(difficulty="beginner", is_pro=True)

    found = handlers.search_tutorials(
        db_session, "tutorial", filters=SearchFilters(difficulty="advanced", is_pro=True)
    )

    assert [t.id for t in found] == [match.id]


def test_featured_orders_by_views_plus_likes(make_tutorial, db_session):
    low = make_tutorial()
    high = make_tutorial()
    mid = make_tutorial()
    low.views_count = 1
    high.views_count, high.likes_count = 10, 5
    mid.views_count = 7
    db_session.commit()

    featured = handlers.get_featured_tutorials(db_session)

    assert [t.id for t in featured] == [high.id, mid.id, low.id]


def test_featured_limited_to_six(make_tutorial, db_session):
    for _ in range(8):
        make_tutorial()

    assert len(handlers.get_featured_tutorials(db_session)) == 6


def test_routes_create_fetch_and_like(client, make_user):
    user = make_user()
    created = client.post(
        "/tutorials",
        json={
            "title": "Intro to FastAPI Routing",
            "description": "Declare routes, parameters and responses.",
            "content": "c" * 120,
            "tech_stack": ["python", "fastapi"],
            "difficulty": "beginner",
            "estimated_time": 20,
            "thumbnail_url": "https://cdn.example.com/thumb.png",
        },
    )
    assert created.status_code == 201
    body = created.json()
    assert body["slug"] == "intro-to-fastapi-routing"

    fetched = client.get(f"/tutorials/slug/{body['slug']}")
    assert fetched.status_code == 200
    assert fetched.json()["views_count"] == 1

    liked = client.post(f"/tutorials/{body['id']}/like", json={"user_id": user.id})
    assert liked.json() == {"liked": True, "likesCount": 1}


def test_route_create_rejects_short_content(client):
    resp = client.post(
        "/tutorials",
        json={
            "title": "Too short",
            "description": "Description long enough here.",
            "content": "short",
            "tech_stack": [],
            "difficulty": "beginner",
            "estimated_time": 5,
        },
    )
    assert resp.status_code == 422


def test_route_unknown_slug_returns_null(client):
    resp = client.get("/tutorials/slug/missing")

    assert resp.status_code == 200
    assert resp.json() is None
