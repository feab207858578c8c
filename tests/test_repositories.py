
import pytest
from datetime import datetime, timedelta, timezone
from wikilens.models import History, Post, PopularSearch
from wikilens.services.repositories import (
    HistoryRepository,
    PopularSearchRepository,
    PostRepository,
    UserRepository,
)


@pytest.mark.asyncio
async def test_upsert_inserts_then_increments(db_session):
    repo = PopularSearchRepository(db_session)

    await repo.upsert("python", "a snake or a language", "https://img/a.png")
    await repo.upsert("python", "ignored on conflict", "https://img/b.png")
    await repo.upsert("python", "ignored on conflict", "https://img/b.png")

    row = await repo.get("python")
    await db_session.refresh(row)
    assert row.views == 3
    assert row.text == "a snake or a language"
    assert row.img_src == "https://img/a.png"
    assert len(await repo.list_all()) == 1


@pytest.mark.asyncio
async def test_top_since_orders_by_views_and_skips_old_rows(db_session):
    old = datetime.now(timezone.utc) - timedelta(days=30)
    db_session.add_all([
        PopularSearch(keyword="recent-low", text="", img_src="", views=2),
        PopularSearch(keyword="recent-high", text="", img_src="", views=9),
        PopularSearch(keyword="stale", text="", img_src="", views=100, created_at=old),
    ])
    await db_session.commit()

    rows = await PopularSearchRepository(db_session).top_since(days=7, limit=10)

    assert [row.keyword for row in rows] == ["recent-high", "recent-low"]


@pytest.mark.asyncio
async def test_top_since_respects_limit(db_session):
    db_session.add_all([
        PopularSearch(keyword=f"k{i}", text="", img_src="", views=i) for i in range(15)
    ])
    await db_session.commit()

    rows = await PopularSearchRepository(db_session).top_since(days=7, limit=10)

    assert len(rows) == 10
    assert rows[0].keyword == "k14"


@pytest.mark.asyncio
async def test_history_recorded_once_per_user_and_keyword(db_session, user):
    repo = HistoryRepository(db_session)

    await repo.record(user.id, "python")
    await repo.record(user.id, "python")
    await repo.record(user.id, "java")

    rows = await repo.list_all()
    assert sorted(row.search_text for row in rows) == ["java", "python"]


@pytest.mark.asyncio
async def test_posts_by_title(db_session):
    db_session.add_all([
        Post(title="hello", body="first"),
        Post(title="hello", body="second"),
        Post(title="other", body="third"),
    ])
    await db_session.commit()
    repo = PostRepository(db_session)

    assert [p.body for p in await repo.find_by_title("hello")] == ["first", "second"]
    assert await repo.find_by_title("missing") == []
    assert len(await repo.list_all()) == 3


@pytest.mark.asyncio
async def test_deleting_user_cascades_history(db_session, user):
    await HistoryRepository(db_session).record(user.id, "python")

    users = UserRepository(db_session)
    await users.delete(user)

    assert await users.get(user.id) is None
    result = await db_session.execute(History.__table__.select())
    assert result.all() == []
