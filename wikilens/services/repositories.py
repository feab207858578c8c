"""
Repositories over the relational store
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from sqlalchemy import select, func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from wikilens.models import History, Post, PopularPost, PopularSearch, User
import logging

logger = logging.getLogger(__name__)


def _dialect_insert(session: AsyncSession, model):
    """INSERT construct supporting ON CONFLICT for the session's backend."""
    dialect = session.bind.dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model)
    if dialect == "sqlite":
        return sqlite.insert(model)
    raise NotImplementedError(f"Upsert is not supported on {dialect}")


class PostRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Post]:
        result = await self.session.execute(select(Post).order_by(Post.id))
        return list(result.scalars().all())

    async def find_by_title(self, title: str) -> List[Post]:
        result = await self.session.execute(
            select(Post).where(Post.title == title).order_by(Post.id)
        )
        return list(result.scalars().all())


class PopularPostRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[PopularPost]:
        result = await self.session.execute(select(PopularPost).order_by(PopularPost.id))
        return list(result.scalars().all())


class HistoryRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[History]:
        result = await self.session.execute(select(History).order_by(History.id))
        return list(result.scalars().all())

    async def record(self, user_id: int, search_text: str) -> None:
        """Store a (user, keyword) pair once; repeats are ignored."""
        stmt = _dialect_insert(self.session, History).values(
            user_id=user_id,
            search_text=search_text,
        ).on_conflict_do_nothing(index_elements=[History.user_id, History.search_text])

        await self.session.execute(stmt)
        await self.session.commit()


class PopularSearchRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[PopularSearch]:
        result = await self.session.execute(select(PopularSearch).order_by(PopularSearch.id))
        return list(result.scalars().all())

    async def get(self, keyword: str) -> Optional[PopularSearch]:
        result = await self.session.execute(
            select(PopularSearch).where(PopularSearch.keyword == keyword)
        )
        return result.scalar_one_or_none()

    async def upsert(self, keyword: str, text: str, img_src: str) -> None:
        """Insert the keyword with one view, or bump its views if it exists.

        Done as a single INSERT ... ON CONFLICT so concurrent searches for the
        same keyword never create a second row or lose an increment.
        """
        stmt = _dialect_insert(self.session, PopularSearch).values(
            keyword=keyword,
            text=text,
            img_src=img_src,
            views=1,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[PopularSearch.keyword],
            set_={
                "views": PopularSearch.views + 1,
                "updated_at": func.now(),
            },
        )

        await self.session.execute(stmt)
        await self.session.commit()
        logger.info(f"Recorded popular search: {keyword}")

    async def top_since(self, days: int = 7, limit: int = 10) -> List[PopularSearch]:
        today = datetime.now(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
        since = today - timedelta(days=days)

        result = await self.session.execute(
            select(PopularSearch)
            .where(PopularSearch.created_at >= since)
            .order_by(PopularSearch.views.desc(), PopularSearch.id)
            .limit(limit)
        )
        return list(result.scalars().all())


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: int) -> Optional[User]:
        return await self.session.get(User, user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def save(self, user: User) -> User:
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        await self.session.delete(user)
        await self.session.commit()
