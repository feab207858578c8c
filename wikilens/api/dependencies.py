"""
FastAPI dependencies
"""
from functools import lru_cache
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from wikilens.core.database import get_db
from wikilens.core.redis import RedisCache
from wikilens.core.security import session_user_id
from wikilens.models import User
from wikilens.services.chat_client import ChatClient
from wikilens.services.language_client import LanguageDetector
from wikilens.services.profile_service import ProfileService
from wikilens.services.repositories import (
    HistoryRepository,
    PopularPostRepository,
    PopularSearchRepository,
    PostRepository,
    UserRepository,
)
from wikilens.services.search_service import SearchService
from wikilens.services.storage import PublicStorage
from wikilens.services.translate_client import Translator
from wikilens.services.wikipedia_client import WikipediaClient

SEARCH_CACHE_PREFIX = "search"


@lru_cache
def get_chat_client() -> ChatClient:
    return ChatClient()


def get_language_detector() -> LanguageDetector:
    return LanguageDetector()


def get_wikipedia_client() -> WikipediaClient:
    return WikipediaClient()


def get_translator() -> Translator:
    return Translator()


def get_search_cache() -> RedisCache:
    return RedisCache(SEARCH_CACHE_PREFIX)


def get_storage() -> PublicStorage:
    return PublicStorage()


def get_post_repository(db: AsyncSession = Depends(get_db)) -> PostRepository:
    return PostRepository(db)


def get_history_repository(db: AsyncSession = Depends(get_db)) -> HistoryRepository:
    return HistoryRepository(db)


def get_popular_post_repository(db: AsyncSession = Depends(get_db)) -> PopularPostRepository:
    return PopularPostRepository(db)


def get_popular_search_repository(db: AsyncSession = Depends(get_db)) -> PopularSearchRepository:
    return PopularSearchRepository(db)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_search_service(
    detector: LanguageDetector = Depends(get_language_detector),
    wikipedia: WikipediaClient = Depends(get_wikipedia_client),
    chat: ChatClient = Depends(get_chat_client),
    popular_searches: PopularSearchRepository = Depends(get_popular_search_repository),
    cache: RedisCache = Depends(get_search_cache),
) -> SearchService:
    return SearchService(detector, wikipedia, chat, popular_searches, cache)


def get_profile_service(
    user_repo: UserRepository = Depends(get_user_repository),
    storage: PublicStorage = Depends(get_storage),
) -> ProfileService:
    return ProfileService(user_repo, storage)


async def get_current_user_optional(
    request: Request,
    user_repo: UserRepository = Depends(get_user_repository),
) -> Optional[User]:
    """
    Get the signed-in user from the session

    Returns None if not authenticated instead of raising exception
    """
    user_id = session_user_id(request)
    if user_id is None:
        return None

    user = await user_repo.get(user_id)
    if user is None:
        # account is gone, forget the stale session
        request.session.clear()
    return user


async def get_current_user(
    user: Optional[User] = Depends(get_current_user_optional),
) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user
