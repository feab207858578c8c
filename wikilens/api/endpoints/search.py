
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import List, Optional
from wikilens.api.dependencies import (
    get_current_user_optional,
    get_history_repository,
    get_popular_search_repository,
    get_search_service,
)
from wikilens.core.settings import settings
from wikilens.models import User
from wikilens.schemas import PopularSearchOut, SearchResult, TopSearches
from wikilens.services.repositories import HistoryRepository, PopularSearchRepository
from wikilens.services.search_service import SearchService
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")
page_router = APIRouter()

@router.get("/search/{keyword}", response_model=SearchResult)
async def search_endpoint(
    keyword: str,
    service: SearchService = Depends(get_search_service),
):
    try:
        return await service.search(keyword)
    except Exception as e:
        logger.error(f"Search error: {e}")
        return JSONResponse({"error": "Search failed"}, status_code=500)

@router.get("/searches")
async def cached_searches_endpoint(
    service: SearchService = Depends(get_search_service),
) -> List[SearchResult]:
    return await service.cached_searches()

@router.get("/searches/{keyword}")
async def cached_search_endpoint(
    keyword: str,
    service: SearchService = Depends(get_search_service),
) -> Optional[SearchResult]:
    return await service.cached_search(keyword)

@page_router.get("/search/{keyword}")
async def show_search(
    keyword: str,
    user: Optional[User] = Depends(get_current_user_optional),
    history: HistoryRepository = Depends(get_history_repository),
):
    if user is not None:
        await history.record(user.id, keyword)

    return {"keyword": keyword}

@page_router.get("/top")
async def top_searches(
    popular: PopularSearchRepository = Depends(get_popular_search_repository),
) -> TopSearches:
    rows = await popular.top_since(days=settings.top_searches_days, limit=settings.top_searches_limit)
    return TopSearches(tops=[PopularSearchOut.model_validate(row) for row in rows])
