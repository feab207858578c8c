
from fastapi import APIRouter, Depends
from typing import List
from wikilens.api.dependencies import (
    get_history_repository,
    get_popular_post_repository,
    get_popular_search_repository,
    get_post_repository,
)
from wikilens.schemas import HistoryOut, PopularPostOut, PopularSearchOut, PostOut
from wikilens.services.repositories import (
    HistoryRepository,
    PopularPostRepository,
    PopularSearchRepository,
    PostRepository,
)

router = APIRouter(prefix="/api")

@router.get("/posts", response_model=List[PostOut])
async def list_posts(posts: PostRepository = Depends(get_post_repository)):
    return await posts.list_all()

@router.get("/posts/{title}", response_model=List[PostOut])
async def get_posts_by_title(title: str, posts: PostRepository = Depends(get_post_repository)):
    return await posts.find_by_title(title)

@router.get("/history", response_model=List[HistoryOut])
async def list_history(history: HistoryRepository = Depends(get_history_repository)):
    return await history.list_all()

@router.get("/popular-posts", response_model=List[PopularPostOut])
async def list_popular_posts(popular: PopularPostRepository = Depends(get_popular_post_repository)):
    return await popular.list_all()

@router.get("/popular-searches", response_model=List[PopularSearchOut])
async def list_popular_searches(popular: PopularSearchRepository = Depends(get_popular_search_repository)):
    return await popular.list_all()
