
import httpx
from contextlib import asynccontextmanager
from aiolimiter import AsyncLimiter

# Simple global rate limiter shared by every outbound provider call
limiter = AsyncLimiter(8, 1)  # 8 req/sec

DEFAULT_TIMEOUT = 20

@asynccontextmanager
async def backoff_client():
    async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as client:
        yield client

async def limited_get(client: httpx.AsyncClient, url: str, **kwargs) -> httpx.Response:
    async with limiter:
        resp = await client.get(url, **kwargs)
        resp.raise_for_status()
        return resp

async def limited_post(client: httpx.AsyncClient, url: str, **kwargs) -> httpx.Response:
    async with limiter:
        resp = await client.post(url, **kwargs)
        resp.raise_for_status()
        return resp
