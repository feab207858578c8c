import redis.asyncio as redis
import json
import logging
from typing import Any, List, Optional
from wikilens.core.settings import settings

logger = logging.getLogger(__name__)

_redis_client: Optional[redis.Redis] = None


async def get_redis() -> Optional[redis.Redis]:
    global _redis_client

    if _redis_client is None:
        try:
            _redis_client = redis.from_url(
                settings.redis_url,
                encoding="utf-8",
                decode_responses=True
            )
            await _redis_client.ping()
            logger.info("Redis connection established")
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {e}")
            _redis_client = None

    return _redis_client


async def close_redis() -> None:
    global _redis_client

    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None


async def cache_get(key: str) -> Optional[Any]:
    try:
        client = await get_redis()
        if client is None:
            return None

        value = await client.get(key)
        if value:
            return json.loads(value)
        return None
    except Exception as e:
        logger.error(f"Cache get error for key {key}: {e}")
        return None


async def cache_set(key: str, value: Any, ttl: int = 3600) -> bool:
    try:
        client = await get_redis()
        if client is None:
            return False

        json_value = json.dumps(value, ensure_ascii=False, default=str)
        await client.setex(key, ttl, json_value)
        return True
    except Exception as e:
        logger.error(f"Cache set error for key {key}: {e}")
        return False


async def cache_get_pattern(pattern: str) -> List[Any]:
    try:
        client = await get_redis()
        if client is None:
            return []

        values = []
        async for key in client.scan_iter(match=pattern):
            value = await client.get(key)
            if not value:
                continue
            try:
                values.append(json.loads(value))
            except ValueError as e:
                logger.error(f"Skipping undecodable cache entry {key}: {e}")
        return values
    except Exception as e:
        logger.error(f"Cache scan error for {pattern}: {e}")
        return []


class RedisCache:
    """Key/value cache with a fixed key prefix, backed by the shared redis client."""

    def __init__(self, prefix: str):
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}:{key}"

    async def get(self, key: str) -> Optional[Any]:
        return await cache_get(self._key(key))

    async def set(self, key: str, value: Any, ttl: int) -> bool:
        return await cache_set(self._key(key), value, ttl=ttl)

    async def values(self) -> List[Any]:
        return await cache_get_pattern(f"{self.prefix}:*")
