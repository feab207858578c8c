
import fnmatch
import pytest
from wikilens.core import redis as redis_module
from wikilens.core.redis import RedisCache


class MemoryRedis:
    def __init__(self):
        self.data = {}
        self.ttls = {}

    async def get(self, key):
        return self.data.get(key)

    async def setex(self, key, ttl, value):
        self.data[key] = value
        self.ttls[key] = ttl

    async def scan_iter(self, match=None):
        for key in list(self.data):
            if match is None or fnmatch.fnmatch(key, match):
                yield key


class BrokenRedis(MemoryRedis):
    async def get(self, key):
        raise ConnectionError("redis down")


@pytest.mark.asyncio
async def test_prefixed_round_trip(monkeypatch):
    fake = MemoryRedis()
    monkeypatch.setattr(redis_module, "_redis_client", fake)
    cache = RedisCache("search")

    await cache.set("تهران", {"keyword": "تهران"}, ttl=86400)

    assert "search:تهران" in fake.data
    assert fake.ttls["search:تهران"] == 86400
    assert await cache.get("تهران") == {"keyword": "تهران"}
    assert await cache.get("other") is None


@pytest.mark.asyncio
async def test_values_only_returns_prefixed_entries(monkeypatch):
    fake = MemoryRedis()
    fake.data["unrelated"] = '{"x": 1}'
    monkeypatch.setattr(redis_module, "_redis_client", fake)
    cache = RedisCache("search")

    await cache.set("a", {"keyword": "a"}, ttl=10)
    await cache.set("b", {"keyword": "b"}, ttl=10)

    assert sorted(v["keyword"] for v in await cache.values()) == ["a", "b"]


@pytest.mark.asyncio
async def test_cache_errors_read_as_miss(monkeypatch):
    monkeypatch.setattr(redis_module, "_redis_client", BrokenRedis())

    assert await RedisCache("search").get("python") is None


@pytest.mark.asyncio
async def test_values_skips_undecodable_entries(monkeypatch):
    fake = MemoryRedis()
    fake.data["search:broken"] = "{not json"
    monkeypatch.setattr(redis_module, "_redis_client", fake)
    cache = RedisCache("search")

    await cache.set("a", {"keyword": "a"}, ttl=10)

    assert await cache.values() == [{"keyword": "a"}]
