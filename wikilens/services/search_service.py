
from typing import List, Optional, Protocol
from pydantic import ValidationError
from wikilens.core.settings import settings
from wikilens.schemas import SearchResult
import logging

logger = logging.getLogger(__name__)

PERSIAN = "fa"
SUMMARY_WORDS = 10


class SearchCache(Protocol):
    async def get(self, key: str): ...
    async def set(self, key: str, value, ttl: int): ...
    async def values(self) -> list: ...


def truncate_extract(text: str, max_length: int = 390, hard_limit: int = 300) -> str:
    """Shorten a long extract to its first sentence, or a hard prefix if that is still too long."""
    if len(text) <= max_length:
        return text

    text = text.split(".")[0]
    if len(text) > max_length:
        text = text[:hard_limit]
    return text


def build_prompts(language: str, text: str) -> dict:
    if language == PERSIAN:
        return {
            "summary": "توضیحی ای در مورد این متن ارائه دهید. متن: " + text,
            "article": "مقاله ای در مورد : " + text,
        }

    return {
        "summary": "explanation of this text . text is: " + text,
        "article": "Write an article about " + text,
    }


def first_words(text: str, count: int = SUMMARY_WORDS) -> str:
    return " ".join(text.split(" ")[:count])


class SearchService:
    """Composes a Wikipedia extract, generated text and a lead image for a keyword.

    Results are cached per keyword; a cache hit short-circuits every external
    call. On a miss the popularity row for the keyword is upserted before the
    result is cached. Adapter errors propagate untouched and nothing is cached.
    """

    def __init__(
        self,
        detector,
        wikipedia,
        chat,
        popular_searches,
        cache: SearchCache,
        cache_ttl: int | None = None,
        default_image_src: str | None = None,
    ):
        self.detector = detector
        self.wikipedia = wikipedia
        self.chat = chat
        self.popular_searches = popular_searches
        self.cache = cache
        self.cache_ttl = cache_ttl or settings.search_cache_ttl
        self.default_image_src = default_image_src or settings.default_image_src

    async def _from_cache(self, keyword: str) -> Optional[SearchResult]:
        cached = await self.cache.get(keyword)
        if not cached:
            return None
        try:
            return SearchResult.model_validate(cached)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable cache entry for '{keyword}': {e}")
            return None

    async def search(self, keyword: str) -> SearchResult:
        cached = await self._from_cache(keyword)
        if cached is not None:
            logger.info(f"Returning search '{keyword}' from cache")
            return cached

        language = await self.detector.detect(keyword)
        logger.info(f"Detected language '{language}' for '{keyword}'")

        extract = await self.wikipedia.get_extract(language, keyword)
        if extract is None:
            extract = keyword
        extract = truncate_extract(
            extract,
            max_length=settings.extract_max_length,
            hard_limit=settings.extract_hard_limit,
        )

        image_source = await self.wikipedia.get_lead_image(language, keyword)
        if image_source is None:
            image_source = self.default_image_src

        prompts = build_prompts(language, extract)
        summary = await self.chat.complete(prompts["summary"])
        article = await self.chat.complete(prompts["article"])

        await self.popular_searches.upsert(keyword, first_words(summary), image_source)

        result = SearchResult(
            keyword=keyword,
            summary=summary,
            article=article,
            imageSource=image_source,
        )
        await self.cache.set(keyword, result.model_dump(), ttl=self.cache_ttl)

        return result

    async def cached_searches(self) -> List[SearchResult]:
        results = []
        for value in await self.cache.values():
            try:
                results.append(SearchResult.model_validate(value))
            except ValidationError as e:
                logger.warning(f"Skipping unreadable cache entry: {e}")
        return results

    async def cached_search(self, keyword: str) -> Optional[SearchResult]:
        return await self._from_cache(keyword)
