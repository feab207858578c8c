
import httpx
import logging
from typing import Any, Dict, Optional
from .errors import WikipediaError
from .utils import backoff_client, limited_get
from wikilens.core.settings import settings

logger = logging.getLogger(__name__)


class WikipediaClient:
    """MediaWiki action API lookups for a page's intro extract and lead image.

    Both lookups return None when the page (or the requested prop) does not
    exist. Only transport failures and unreadable payloads raise.
    """

    def __init__(self, client_factory=backoff_client, api_url: str | None = None):
        self.client_factory = client_factory
        self.api_url = api_url or settings.wikipedia_api_url

    async def _first_page(self, language: str, params: Dict[str, Any]) -> Dict[str, Any]:
        url = self.api_url.format(language=language)
        async with self.client_factory() as client:
            try:
                response = await limited_get(client, url, params=params)
                data = response.json()
            except (httpx.HTTPError, ValueError) as e:
                raise WikipediaError(f"Wikipedia request failed: {e}") from e

        query = data.get("query") if isinstance(data, dict) else None
        pages = query.get("pages") if isinstance(query, dict) else None
        if not isinstance(pages, dict) or not pages:
            raise WikipediaError("Wikipedia response has no pages")

        return next(iter(pages.values()))

    async def get_extract(self, language: str, title: str) -> Optional[str]:
        page = await self._first_page(language, {
            "format": "json",
            "action": "query",
            "prop": "extracts",
            "exintro": 1,
            "explaintext": 1,
            "redirects": 1,
            "titles": title,
        })

        extract = page.get("extract")
        if not extract:
            logger.info(f"No Wikipedia extract for '{title}' ({language})")
            return None
        return extract

    async def get_lead_image(self, language: str, title: str) -> Optional[str]:
        page = await self._first_page(language, {
            "action": "query",
            "prop": "pageimages",
            "format": "json",
            "piprop": "original",
            "titles": title,
        })

        original = page.get("original") or {}
        source = original.get("source")
        if not source:
            logger.info(f"No Wikipedia lead image for '{title}' ({language})")
            return None
        return source
