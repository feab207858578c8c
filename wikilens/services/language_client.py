
import httpx
from .errors import LanguageDetectionError
from .utils import backoff_client, limited_post
from wikilens.core.settings import settings


class LanguageDetector:
    def __init__(self, client_factory=backoff_client, api_key: str | None = None, url: str | None = None):
        self.client_factory = client_factory
        self.api_key = api_key if api_key is not None else settings.detect_language_api_key
        self.url = url or settings.detect_language_url

    async def detect(self, text: str) -> str:
        """Return the two-letter code of the top detection for ``text``."""
        headers = {"Authorization": f"Bearer {self.api_key}"}
        async with self.client_factory() as client:
            try:
                response = await limited_post(client, self.url, data={"q": text}, headers=headers)
                data = response.json()
            except (httpx.HTTPError, ValueError) as e:
                raise LanguageDetectionError(f"Language detection failed: {e}") from e

        detections = (data.get("data") or {}).get("detections") or []
        if not detections or not detections[0].get("language"):
            raise LanguageDetectionError(f"No language detected for '{text}'")

        return detections[0]["language"]
