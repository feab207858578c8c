
import httpx
from .errors import TranslationError
from .utils import backoff_client, limited_get
from wikilens.core.settings import settings


class Translator:
    def __init__(self, client_factory=backoff_client, url: str | None = None):
        self.client_factory = client_factory
        self.url = url or settings.translate_url

    async def translate(self, text: str, target: str) -> str:
        params = {
            "client": "gtx",
            "sl": "auto",
            "tl": target,
            "dt": "t",
            "q": text,
        }
        async with self.client_factory() as client:
            try:
                response = await limited_get(client, self.url, params=params)
                data = response.json()
            except (httpx.HTTPError, ValueError) as e:
                raise TranslationError(f"Translation request failed: {e}") from e

        # [[["translated", "source", ...], ...], ...]
        try:
            segments = data[0]
            return "".join(segment[0] for segment in segments if segment and segment[0])
        except (IndexError, KeyError, TypeError) as e:
            raise TranslationError(f"Malformed translation response: {e}") from e
