
import logging
import openai
from .errors import ChatCompletionError
from wikilens.core.settings import settings

logger = logging.getLogger(__name__)


class ChatClient:
    """Single-turn chat completion with fixed sampling parameters."""

    def __init__(self, client=None, model: str | None = None):
        self.client = client or openai.AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
        )
        self.model = model or settings.openai_model

    async def complete(self, prompt: str) -> str:
        logger.debug(f"Requesting completion from {self.model}")
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=1.0,
                frequency_penalty=0,
                presence_penalty=0,
            )
        except openai.OpenAIError as e:
            raise ChatCompletionError(f"Chat completion failed: {e}") from e

        if not response.choices:
            raise ChatCompletionError("Chat completion returned no choices")

        message = response.choices[0].message
        content = message.content if message else None
        if content is None:
            raise ChatCompletionError("Chat completion returned empty content")

        return content
