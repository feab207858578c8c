"""Error types raised by the external service adapters."""


class ExternalServiceError(Exception):
    """An upstream provider failed or returned something unusable."""

    def __init__(self, message: str = "External service error"):
        self.message = message
        super().__init__(self.message)


class LanguageDetectionError(ExternalServiceError):
    pass


class WikipediaError(ExternalServiceError):
    pass


class ChatCompletionError(ExternalServiceError):
    pass


class TranslationError(ExternalServiceError):
    pass
