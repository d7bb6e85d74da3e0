"""
Exceptions raised while resolving a translation.

Provider errors never leave the provider chain; only EmptyInputError,
NoTranslationFoundError and StaleResolutionError reach callers.
"""


class TranslationError(Exception):
    """Base class for translation failures."""


class EmptyInputError(TranslationError):
    """Raised when the query is blank after normalization."""

    def __init__(self, message: str = "Please enter a word to translate"):
        super().__init__(message)


class NoTranslationFoundError(TranslationError):
    """Raised when neither the lexicon nor any provider produced a translation."""

    def __init__(self, word: str):
        super().__init__(f"Translation not found for '{word}'")
        self.word = word


class StaleResolutionError(TranslationError):
    """Raised when a newer request was issued before this one completed."""

    def __init__(self, token: int, latest: int):
        super().__init__(f"Request {token} superseded by request {latest}")
        self.token = token
        self.latest = latest


class ProviderError(TranslationError):
    """A single provider failed; the chain moves on to the next one."""

    def __init__(self, provider: str, reason: str):
        super().__init__(f"{provider}: {reason}")
        self.provider = provider
        self.reason = reason


class ProviderTransportError(ProviderError):
    """Network failure, timeout or non-success status code."""


class ProviderParseError(ProviderError):
    """Response body was not valid JSON or lacked the expected fields."""


class ProviderEmptyResultError(ProviderError):
    """Provider answered but the translated text was blank."""
