"""
Remote translation providers and the fallback chain.

Each provider knows how to build its request and parse its response. The
chain tries them one at a time in declared order and stops at the first
non-empty translation.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import httpx

from .errors import (
    ProviderEmptyResultError,
    ProviderError,
    ProviderParseError,
    ProviderTransportError,
)
from .transliteration import to_roman
from ..storage.models import TranslationRecord

logger = logging.getLogger("hindi-translator")

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "hindi-translator/0.1",
}


class Transport(Enum):
    """HTTP method a provider is called with."""
    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class ProviderRequest:
    """A fully built HTTP request for one provider."""
    url: str
    method: Transport
    headers: Dict[str, str]
    params: Optional[Dict[str, str]] = None
    json: Optional[Dict[str, str]] = None


@dataclass(frozen=True)
class ProviderSpec:
    """A remote translation endpoint.

    GET providers send the payload as URL query parameters, POST providers
    as a JSON body. The parser receives the decoded JSON body and returns
    the translated text, raising ProviderParseError when the body does not
    have the expected shape.
    """
    name: str
    method: Transport
    url: str
    payload: Callable[[str], Dict[str, str]]
    parser: Callable[[Any], Optional[str]]
    headers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    def build_request(self, word: str) -> ProviderRequest:
        """Build the request for a word."""
        body = self.payload(word)
        if self.method == Transport.GET:
            return ProviderRequest(url=self.url, method=self.method, headers=dict(self.headers), params=body)
        return ProviderRequest(url=self.url, method=self.method, headers=dict(self.headers), json=body)

    def parse_response(self, body: Any) -> str:
        """Extract non-empty translated text from a decoded body.

        Raises:
            ProviderParseError: If the body is malformed
            ProviderEmptyResultError: If the text is blank
        """
        try:
            text = self.parser(body)
        except (KeyError, TypeError, AttributeError) as e:
            raise ProviderParseError(self.name, f"unexpected response shape: {e}") from None
        if text is None:
            raise ProviderParseError(self.name, "response carried no translation")
        if not isinstance(text, str):
            raise ProviderParseError(self.name, f"translation is {type(text).__name__}, not text")
        if not text.strip():
            raise ProviderEmptyResultError(self.name, "translation was blank")
        return text.strip()


def _parse_mymemory(body: Any) -> Optional[str]:
    if body.get("responseStatus") != 200:
        raise ProviderParseError("MyMemory", f"responseStatus {body.get('responseStatus')!r}")
    return body["responseData"]["translatedText"]


def _parse_libretranslate(body: Any) -> Optional[str]:
    return body.get("translatedText")


MYMEMORY = ProviderSpec(
    name="MyMemory",
    method=Transport.GET,
    url="https://api.mymemory.translated.net/get",
    payload=lambda word: {"q": word, "langpair": "en|hi"},
    parser=_parse_mymemory,
)

LIBRETRANSLATE = ProviderSpec(
    name="LibreTranslate",
    method=Transport.POST,
    url="https://libretranslate.de/translate",
    payload=lambda word: {"q": word, "source": "en", "target": "hi", "format": "text"},
    parser=_parse_libretranslate,
)

LIBRETRANSLATE_ALT = ProviderSpec(
    name="LibreTranslateAlt",
    method=Transport.POST,
    url="https://translate.argosopentech.com/translate",
    payload=lambda word: {"q": word, "source": "en", "target": "hi"},
    parser=_parse_libretranslate,
)

# Fallback priority; the first provider is the rate-limited one
DEFAULT_PROVIDERS: Tuple[ProviderSpec, ...] = (MYMEMORY, LIBRETRANSLATE, LIBRETRANSLATE_ALT)


class ProviderChain:
    """Ordered fallback across remote providers.

    Providers are awaited strictly in sequence, never concurrently, and a
    failed provider is not retried.
    """

    def __init__(
        self,
        providers: Sequence[ProviderSpec] = DEFAULT_PROVIDERS,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        """Initialize the chain.

        Args:
            providers: Providers in fallback priority order
            client: Shared HTTP client; one is opened per call when omitted
            timeout: Per-request timeout in seconds for owned clients
        """
        if not providers:
            raise ValueError("providers cannot be empty")
        self.providers: Tuple[ProviderSpec, ...] = tuple(providers)
        self.client = client
        self.timeout = timeout

    @property
    def names(self) -> List[str]:
        return [provider.name for provider in self.providers]

    def index_of(self, name: str) -> int:
        """Position of the named provider in the chain."""
        return self.names.index(name)

    async def resolve(self, word: str, start_index: int = 0) -> Optional[TranslationRecord]:
        """Translate word with the first provider that succeeds.

        Args:
            word: Normalized English word or phrase
            start_index: First provider to try; earlier ones are skipped

        Returns:
            TranslationRecord from the winning provider, or None when every
            provider from start_index onward failed
        """
        if start_index < 0:
            raise ValueError("start_index must be >= 0")

        candidates = self.providers[start_index:]
        if not candidates:
            return None

        if self.client is not None:
            return await self._try_in_order(self.client, word, candidates)
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            return await self._try_in_order(client, word, candidates)

    async def _try_in_order(
        self,
        client: httpx.AsyncClient,
        word: str,
        candidates: Sequence[ProviderSpec],
    ) -> Optional[TranslationRecord]:
        for provider in candidates:
            logger.debug("Trying %s for '%s'", provider.name, word)
            try:
                hindi = await self._attempt(client, provider, word)
            except ProviderError as e:
                logger.warning("Provider %s failed for '%s': %s", e.provider, word, e.reason)
                continue

            return TranslationRecord(
                headword=word,
                hindi=hindi,
                romanized=to_roman(hindi),
                source=provider.name,
            )

        logger.warning("All providers failed for '%s'", word)
        return None

    async def _attempt(self, client: httpx.AsyncClient, provider: ProviderSpec, word: str) -> str:
        request = provider.build_request(word)
        try:
            response = await client.request(
                request.method.value,
                request.url,
                headers=request.headers,
                params=request.params,
                json=request.json,
                follow_redirects=True,
            )
            response.raise_for_status()
        except httpx.TimeoutException:
            raise ProviderTransportError(provider.name, "request timed out") from None
        except httpx.HTTPStatusError as e:
            raise ProviderTransportError(
                provider.name, f"HTTP {e.response.status_code}"
            ) from None
        except httpx.RequestError as e:
            raise ProviderTransportError(provider.name, f"connection failed: {e}") from None

        try:
            body = response.json()
        except ValueError:
            raise ProviderParseError(provider.name, "response was not valid JSON") from None

        return provider.parse_response(body)
