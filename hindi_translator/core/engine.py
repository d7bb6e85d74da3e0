"""
Translation resolution.

Resolution order:
1. Offline lexicon - exact match on the normalized query
2. Remote providers - in declared order, skipping the rate-limited
   provider once its daily quota is used up

Each call is single-shot and carries a monotonic token. A call that
completes after a newer call was issued is discarded rather than applied.
"""

import itertools
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

import httpx

from .errors import EmptyInputError, NoTranslationFoundError, StaleResolutionError
from .history import HistoryLog
from .lexicon import LEXICON, LexiconStore, normalize
from .providers import ProviderChain
from .quota import QuotaTracker
from ..config.loader import TranslatorConfig
from ..storage.models import OFFLINE_SOURCE, HistoryItem, TranslationRecord
from ..storage.store import KeyValueStore

logger = logging.getLogger("hindi-translator")


@dataclass(frozen=True)
class Resolution:
    """A translation together with the request token that produced it."""
    token: int
    record: TranslationRecord


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResolutionEngine:
    """Orchestrates lexicon, quota, provider chain and history."""

    def __init__(
        self,
        lexicon: LexiconStore,
        chain: ProviderChain,
        quota: QuotaTracker,
        history: HistoryLog,
        rate_limited_provider: Optional[str] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize the engine.

        Args:
            lexicon: Offline word list
            chain: Remote provider chain
            quota: Tracker for the rate-limited provider
            history: Lookup history
            rate_limited_provider: Name of the quota-gated provider,
                defaults to the first provider in the chain
            clock: Source of history timestamps
        """
        self.lexicon = lexicon
        self.chain = chain
        self.quota = quota
        self.history = history
        self.rate_limited_provider = rate_limited_provider or chain.names[0]
        self._clock = clock
        self._tokens = itertools.count(1)
        self._latest = 0

    @property
    def latest_token(self) -> int:
        """Token of the most recently issued request."""
        return self._latest

    def _start_index(self) -> int:
        rate_limited = self.chain.index_of(self.rate_limited_provider)
        if self.quota.is_exhausted():
            logger.info("Daily quota for %s exhausted, skipping it", self.rate_limited_provider)
            return rate_limited + 1
        return 0

    async def resolve(self, word: str) -> Resolution:
        """Resolve an English word or phrase to Hindi.

        Args:
            word: User input as typed

        Returns:
            Resolution holding the translation

        Raises:
            EmptyInputError: If the input is blank
            NoTranslationFoundError: If no source produced a translation
            StaleResolutionError: If a newer request was issued meanwhile
        """
        typed = word.strip() if isinstance(word, str) else ""
        key = normalize(typed)
        if not key:
            raise EmptyInputError()

        token = next(self._tokens)
        self._latest = token

        record = self.lexicon.lookup(key)
        if record is not None:
            logger.debug("Lexicon hit for '%s'", key)
            record = TranslationRecord(
                headword=key, hindi=record.hindi, romanized=record.romanized, source=OFFLINE_SOURCE
            )
        else:
            record = await self.chain.resolve(key, self._start_index())
            if record is not None and record.source == self.rate_limited_provider:
                self.quota.record_use()

        if token != self._latest:
            logger.debug("Discarding result of request %d; latest is %d", token, self._latest)
            raise StaleResolutionError(token, self._latest)

        if record is None:
            raise NoTranslationFoundError(key)

        self.history.record(HistoryItem(
            english=typed,
            hindi=record.hindi,
            romanized=record.romanized,
            source=record.source,
            timestamp=self._clock().isoformat(),
        ))
        return Resolution(token=token, record=record)


def create_engine(
    config: TranslatorConfig,
    store: KeyValueStore,
    client: Optional[httpx.AsyncClient] = None,
) -> ResolutionEngine:
    """Wire an engine with the built-in lexicon and providers.

    Args:
        config: Translator configuration
        store: Persistence for quota and history
        client: Optional shared HTTP client

    Returns:
        Ready-to-use ResolutionEngine
    """
    chain = ProviderChain(client=client, timeout=config.network.timeout_seconds)
    return ResolutionEngine(
        lexicon=LEXICON,
        chain=chain,
        quota=QuotaTracker(store, config.quota.daily_limit),
        history=HistoryLog(store, config.history.max_items),
    )
