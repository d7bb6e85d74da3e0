"""
Daily quota tracking for the rate-limited provider.

The stored counter belongs to a single calendar day. A counter stored for
any other day reads as zero for today; the stale date is never an error.
"""

import json
import logging
import threading
from datetime import date
from typing import Callable, Optional

from ..storage.models import QuotaState
from ..storage.store import QUOTA_KEY, KeyValueStore

logger = logging.getLogger("hindi-translator")


def current_quota(stored: Optional[QuotaState], today: date) -> QuotaState:
    """Return the quota state effective for today.

    Args:
        stored: Persisted state, or None when nothing was stored yet
        today: Current calendar day

    Returns:
        The stored state if it is for today, otherwise a zeroed state
    """
    day = today.isoformat()
    if stored is None or stored.date != day:
        return QuotaState(date=day, count=0)
    return stored


class QuotaTracker:
    """Persisted daily counter gating the rate-limited provider."""

    def __init__(
        self,
        store: KeyValueStore,
        daily_limit: int,
        today: Callable[[], date] = date.today,
    ):
        """Initialize the tracker.

        Args:
            store: Key-value store holding the counter
            daily_limit: Requests allowed per calendar day
            today: Clock returning the current day
        """
        if daily_limit <= 0:
            raise ValueError("daily_limit must be > 0")
        self.store = store
        self.daily_limit = daily_limit
        self._today = today
        self._lock = threading.Lock()

    def _load(self) -> Optional[QuotaState]:
        raw = self.store.get(QUOTA_KEY)
        if raw is None:
            return None
        try:
            return QuotaState.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Ignoring malformed quota state %r: %s", raw, e)
            return None

    def state(self) -> QuotaState:
        """Quota state effective for today."""
        return current_quota(self._load(), self._today())

    def remaining(self) -> int:
        """Requests left today."""
        return max(self.daily_limit - self.state().count, 0)

    def is_exhausted(self) -> bool:
        """True once today's count has reached the daily limit."""
        return self.state().count >= self.daily_limit

    def record_use(self) -> QuotaState:
        """Count one successful use of the rate-limited provider.

        Returns:
            The persisted state after incrementing
        """
        with self._lock:
            current = self.state()
            updated = QuotaState(date=current.date, count=current.count + 1)
            self.store.set(QUOTA_KEY, json.dumps(updated.to_dict()))
        logger.info("Rate-limited provider used %d/%d times on %s", updated.count, self.daily_limit, updated.date)
        return updated
