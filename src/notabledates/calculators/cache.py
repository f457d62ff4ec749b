from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Callable, Dict, Hashable, Optional

logger = logging.getLogger(__name__)


class DateCache:
    """
    Write-once map from a hashable key to a computed date.

    Hits are served without locking. A miss takes the lock, re-checks and
    computes, so each key is computed at most once and every caller sees the
    same stored value. Entries are never evicted.
    """

    def __init__(self) -> None:
        self._entries: Dict[Hashable, date] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[date]:
        return self._entries.get(key)

    def get_or_add(self, key: Hashable, factory: Callable[[], date]) -> date:
        try:
            return self._entries[key]
        except KeyError:
            pass
        with self._lock:
            if key in self._entries:
                return self._entries[key]
            value = factory()
            self._entries[key] = value
            logger.debug("cached %r -> %s", key, value)
            return value

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DateCache(entries={len(self._entries)})"
