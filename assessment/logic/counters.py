"""
Drift Counters

In-process counters for data the engine drops on purpose (unknown answer
keys, streams missing from the catalog) so operators can see client/server
drift without the engine raising errors.
"""

import threading
from collections import Counter
from typing import Dict, Iterable

from .constants import COUNTER_NAMES


class ScoringCounters:
    """Thread-safe named counters."""

    def __init__(self, names: Iterable[str] = COUNTER_NAMES):
        self._names = list(names)
        self._lock = threading.Lock()
        self._counts: Counter = Counter({name: 0 for name in self._names})

    def increment(self, name: str, by: int = 1) -> None:
        if by <= 0:
            return
        with self._lock:
            self._counts[name] += by

    def get(self, name: str) -> int:
        with self._lock:
            return self._counts[name]

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def reset(self) -> None:
        with self._lock:
            self._counts = Counter({name: 0 for name in self._names})


# Singleton instance
scoring_counters = ScoringCounters()
