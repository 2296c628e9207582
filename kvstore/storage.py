"""Thread-safe in-memory string store with optional per-key deadlines."""
import logging
from datetime import datetime
from typing import Dict, List

from .clock import Clock, utcnow
from .locks import RWLock
from .models import MISS, Entry, Lookup
from .settings import configure_logging

logger = logging.getLogger(__name__)
configure_logging()


class Store:
    """Maps string keys to string values.

    Entries written with ``put_till`` disappear from ``get`` and ``keys``
    once their deadline has passed. Expired entries are not reaped; they
    stay in memory until the same key is written again.
    """

    def __init__(self, clock: Clock = utcnow):
        self._data: Dict[str, Entry] = {}
        self._clock = clock
        self._lock = RWLock()
        logger.debug("store created")

    def put(self, key: str, value: str) -> None:
        entry = Entry(value=value)
        with self._lock.write_locked():
            self._data[key] = entry
        logger.debug("put %r", key)

    def put_till(self, key: str, value: str, deadline: datetime) -> None:
        entry = Entry(value=value, deadline=deadline)
        with self._lock.write_locked():
            self._data[key] = entry
        logger.debug("put %r until %s", key, entry.deadline)

    def get(self, key: str) -> Lookup:
        with self._lock.read_locked():
            entry = self._data.get(key)
            if entry is not None and entry.alive(self._clock()):
                return Lookup(entry.value, True)
        logger.debug("miss %r", key)
        return MISS

    def keys(self) -> List[str]:
        now = self._clock()
        with self._lock.read_locked():
            return [key for key, entry in self._data.items() if entry.alive(now)]
