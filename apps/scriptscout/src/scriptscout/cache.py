"""Per-user memoization of discovered scripts."""

import logging
import threading
from typing import Any, Callable, Hashable, Protocol

from .fetcher import ScriptFetcher
from .models import RepositoryConfig, User

logger = logging.getLogger(__name__)

_MISSING = object()


class CacheStore(Protocol):
    """Key/value store with compute-on-miss and explicit eviction."""

    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        """Return the value for key, computing and storing it on a miss."""
        ...

    def evict(self, key: Hashable) -> None:
        """Drop key if present."""
        ...


class _Flight:
    """A computation in progress for one key."""

    def __init__(self, generation: int):
        self.generation = generation
        self.done = threading.Event()
        self.result: Any = None
        self.error: BaseException | None = None


class InMemoryCacheStore:
    """
    Thread-safe in-process cache store without expiry.

    Concurrent misses on the same key share a single computation; when it
    fails, every waiter re-raises the same exception object, so its
    traceback carries frames from each waiting thread. A value computed
    across an eviction of its key is handed to its callers but not stored.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._values: dict[Hashable, Any] = {}
        self._flights: dict[Hashable, _Flight] = {}
        self._generations: dict[Hashable, int] = {}

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if key in self._values:
                logger.debug("Cache hit: %s", key)
                return self._values[key]
            flight = self._flights.get(key)
            leader = flight is None
            if leader:
                flight = _Flight(self._generations.get(key, 0))
                self._flights[key] = flight

        if not leader:
            logger.debug("Waiting for in-flight computation: %s", key)
            flight.done.wait()
            if flight.error is not None:
                raise flight.error
            return flight.result

        logger.debug("Cache miss: %s", key)
        try:
            flight.result = compute()
        except BaseException as e:
            flight.error = e
            raise
        else:
            with self._lock:
                if self._generations.get(key, 0) == flight.generation:
                    self._values[key] = flight.result
                else:
                    logger.debug("Discarding result evicted during computation: %s", key)
            return flight.result
        finally:
            with self._lock:
                if self._flights.get(key) is flight:
                    del self._flights[key]
            flight.done.set()

    def evict(self, key: Hashable) -> None:
        with self._lock:
            present = self._values.pop(key, _MISSING) is not _MISSING
            in_flight = self._flights.pop(key, None) is not None
            if present or in_flight:
                self._generations[key] = self._generations.get(key, 0) + 1
        logger.debug("Evicted: %s", key)

    def clear(self) -> None:
        with self._lock:
            for key in list(self._values) + list(self._flights):
                self._generations[key] = self._generations.get(key, 0) + 1
            self._values.clear()
            self._flights.clear()


class ScriptCache:
    """
    Caches ScriptFetcher results by user id.

    The key ignores the repository config: once a user's scripts are
    cached, later calls return them for any config until evict(user).
    """

    def __init__(self, fetcher: ScriptFetcher, store: CacheStore | None = None):
        self.fetcher = fetcher
        self.store = store if store is not None else InMemoryCacheStore()

    def get_scripts(self, user: User, config: RepositoryConfig) -> list[str]:
        """
        Cached scripts of the user, fetched from config on a miss.

        Raises:
            Whatever ScriptFetcher.fetch_scripts raises; failures are not cached
        """
        def compute() -> tuple[str, ...]:
            logger.info("Fetching scripts for user %s from %s", user.user_id, config.full_name)
            return tuple(self.fetcher.fetch_scripts(user, config))

        return list(self.store.get_or_compute(user.user_id, compute))

    def evict(self, user: User) -> None:
        """Force the next get_scripts for user to fetch again."""
        logger.info("Evicting script cache for user %s", user.user_id)
        self.store.evict(user.user_id)
