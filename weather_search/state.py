"""Search session state.

A session is always in exactly one of four states. Every search gets a
generation number from :meth:`SearchSession.begin`; results are only committed
while their generation is still the newest, so a slow response can never
overwrite the outcome of a search started after it.
"""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from threading import Lock
from typing import Optional, Union

from .entities import DisplayRecord
from .errors import ErrorKind, SearchError, UnknownFetchError
from .services.lookup import WeatherLookup


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    query: str
    generation: int


@dataclass(frozen=True)
class Success:
    record: DisplayRecord


@dataclass(frozen=True)
class Failed:
    kind: ErrorKind
    message: str


SearchState = Union[Idle, Loading, Success, Failed]

IDLE = Idle()


class SearchSession:
    """Owns the current search state for one interactive user."""

    def __init__(self, lookup: Optional[WeatherLookup] = None) -> None:
        self._lookup = lookup or WeatherLookup()
        self._lock = Lock()
        self._generation = 0
        self._state: SearchState = IDLE
        self._executor: Optional[ThreadPoolExecutor] = None
        self._pending: Optional[Future] = None

    @property
    def state(self) -> SearchState:
        with self._lock:
            return self._state

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    # -- Transitions --------------------------------------------------------
    def begin(self, query: str) -> int:
        with self._lock:
            self._generation += 1
            self._state = Loading(query=query, generation=self._generation)
            return self._generation

    def complete(self, token: int, record: DisplayRecord) -> bool:
        return self._commit(token, Success(record=record))

    def fail(self, token: int, error: SearchError) -> bool:
        return self._commit(token, Failed(kind=error.kind, message=error.message))

    def reset(self) -> None:
        with self._lock:
            self._generation += 1
            self._state = IDLE

    def _commit(self, token: int, state: SearchState) -> bool:
        with self._lock:
            if token != self._generation:
                logger.debug("Dropping stale result for search %s (current %s)", token, self._generation)
                return False
            self._state = state
            return True

    # -- Running searches ---------------------------------------------------
    def run(self, query: str) -> SearchState:
        token = self.begin(query)
        self._execute(token, query)
        return self.state

    def submit(self, query: str) -> Future:
        """Run the search on a worker thread, superseding any earlier one."""
        token = self.begin(query)
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="weather-search")
            if self._pending is not None:
                self._pending.cancel()
            future = self._executor.submit(self._execute, token, query)
            self._pending = future
        return future

    def close(self) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
            self._pending = None
        if executor is not None:
            executor.shutdown(wait=True)

    def _execute(self, token: int, query: str) -> bool:
        try:
            record = self._lookup.search(query)
        except SearchError as exc:
            return self.fail(token, exc)
        except Exception as exc:  # noqa: BLE001 - safety
            logger.error("Unexpected error while searching for %r", query, exc_info=exc)
            return self.fail(token, UnknownFetchError())
        return self.complete(token, record)


__all__ = ["Failed", "IDLE", "Idle", "Loading", "SearchSession", "SearchState", "Success"]
