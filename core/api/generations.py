#!/usr/bin/env python3
"""
Generation-tagged requests for one logical query.

Every request for a query key (e.g. "search") gets a monotonically
increasing generation. Issuing a new one cancels the previous in-flight
request for that key, and a response whose generation is no longer the
latest is discarded instead of updating visible state.
"""

import asyncio
import itertools
import logging
from typing import Awaitable, Dict, Tuple, TypeVar

from core.exceptions import StaleResponseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GenerationGuard:
    """Tracks the latest generation per query key."""

    def __init__(self):
        self._counter = itertools.count(1)
        self._latest: Dict[str, int] = {}
        self._inflight: Dict[str, "asyncio.Future"] = {}

    def issue(self, key: str) -> int:
        generation = next(self._counter)
        self._latest[key] = generation
        return generation

    def latest(self, key: str) -> int:
        return self._latest.get(key, 0)

    def is_current(self, key: str, generation: int) -> bool:
        return self._latest.get(key) == generation

    async def run(self, key: str, awaitable: Awaitable[T]) -> Tuple[int, T]:
        """
        Run a request as the newest generation of key.

        Returns:
            (generation, result) when this request is still the latest.

        Raises:
            StaleResponseError: A newer request for key superseded this one.
        """
        generation = self.issue(key)

        previous = self._inflight.get(key)
        if previous is not None and not previous.done():
            logger.info(f"Cancelling superseded '{key}' request")
            previous.cancel()

        task = asyncio.ensure_future(awaitable)
        self._inflight[key] = task
        try:
            result = await task
        except asyncio.CancelledError:
            if self.is_current(key, generation):
                raise
            raise StaleResponseError(f"'{key}' request {generation} was superseded")
        finally:
            if self._inflight.get(key) is task:
                del self._inflight[key]

        if not self.is_current(key, generation):
            logger.info(f"Discarding stale '{key}' response (generation {generation})")
            raise StaleResponseError(f"'{key}' request {generation} was superseded")
        return generation, result
