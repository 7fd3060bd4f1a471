#!/usr/bin/env python3
"""
Test suite for session storage and coalesced token refresh.
"""

import asyncio
import unittest

from core.api import Session, SessionManager
from core.exceptions import NetworkError, SessionExpiredError


class TestSessionManager(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.refresh_calls = 0
        self.release = asyncio.Event()

    async def _slow_refresher(self, refresh_token):
        self.refresh_calls += 1
        await self.release.wait()
        return Session(access_token=f"access-{self.refresh_calls}", refresh_token="refresh-2")

    def test_set_get_clear(self):
        manager = SessionManager()
        self.assertFalse(manager.get().is_authenticated)

        manager.set(Session(access_token="a", refresh_token="r"))
        self.assertTrue(manager.get().is_authenticated)

        manager.clear()
        self.assertEqual(manager.get(), Session())

    async def test_concurrent_refreshes_share_one_call(self):
        manager = SessionManager(self._slow_refresher)
        manager.set(Session(access_token="stale", refresh_token="refresh-1"))

        waiters = [asyncio.ensure_future(manager.refresh("stale")) for _ in range(3)]
        await asyncio.sleep(0)
        self.assertTrue(manager.is_refreshing)
        self.release.set()
        results = await asyncio.gather(*waiters)

        self.assertEqual(self.refresh_calls, 1)
        self.assertEqual({s.access_token for s in results}, {"access-1"})
        self.assertEqual(manager.get(), Session(access_token="access-1", refresh_token="refresh-2"))
        self.assertFalse(manager.is_refreshing)

    async def test_already_renewed_session_is_returned(self):
        manager = SessionManager(self._slow_refresher)
        manager.set(Session(access_token="fresh", refresh_token="refresh-1"))

        session = await manager.refresh("stale")

        self.assertEqual(session.access_token, "fresh")
        self.assertEqual(self.refresh_calls, 0)

    async def test_refresh_token_kept_when_not_rotated(self):
        async def refresher(refresh_token):
            return Session(access_token="new")

        manager = SessionManager(refresher)
        manager.set(Session(access_token="old", refresh_token="keep-me"))

        session = await manager.refresh("old")

        self.assertEqual(session, Session(access_token="new", refresh_token="keep-me"))

    async def test_failure_clears_session_for_every_waiter(self):
        async def refresher(refresh_token):
            await asyncio.sleep(0)
            raise NetworkError("connection refused")

        manager = SessionManager(refresher)
        manager.set(Session(access_token="stale", refresh_token="refresh-1"))

        results = await asyncio.gather(
            manager.refresh("stale"),
            manager.refresh("stale"),
            return_exceptions=True,
        )

        self.assertTrue(all(isinstance(r, SessionExpiredError) for r in results))
        self.assertEqual(manager.get(), Session())
        self.assertFalse(manager.is_refreshing)

    async def test_missing_refresh_token(self):
        manager = SessionManager(self._slow_refresher)
        manager.set(Session(access_token="stale"))

        with self.assertRaises(SessionExpiredError):
            await manager.refresh("stale")
        self.assertEqual(self.refresh_calls, 0)

    async def test_cancelled_waiter_does_not_cancel_refresh(self):
        manager = SessionManager(self._slow_refresher)
        manager.set(Session(access_token="stale", refresh_token="refresh-1"))

        cancelled = asyncio.ensure_future(manager.refresh("stale"))
        survivor = asyncio.ensure_future(manager.refresh("stale"))
        await asyncio.sleep(0)
        cancelled.cancel()
        self.release.set()

        session = await survivor
        self.assertEqual(session.access_token, "access-1")
        self.assertTrue(cancelled.cancelled())


if __name__ == '__main__':
    unittest.main()
