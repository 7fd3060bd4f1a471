#!/usr/bin/env python3
"""
Session tokens and the coalesced refresh protocol.

SessionManager is the only writer of the process-wide token pair. Concurrent
requests that observe an expired access token share a single in-flight
refresh: one success is seen by all of them, or one failure is.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from core.exceptions import ApiError, SessionExpiredError

logger = logging.getLogger(__name__)


class AuthState(str, Enum):
    """States of one request going through the refresh protocol."""
    AUTHORIZED = "authorized"
    UNAUTHORIZED_DETECTED = "unauthorized_detected"
    REFRESHING = "refreshing"
    RETRIED = "retried"
    FAILED = "failed"


@dataclass(frozen=True)
class Session:
    """Access/refresh token pair. Both absent means anonymous."""
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)


TokenRefresher = Callable[[str], Awaitable[Session]]


def _consume_outcome(future: "asyncio.Future[Session]") -> None:
    # Marks the exception as retrieved when every waiter was cancelled.
    if not future.cancelled():
        future.exception()


class SessionManager:
    """Holds the session and performs token refreshes on behalf of all requests."""

    def __init__(self, refresher: Optional[TokenRefresher] = None):
        self._session = Session()
        self._refresher = refresher
        self._inflight: Optional["asyncio.Future[Session]"] = None

    def bind_refresher(self, refresher: TokenRefresher) -> None:
        """Set the coroutine used to exchange a refresh token for a new session."""
        self._refresher = refresher

    def get(self) -> Session:
        return self._session

    def set(self, session: Session) -> None:
        """Install a session after an explicit login."""
        self._session = session

    def clear(self) -> None:
        """Drop both tokens (logout or irrecoverable auth failure)."""
        self._session = Session()

    @property
    def is_refreshing(self) -> bool:
        return self._inflight is not None

    async def refresh(self, stale_access_token: Optional[str]) -> Session:
        """
        Renew the session after a request was rejected with stale_access_token.

        Joins the refresh already in flight if there is one. If the session
        has been renewed since the caller sent its request, the current
        session is returned without another refresh call.

        Args:
            stale_access_token: Access token the rejected request carried

        Returns:
            The renewed session

        Raises:
            SessionExpiredError: If the refresh failed; the session is cleared.
        """
        current = self._session
        if current.access_token and current.access_token != stale_access_token:
            logger.debug("Session was already renewed by a concurrent request")
            return current

        if self._inflight is None:
            self._inflight = asyncio.ensure_future(self._run_refresh())
            self._inflight.add_done_callback(_consume_outcome)
        else:
            logger.debug("Joining in-flight token refresh")

        # shield: a cancelled waiter must not cancel the refresh the others wait on
        return await asyncio.shield(self._inflight)

    async def _run_refresh(self) -> Session:
        try:
            refresh_token = self._session.refresh_token
            if not refresh_token:
                raise SessionExpiredError("No refresh token available", status_code=401)
            if self._refresher is None:
                raise SessionExpiredError("No token refresher configured", status_code=401)

            logger.info("Refreshing access token")
            try:
                renewed = await self._refresher(refresh_token)
            except ApiError as e:
                raise SessionExpiredError(f"Token refresh failed: {e}", status_code=401) from e

            if renewed.refresh_token is None:
                renewed = Session(access_token=renewed.access_token, refresh_token=refresh_token)
            self._session = renewed
            logger.info("Access token refreshed")
            return renewed
        except SessionExpiredError as e:
            logger.warning(f"{e}; clearing session")
            self._session = Session()
            raise
        finally:
            self._inflight = None
