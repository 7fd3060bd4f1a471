#!/usr/bin/env python3
"""Async job catalog API client with transparent token refresh."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from core.api.session import AuthState, Session, SessionManager
from core.exceptions import (
    ApiError,
    AuthError,
    NetworkError,
    NotFoundError,
    SessionExpiredError,
    ValidationError,
)

logger = logging.getLogger(__name__)

REFRESH_PATH = "/auth/refresh"


@dataclass
class RequestContext:
    """
    One outbound call and its position in the refresh protocol.

    authenticated=False requests (login, register) never carry a token and
    surface a 401 directly instead of triggering a refresh.
    """
    method: str
    path: str
    params: Optional[Dict[str, Any]] = None
    json: Any = None
    authenticated: bool = True
    state: AuthState = AuthState.AUTHORIZED
    sent_token: Optional[str] = None


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict):
        detail = payload.get("detail") or payload.get("error") or payload.get("message")
        if detail:
            return str(detail)
    return str(payload)


def error_for_status(response: httpx.Response, context: str = "") -> ApiError:
    """Translate a non-2xx response into the core error taxonomy."""
    status = response.status_code
    message = f"{context}: {_error_detail(response)}" if context else _error_detail(response)

    if status in (400, 422):
        return ValidationError(message, status_code=status)
    if status in (401, 403):
        return AuthError(message, status_code=status)
    if status == 404:
        return NotFoundError(message, status_code=status)
    if status >= 500:
        return NetworkError(message, status_code=status)
    return ApiError(message, status_code=status)


class ApiClient:
    """
    Client for the job catalog REST API.

    Responsibilities:
    - Own an httpx.AsyncClient for connection reuse
    - Attach the current access token to authenticated calls
    - Drive each call through the refresh protocol (retry once after refresh)
    - Map HTTP failures to core exceptions
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        api_prefix: str = "/api/v1",
        request_timeout_seconds: float = 30.0,
        session_manager: Optional[SessionManager] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the job catalog service
            api_prefix: Path prefix of every endpoint
            request_timeout_seconds: Timeout for individual HTTP requests
            session_manager: Shared session holder (a new one if omitted)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix.rstrip("/")
        self.session_manager = session_manager or SessionManager()
        self.session_manager.bind_refresher(self._refresh_tokens)

        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=request_timeout_seconds,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

        logger.info(f"ApiClient initialized: base_url={self.base_url}{self.api_prefix}")

    async def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, *, json: Any = None, authenticated: bool = True) -> Any:
        return await self.request("POST", path, json=json, authenticated=authenticated)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        authenticated: bool = True
    ) -> Any:
        """
        Perform a call and return its decoded JSON body (None when empty).

        Raises:
            ValidationError, AuthError, SessionExpiredError, NotFoundError,
            NetworkError: See core.exceptions.
        """
        ctx = RequestContext(
            method=method,
            path=path,
            params=params,
            json=json,
            authenticated=authenticated,
        )
        response = await self._drive(ctx)
        return self._decode(response, f"{method} {path}")

    async def _drive(self, ctx: RequestContext) -> httpx.Response:
        """Run a request through AUTHORIZED -> ... -> {RETRIED | FAILED}."""
        while True:
            if ctx.state in (AuthState.AUTHORIZED, AuthState.RETRIED):
                response = await self._send(ctx)
                if response.status_code != 401 or not ctx.authenticated:
                    return response
                if ctx.state is AuthState.RETRIED:
                    logger.warning(f"{ctx.method} {ctx.path} rejected again after token refresh")
                    raise AuthError(
                        f"{ctx.method} {ctx.path}: unauthorized after token refresh",
                        status_code=401,
                    )
                ctx.state = AuthState.UNAUTHORIZED_DETECTED

            elif ctx.state is AuthState.UNAUTHORIZED_DETECTED:
                logger.info(f"{ctx.method} {ctx.path} returned 401, refreshing session")
                ctx.state = AuthState.REFRESHING

            elif ctx.state is AuthState.REFRESHING:
                try:
                    await self.session_manager.refresh(ctx.sent_token)
                except SessionExpiredError:
                    ctx.state = AuthState.FAILED
                    logger.warning(f"{ctx.method} {ctx.path} failed: session expired")
                    raise
                ctx.state = AuthState.RETRIED

            else:
                raise SessionExpiredError("Session expired, please log in again", status_code=401)

    async def _send(self, ctx: RequestContext) -> httpx.Response:
        headers = {}
        token = self.session_manager.get().access_token if ctx.authenticated else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        ctx.sent_token = token

        try:
            return await self._http.request(
                ctx.method,
                self._url(ctx.path),
                params=ctx.params,
                json=ctx.json,
                headers=headers,
            )
        except httpx.TransportError as e:
            logger.warning(f"{ctx.method} {ctx.path} transport error: {e}")
            raise NetworkError(f"{ctx.method} {ctx.path} failed: {e}") from e

    async def _refresh_tokens(self, refresh_token: str) -> Session:
        """Exchange a refresh token for a new session; bypasses the refresh protocol."""
        ctx = RequestContext(
            method="POST",
            path=REFRESH_PATH,
            json={"refresh_token": refresh_token},
            authenticated=False,
        )
        response = await self._send(ctx)
        payload = self._decode(response, "token refresh")

        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not access_token:
            raise ValidationError("Refresh response did not contain an access token")
        return Session(access_token=access_token, refresh_token=payload.get("refresh_token"))

    def _url(self, path: str) -> str:
        return f"{self.api_prefix}{path}"

    @staticmethod
    def _decode(response: httpx.Response, context: str) -> Any:
        if not response.is_success:
            raise error_for_status(response, context)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ValidationError(f"{context}: response is not valid JSON") from e

    async def close(self):
        """Close the HTTP client and release connections."""
        await self._http.aclose()
        logger.info("ApiClient closed")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False
