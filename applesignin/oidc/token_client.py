"""Token endpoint client: authorization code, refresh and revoke calls."""

import asyncio
import json
import logging
from types import TracebackType
from typing import Self

import httpx
from pydantic import ValidationError

from applesignin.core.errors import (
    DecodeFailure,
    ProviderRejected,
    RequestCancelled,
    TransportFailure,
)
from applesignin.core.settings import ClientSettings
from applesignin.oidc.types import (
    AppAuthRequest,
    RefreshGrantRequest,
    RevokeAccessRequest,
    RevokeRefreshRequest,
    TokenRequest,
    TokenResponse,
    WebAuthRequest,
)

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/x-www-form-urlencoded"
ACCEPT = "application/json"


class TokenClient:
    """Posts form-encoded requests to the Apple token and revoke endpoints.

    Grant calls always decode the JSON body, whatever the HTTP status, and
    return provider errors inside :class:`TokenResponse`. Revoke calls have
    no structured error body, so any non-2xx status raises
    :class:`ProviderRejected`.

    Pass ``http_client`` to supply the transport (and its timeout); it is
    then left open by :meth:`aclose`.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self._settings.timeout)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def verify_web_token(
        self, request: WebAuthRequest, *, deadline: float | None = None
    ) -> TokenResponse:
        """Exchange a web flow authorization code for tokens."""
        return await self._grant(request, deadline)

    async def verify_app_token(
        self, request: AppAuthRequest, *, deadline: float | None = None
    ) -> TokenResponse:
        """Exchange an app authorization code for tokens."""
        return await self._grant(request, deadline)

    async def verify_refresh_token(
        self, request: RefreshGrantRequest, *, deadline: float | None = None
    ) -> TokenResponse:
        """Validate a refresh token and obtain a new access token."""
        return await self._grant(request, deadline)

    async def revoke_access_token(
        self, request: RevokeAccessRequest, *, deadline: float | None = None
    ) -> None:
        """Invalidate an access token."""
        await self._revoke(request, deadline)

    async def revoke_refresh_token(
        self, request: RevokeRefreshRequest, *, deadline: float | None = None
    ) -> None:
        """Invalidate a refresh token."""
        await self._revoke(request, deadline)

    async def send(
        self, request: TokenRequest, *, deadline: float | None = None
    ) -> TokenResponse | None:
        """Dispatch any request variant to its endpoint.

        Returns the decoded response for grant requests and ``None`` for
        revoke requests.
        """
        if request.endpoint == "revoke":
            await self._revoke(request, deadline)
            return None
        return await self._grant(request, deadline)

    def _headers(self) -> dict[str, str]:
        return {
            "content-type": CONTENT_TYPE,
            "accept": ACCEPT,
            "user-agent": self._settings.user_agent,
        }

    def _url_for(self, request: TokenRequest) -> str:
        if request.endpoint == "revoke":
            return self._settings.revoke_url
        return self._settings.validation_url

    async def _grant(
        self, request: TokenRequest, deadline: float | None
    ) -> TokenResponse:
        response = await self._post(request, deadline)
        try:
            return TokenResponse.model_validate(response.json())
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as exc:
            logger.warning(
                "Undecodable %s response: HTTP %d", request.kind, response.status_code
            )
            raise DecodeFailure(
                f"cannot decode {request.kind} response "
                f"(HTTP {response.status_code}): {exc}"
            ) from exc

    async def _revoke(self, request: TokenRequest, deadline: float | None) -> None:
        response = await self._post(request, deadline)
        if not response.is_success:
            status_line = f"{response.status_code} {response.reason_phrase}"
            logger.warning("Revoke rejected: %s", status_line)
            raise ProviderRejected(
                f"{request.kind} rejected: {status_line}",
                status_code=response.status_code,
                status_line=status_line,
            )

    async def _post(
        self, request: TokenRequest, deadline: float | None
    ) -> httpx.Response:
        url = self._url_for(request)
        try:
            http_request = self._http.build_request(
                "POST", url, data=request.form_fields(), headers=self._headers()
            )
        except httpx.InvalidURL as exc:
            raise ProviderRejected(f"invalid endpoint URL {url!r}: {exc}") from exc

        logger.debug("POST %s (%s)", url, request.kind)
        try:
            async with asyncio.timeout(deadline):
                return await self._http.send(http_request)
        except TimeoutError as exc:
            raise RequestCancelled(
                f"{request.kind} request cancelled after {deadline}s deadline"
            ) from exc
        except httpx.TimeoutException as exc:
            raise RequestCancelled(f"{request.kind} request timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportFailure(f"{request.kind} request failed: {exc}") from exc
