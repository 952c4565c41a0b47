"""ArgoCD accounts API client."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

import httpx

from ....application.exceptions import AuthFailedError, MintFailedError
from ....domain.entities import DEFAULT_USER_AGENT
from ....domain.exceptions import MissingServerURLError

logger = logging.getLogger(__name__)


class ArgoCDAccountsClient:
    """
    Async client for the ArgoCD session and account token endpoints.

    Holds no session state: the bearer token is passed to each call that
    needs it. TLS certificates are not verified, since ArgoCD instances are
    commonly self-hosted behind self-signed certificates.
    """

    SESSION_PATH: ClassVar[str] = "/api/v1/session"
    ACCOUNT_TOKEN_PATH: ClassVar[str] = "/api/v1/account/{name}/token"
    CONTENT_TYPE: ClassVar[str] = "application/json; charset=UTF-8"

    def __init__(
        self,
        *,
        server_url: str,
        user_agent: str = "",
        debug: bool = False,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            server_url: Base URL of the ArgoCD server.
            user_agent: User-Agent header value.
            debug: Dump every request and response to the log.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, mainly for tests.

        Raises:
            MissingServerURLError: If ``server_url`` is empty.
        """
        if not server_url:
            msg = "unspecified server url for Argo CD"
            raise MissingServerURLError(msg)

        self._server_url = server_url.rstrip("/")
        self._user_agent = user_agent or DEFAULT_USER_AGENT
        self._debug = debug
        self._timeout = timeout
        self._transport = transport

    @property
    def server_url(self) -> str:
        """Base URL of the ArgoCD server."""
        return self._server_url

    async def create_session(self, username: str, password: str) -> str:
        """
        Log in with username and password.

        Returns:
            The bearer session token.

        Raises:
            AuthFailedError: On transport errors, non-200 responses or
                malformed bodies.
        """
        url = f"{self._server_url}{self.SESSION_PATH}"
        try:
            response = await self._post(url, json={"username": username, "password": password})
        except httpx.HTTPError as e:
            msg = f"create argocd session request failed: {e}"
            raise AuthFailedError(msg) from e

        if response.status_code != httpx.codes.OK:
            msg = f"create argocd session request failed: {response.status_code} {response.reason_phrase}"
            raise AuthFailedError(msg)

        return self._extract_token(response, AuthFailedError)

    async def create_token_for_account(self, auth_token: str, name: str, expires_in: int = 0) -> str:
        """
        Generate a token for the named account.

        Args:
            auth_token: Bearer token returned by ``create_session``.
            name: Account name.
            expires_in: Token lifetime in seconds; 0 (the default) means the
                token never expires and no request body is sent.

        Returns:
            The account token.

        Raises:
            MintFailedError: On transport errors, non-200 responses or
                malformed bodies.
        """
        if expires_in < 0:
            msg = f"expires_in must not be negative, got {expires_in}"
            raise ValueError(msg)

        url = f"{self._server_url}{self.ACCOUNT_TOKEN_PATH.format(name=name)}"
        headers = {"Authorization": f"Bearer {auth_token}"}
        body = {"expiresIn": expires_in} if expires_in else None

        try:
            response = await self._post(url, json=body, headers=headers)
        except httpx.HTTPError as e:
            msg = f"create argocd account token request failed: {e}"
            raise MintFailedError(msg) from e

        if response.status_code != httpx.codes.OK:
            msg = (
                f"create argocd account token request failed: "
                f"{response.status_code} {response.reason_phrase}"
            )
            raise MintFailedError(msg)

        return self._extract_token(response, MintFailedError)

    async def _post(
        self,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a POST request, dumping it when debugging is enabled."""
        request_headers = {
            "Content-Type": self.CONTENT_TYPE,
            "User-Agent": self._user_agent,
            **(headers or {}),
        }

        async with httpx.AsyncClient(
            timeout=self._timeout,
            verify=False,  # noqa: S501
            transport=self._transport,
        ) as client:
            request = client.build_request("POST", url, json=json, headers=request_headers)
            if self._debug:
                self._dump_request(request)

            response = await client.send(request)
            await response.aread()

            if self._debug:
                self._dump_response(response)

        return response

    @staticmethod
    def _extract_token(response: httpx.Response, error: type[Exception]) -> str:
        """Read the ``token`` field of a JSON response body."""
        try:
            data = response.json()
        except ValueError as e:
            msg = f"invalid JSON response from {response.request.url}: {e}"
            raise error(msg) from e

        if not isinstance(data, dict):
            msg = f"unexpected response from {response.request.url}: {data!r}"
            raise error(msg)

        token = data.get("token")
        if token is None:
            return ""
        if not isinstance(token, str):
            msg = f"unexpected token in response from {response.request.url}: {token!r}"
            raise error(msg)

        return token

    @staticmethod
    def _dump_request(request: httpx.Request) -> None:
        headers = "\n".join(f"{k}: {v}" for k, v in request.headers.items())
        body = request.content.decode(errors="replace")
        logger.info("%s %s\n%s\n\n%s\n", request.method, request.url, headers, body)

    @staticmethod
    def _dump_response(response: httpx.Response) -> None:
        headers = "\n".join(f"{k}: {v}" for k, v in response.headers.items())
        logger.info(
            "%s %s %s\n%s\n\n%s\n",
            response.http_version,
            response.status_code,
            response.reason_phrase,
            headers,
            response.text,
        )
