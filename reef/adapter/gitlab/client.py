"""Gitlab identity provider client.

Creates Gitlab users with the admin API and logs users in with the OAuth
2.0 resource owner password grant.
"""

from typing import Any

import httpx
import logfire

from reef.adapter.error import GitlabResponseError
from reef.domain.error import AuthenticationFailedError, ErrorCode
from reef.domain.service.identity_provider import IdentityProvider
from reef.domain.value.types import OAuthToken, ProvisionedIdentity


class GitlabIdentityProvider(IdentityProvider):
    """Base class for Gitlab identity providers.

    Provides type distinction for dependency injection.
    """

    pass


class RealGitlabIdentityProvider(GitlabIdentityProvider):
    """Gitlab identity provider over HTTP."""

    def __init__(
        self,
        base_url: str,
        admin_token: str,
        oauth_client_id: str | None = None,
        oauth_client_secret: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Gitlab client.

        Args:
            base_url: Root URL of the Gitlab instance
            admin_token: Personal access token of a Gitlab admin
            oauth_client_id: OAuth application id (optional for the password grant)
            oauth_client_secret: OAuth application secret
            timeout: Seconds before a request is abandoned
            transport: Custom httpx transport (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.admin_token = admin_token
        self.oauth_client_id = oauth_client_id
        self.oauth_client_secret = oauth_client_secret
        self.timeout = timeout
        self._transport = transport

        self.token_url = f"{self.base_url}/oauth/token"
        self.users_url = f"{self.base_url}/api/v4/users"

    async def login(self, identifier: str, password: str) -> OAuthToken:
        """Log a user in with the OAuth password grant.

        Args:
            identifier: Username or email
            password: Plain text password

        Returns:
            Token pair issued by Gitlab

        Raises:
            AuthenticationFailedError: If Gitlab rejects the credentials or is unreachable
        """
        data = {
            "grant_type": "password",
            "username": identifier,
            "password": password,
        }
        if self.oauth_client_id and self.oauth_client_secret:
            data["client_id"] = self.oauth_client_id
            data["client_secret"] = self.oauth_client_secret

        with logfire.span("gitlab.login", identifier=identifier):
            response = await self._post(self.token_url, data=data)

            if response.status_code != 200:
                logfire.warn(
                    "Gitlab rejected credentials",
                    identifier=identifier,
                    status_code=response.status_code,
                )
                raise AuthenticationFailedError(
                    status_code=response.status_code,
                    message="Incorrect user or password",
                    error_code=ErrorCode.VALIDATION_FAILED,
                    detail=response.text,
                )

            payload = self._json(response)
            try:
                token = OAuthToken(
                    access_token=payload["access_token"],
                    refresh_token=payload["refresh_token"],
                    token_type=payload.get("token_type", "bearer"),
                    scope=payload.get("scope", "api"),
                    created_at=int(payload["created_at"]),
                )
            except (KeyError, TypeError, ValueError) as e:
                raise GitlabResponseError(f"Malformed token response: {e}") from e

            logfire.info("Gitlab login succeeded", identifier=identifier)
            return token

    async def provision(
        self, username: str, email: str, password: str, name: str
    ) -> ProvisionedIdentity:
        """Create the Gitlab user of a new account and log it in.

        Raises:
            AuthenticationFailedError: If Gitlab refuses the user or the login
        """
        body = {
            "username": username,
            "email": email,
            "password": password,
            "name": name,
            "skip_confirmation": True,
        }

        with logfire.span("gitlab.provision", username=username):
            response = await self._post(
                self.users_url,
                json=body,
                headers={"PRIVATE-TOKEN": self.admin_token},
            )

            if response.status_code not in (200, 201):
                logfire.warn(
                    "Gitlab rejected user creation",
                    username=username,
                    status_code=response.status_code,
                )
                raise AuthenticationFailedError(
                    status_code=response.status_code,
                    message="Identity provider refused to create the user",
                    error_code=ErrorCode.VALIDATION_FAILED,
                    detail=response.text,
                )

            payload = self._json(response)
            try:
                gitlab_user_id = int(payload["id"])
            except (KeyError, TypeError, ValueError) as e:
                raise GitlabResponseError(f"Malformed user response: {e}") from e

            logfire.info(
                "Gitlab user created", username=username, gitlab_user_id=gitlab_user_id
            )

            token = await self.login(username, password)
            return ProvisionedIdentity(gitlab_user_id=gitlab_user_id, token=token)

    async def _post(self, url: str, **kwargs: Any) -> httpx.Response:
        """POST to Gitlab, translating transport failures.

        Raises:
            AuthenticationFailedError: On timeout (504) or connection failure (502)
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                return await client.post(url, **kwargs)
        except httpx.TimeoutException as e:
            logfire.error("Gitlab request timed out", url=url, error=str(e))
            raise AuthenticationFailedError(
                status_code=504,
                message="Identity provider did not answer in time",
                detail=str(e),
            ) from e
        except httpx.HTTPError as e:
            logfire.error("Gitlab HTTP error", url=url, error=str(e))
            raise AuthenticationFailedError(
                status_code=502,
                message="Identity provider is unreachable",
                detail=str(e),
            ) from e

    @staticmethod
    def _json(response: httpx.Response) -> dict:
        """Decode a JSON object body."""
        try:
            payload = response.json()
        except ValueError as e:
            raise GitlabResponseError("Gitlab returned a non-JSON body") from e
        if not isinstance(payload, dict):
            raise GitlabResponseError("Gitlab returned an unexpected JSON body")
        return payload


class MockGitlabIdentityProvider(GitlabIdentityProvider):
    """Mock Gitlab identity provider for testing.

    Returns deterministic tokens without making real API calls. Use
    ``reject_with`` to make every following call fail, and ``calls`` to
    assert on traffic.
    """

    def __init__(self, token: OAuthToken | None = None):
        """Initialize mock provider.

        Args:
            token: Token pair returned by every call (a fixed default otherwise)
        """
        self.token = token or OAuthToken(
            access_token="accesstoken12345",
            refresh_token="refreshtoken1234567",
            token_type="bearer",
            scope="api",
            created_at=1585910424,
        )
        self.error: AuthenticationFailedError | None = None
        self.calls: list[tuple[str, str]] = []
        self._next_user_id = 1

    def reject_with(self, error: AuthenticationFailedError | None) -> None:
        """Fail every following call with ``error`` (None to recover)."""
        self.error = error

    async def login(self, identifier: str, password: str) -> OAuthToken:
        """Return the configured token pair.

        Args:
            identifier: Username or email (recorded)
            password: Plain text password (unused in mock)
        """
        self.calls.append(("login", identifier))
        if self.error:
            raise self.error
        return self.token

    async def provision(
        self, username: str, email: str, password: str, name: str
    ) -> ProvisionedIdentity:
        """Return a fresh provider user id and the configured token pair."""
        self.calls.append(("provision", username))
        if self.error:
            raise self.error
        gitlab_user_id = self._next_user_id
        self._next_user_id += 1
        return ProvisionedIdentity(gitlab_user_id=gitlab_user_id, token=self.token)
