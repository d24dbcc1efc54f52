"""Identity provider interface.

The identity provider (a Gitlab instance) is the source of truth for
credential validity and issues OAuth token pairs.
"""

from reef.domain.value.types import OAuthToken, ProvisionedIdentity


class IdentityProvider:
    """Generic identity provider interface.

    Implementations raise ``AuthenticationFailedError`` when the provider
    rejects a request, times out, or cannot be reached. There is no local
    retry: one rejection ends the request.
    """

    async def login(self, identifier: str, password: str) -> OAuthToken:
        """Obtain a fresh OAuth token pair with the user's credentials.

        Args:
            identifier: Username or email known to the provider
            password: Plain text password

        Returns:
            Token pair issued by the provider
        """
        raise NotImplementedError

    async def provision(
        self, username: str, email: str, password: str, name: str
    ) -> ProvisionedIdentity:
        """Create the provider-side user of a new account and log it in.

        Args:
            username: Username of the new account
            email: Email of the new account
            password: Plain text password
            name: Full name

        Returns:
            Provider user id and the first token pair
        """
        raise NotImplementedError
