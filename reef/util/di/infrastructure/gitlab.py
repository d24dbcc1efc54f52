"""Gitlab infrastructure providers."""

from dishka import Scope, provide

from reef.adapter.gitlab import GitlabIdentityProvider, RealGitlabIdentityProvider
from reef.config import GitlabSettings
from reef.util.di.base import ProviderBase
from reef.util.error import ConfigurationError


class GitlabProvider(ProviderBase):
    """Gitlab component base."""

    __mock_component__ = "gitlab"


class ProdGitlabProvider(GitlabProvider):
    """Production Gitlab provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_gitlab_identity_provider(
        self, gitlab_settings: GitlabSettings
    ) -> GitlabIdentityProvider:
        """Provide Gitlab identity provider client.

        Returns:
            Gitlab client talking to ``GITLAB__URL``

        Raises:
            ConfigurationError: If the admin token is not configured
        """
        if not gitlab_settings.admin_token:
            raise ConfigurationError("Gitlab admin token must be configured")

        return RealGitlabIdentityProvider(
            base_url=gitlab_settings.url,
            admin_token=gitlab_settings.admin_token,
            oauth_client_id=gitlab_settings.oauth_client_id,
            oauth_client_secret=gitlab_settings.oauth_client_secret,
            timeout=gitlab_settings.timeout_seconds,
        )
