"""Mock Gitlab providers for testing."""

from dishka import Scope, provide

from reef.adapter.gitlab import GitlabIdentityProvider, MockGitlabIdentityProvider
from reef.util.di.infrastructure.gitlab import GitlabProvider


class MockGitlabProvider(GitlabProvider):
    """Mock Gitlab provider using the in-process identity provider double.

    APP scope: tests fetch the same instance the use cases see, to inspect
    ``calls`` or to make it reject.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_gitlab_identity_provider(self) -> GitlabIdentityProvider:
        """Provide mock Gitlab identity provider."""
        return MockGitlabIdentityProvider()
