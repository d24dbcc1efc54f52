"""Gitlab identity provider adapter."""

from .client import (
    GitlabIdentityProvider,
    MockGitlabIdentityProvider,
    RealGitlabIdentityProvider,
)

__all__ = [
    "GitlabIdentityProvider",
    "MockGitlabIdentityProvider",
    "RealGitlabIdentityProvider",
]
