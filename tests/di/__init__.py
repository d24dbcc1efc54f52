"""Mock providers for testing."""

from .gitlab import MockGitlabProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockGitlabProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
