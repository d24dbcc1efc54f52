"""Infrastructure providers."""

# Import bases
from .gitlab import GitlabProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .gitlab import ProdGitlabProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "GitlabProvider",
    "PersistenceProvider",
    "ProdGitlabProvider",
    "ProdPersistenceProvider",
]
