"""Utility layer errors.

Raised while wiring the application, before any request is served.
"""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A required setting is missing, e.g. the Gitlab admin token."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation exists for a requested component."""

    pass
