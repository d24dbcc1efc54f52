"""Adapter layer errors.

Provider rejections are domain errors (``AuthenticationFailedError``);
these cover answers the adapter cannot make sense of.
"""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External identity provider error."""

    pass


class GitlabResponseError(ProviderError):
    """Gitlab answered with a payload we cannot use."""

    pass
