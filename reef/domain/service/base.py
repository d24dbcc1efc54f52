"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the account rules that span several repositories and are
    built per request around that request's repositories.
    """

    pass
