"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that sits on top of one or more
    repositories.
    """

    pass
