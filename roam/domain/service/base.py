"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold references to repositories and other services only; they
    keep no per-request state, so one instance serves the whole process.
    """

    pass
