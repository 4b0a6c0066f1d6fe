"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span aggregates: who may see whom,
    how engagement is counted and ranked, and how pending relationships
    resolve.
    """

    pass
