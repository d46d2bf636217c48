"""Base service class for domain services."""


class Service:
    """Base class for diary domain services.

    Services hold the rules that span more than one entity (a diary and
    its comments, a target and its reactions). They receive repositories
    through their constructor and never touch the database directly.
    """

    pass
