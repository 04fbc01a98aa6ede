"""Base service class for domain services."""


class Service:
    """Base class for membership domain services.

    Services hold the rules spanning users, organizations and invitations.
    Every mutating operation runs inside a ``TransactionManager.atomic()``
    block and re-reads the rows it decides on.
    """
