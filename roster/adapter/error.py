"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class NotificationError(AdapterError):
    """Outbound notification could not be delivered."""

    pass
