"""Exception types raised by todofiles."""


class UsageError(ValueError):
    """An unknown view, grouping or date selector was passed by the caller."""
