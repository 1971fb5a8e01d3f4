"""Exceptions raised by Disc Caddie."""


class DiscCaddieError(Exception):
    """Base error for Disc Caddie."""


class PreferenceStoreError(DiscCaddieError):
    """Raised when tuning coefficients cannot be persisted."""


class InvalidUserIdError(DiscCaddieError, ValueError):
    """Raised when a user id cannot be used as a storage key."""
