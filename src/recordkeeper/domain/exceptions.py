"""Domain exceptions."""


class RecordKeeperError(Exception):
    """Base exception for RecordKeeper."""

    pass


class NotFound(RecordKeeperError):
    """Requested resource was not found."""

    pass


class ValidationError(RecordKeeperError):
    """Validation failed for input data."""

    pass


class LegalHoldConflict(RecordKeeperError):
    """Legal hold is already in the requested state."""

    pass


class StoreUnavailable(RecordKeeperError):
    """Record store cannot be reached; batch operations must abort."""

    pass
