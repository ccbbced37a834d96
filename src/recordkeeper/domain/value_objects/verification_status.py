"""Verification status of an archived record."""

from enum import StrEnum


class VerificationStatus(StrEnum):
    """Outcome of the most recent verification run.

    PENDING is only held by records that were never verified. Every later run
    moves the record to VERIFIED, FAILED or ERROR, and any of those can follow
    any other on the next run.
    """

    PENDING = "PENDING"
    VERIFIED = "VERIFIED"
    FAILED = "FAILED"
    ERROR = "ERROR"
