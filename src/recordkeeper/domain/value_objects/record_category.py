"""Record category for retention grouping."""

from enum import StrEnum


class RecordCategory(StrEnum):
    """Categories of archived records."""

    DOCUMENT = "DOCUMENT"
    CONTRACT = "CONTRACT"
    INVOICE = "INVOICE"
    TAX = "TAX"
    PHOTO = "PHOTO"
    VIDEO = "VIDEO"
    CORRESPONDENCE = "CORRESPONDENCE"
    LEGAL = "LEGAL"
    COMPLIANCE = "COMPLIANCE"
    OTHER = "OTHER"
