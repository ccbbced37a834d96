"""Archive statistics DTO."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RecordStats:
    """Aggregates over active records."""

    total: int
    by_category: dict[str, int] = field(default_factory=dict)
    by_status: dict[str, int] = field(default_factory=dict)
    with_legal_hold: int = 0
    expired: int = 0

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "by_category": dict(self.by_category),
            "by_status": dict(self.by_status),
            "with_legal_hold": self.with_legal_hold,
            "expired": self.expired,
        }
