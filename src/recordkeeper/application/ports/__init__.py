"""Application ports - interfaces for external adapters."""

from recordkeeper.application.ports.clock import Clock
from recordkeeper.application.ports.content_store import ContentFingerprint, ContentStore
from recordkeeper.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Clock",
    "ContentFingerprint",
    "ContentStore",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
