"""Content store port - access to archived file content."""

from dataclasses import dataclass
from typing import Protocol

from recordkeeper.domain.value_objects import ContentHash


@dataclass(frozen=True)
class ContentFingerprint:
    """Hash and size of stored content."""

    hash: ContentHash
    size: int


class ContentStore(Protocol):
    """Port for reading and removing archived content by storage path.

    fingerprint raises FileNotFoundError for missing content, OSError for
    unreadable content and ValueError for unsupported algorithms.
    """

    async def fingerprint(self, path: str, algorithm: str) -> ContentFingerprint: ...

    async def delete(self, path: str) -> None: ...
