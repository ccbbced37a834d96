"""Filesystem content store - archived files on local disk."""

import asyncio
import hashlib
from pathlib import Path

from recordkeeper.application.ports import ContentFingerprint
from recordkeeper.domain.value_objects import ContentHash
from recordkeeper.domain.value_objects.content_hash import hashlib_name

_CHUNK_SIZE = 1024 * 1024


class FileSystemContentStore:
    """Reads and removes archived files. Relative paths resolve against base_dir."""

    def __init__(self, base_dir: str | Path = ".") -> None:
        self._base_dir = Path(base_dir)

    def resolve(self, path: str) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_dir / p

    async def fingerprint(self, path: str, algorithm: str) -> ContentFingerprint:
        """Hash file content in chunks off the event loop."""
        return await asyncio.to_thread(self._fingerprint, self.resolve(path), algorithm)

    async def delete(self, path: str) -> None:
        await asyncio.to_thread(self._delete, self.resolve(path))

    @staticmethod
    def _fingerprint(path: Path, algorithm: str) -> ContentFingerprint:
        digest = hashlib.new(hashlib_name(algorithm))
        size = 0
        with path.open("rb") as f:
            while chunk := f.read(_CHUNK_SIZE):
                digest.update(chunk)
                size += len(chunk)
        return ContentFingerprint(hash=ContentHash(algorithm, digest.hexdigest()), size=size)

    @staticmethod
    def _delete(path: Path) -> None:
        # Archived files are stored read-only.
        path.chmod(0o644)
        path.unlink()
