"""Content hash of archived record bytes."""

import hashlib
from dataclasses import dataclass

DEFAULT_HASH_ALGORITHM = "SHA256"


def hashlib_name(algorithm: str) -> str:
    """Map a stored algorithm label to its hashlib name.

    "SHA256", "sha-256", "SHA3-256" and "sha3_256" are all accepted. The label is
    tried as is, then with "-" as "_", then with separators removed.
    """
    label = algorithm.strip().lower()
    for name in (label, label.replace("-", "_"), label.replace("-", "").replace("_", "")):
        if name in hashlib.algorithms_available:
            return name
    raise ValueError(f"Unsupported hash algorithm: {algorithm}")


@dataclass(frozen=True)
class ContentHash:
    """Hex digest of record content together with the algorithm that produced it."""

    algorithm: str
    value: str

    def __post_init__(self) -> None:
        expected = hashlib.new(hashlib_name(self.algorithm)).digest_size * 2
        if len(self.value) != expected:
            raise ValueError(
                f"{self.algorithm} digest must be {expected} hex characters"
            )
        try:
            bytes.fromhex(self.value)
        except ValueError as e:
            raise ValueError(f"{self.algorithm} digest must be hexadecimal") from e

    @classmethod
    def of(cls, data: bytes, algorithm: str = DEFAULT_HASH_ALGORITHM) -> "ContentHash":
        """Hash raw bytes."""
        return cls(algorithm, hashlib.new(hashlib_name(algorithm), data).hexdigest())

    def matches(self, expected: str) -> bool:
        """Compare against a stored hex digest (case-insensitive)."""
        return self.value.lower() == expected.strip().lower()
