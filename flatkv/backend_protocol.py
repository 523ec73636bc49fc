"""
Backend protocol shared by every flatkv storage backend.

Callers depend on this method surface rather than on a specific backend, so
an in-memory store and a ZooKeeper-backed store can be swapped without
changing application code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

SEPARATOR = "/"
"""Key segment separator and directory marker suffix."""


@dataclass(frozen=True, slots=True)
class Entry:
    """
    One flat key/value pair.

    Parameters
    ----------
    key:
        Flat external identifier. ``/`` inside a key denotes hierarchy for
        listing purposes.
    value:
        Opaque payload, stored and returned unmodified.
    """

    key: str
    value: bytes


class PhysicalBackend(Protocol):
    """
    Behavioral contract for flat key/value backends.

    Implementations are expected to be safe for concurrent access, because
    application threads can call read/write methods simultaneously.
    """

    def put(self, entry: Entry) -> None:
        """Insert or overwrite ``entry``."""

    def get(self, key: str) -> Entry | None:
        """Return the entry for ``key`` or ``None`` when it holds no value."""

    def delete(self, key: str) -> None:
        """Remove ``key``; removing a missing key is a no-op."""

    def list(self, prefix: str) -> list[str]:
        """
        Return the sorted immediate children of ``prefix``.

        Children that have children of their own are reported with a
        trailing ``/`` marker.
        """

    def close(self) -> None:
        """Release resources held by the backend."""
