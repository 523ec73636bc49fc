"""
Thread-safe in-memory backend.

The store keeps entries in one flat dictionary and derives directory-style
listings from key prefixes, so it honors the same listing contract as the
tree-backed backends without materializing any hierarchy.
"""

from __future__ import annotations

import logging
from threading import RLock

from .backend_protocol import SEPARATOR, Entry

_LOGGER = logging.getLogger(__name__)


class InMemoryBackend:
    """
    Process-local implementation of :class:`PhysicalBackend`.

    Notes
    -----
    * Values are copied to ``bytes`` on write so callers cannot mutate stored
      state through a ``bytearray`` they still hold.
    * State is lost when the process exits.
    """

    def __init__(self) -> None:
        """Create an empty store and initialize lock state."""
        self._entries: dict[str, bytes] = {}
        self._lock = RLock()

    def put(self, entry: Entry) -> None:
        with self._lock:
            self._entries[entry.key] = bytes(entry.value)
        _LOGGER.debug("In-memory put key=%s size=%s", entry.key, len(entry.value))

    def get(self, key: str) -> Entry | None:
        with self._lock:
            value = self._entries.get(key)
        if value is None:
            return None
        return Entry(key=key, value=value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)
        _LOGGER.debug("In-memory delete key=%s", key)

    def list(self, prefix: str) -> list[str]:
        """
        Return immediate children of ``prefix`` with directory markers.

        ``"b"`` and ``"b/"`` name the same directory.
        """
        base = prefix.removesuffix(SEPARATOR)
        if base:
            base += SEPARATOR
        children: set[str] = set()
        with self._lock:
            keys = list(self._entries)
        for key in keys:
            if not key.startswith(base):
                continue
            remainder = key[len(base):]
            if not remainder:
                continue
            head, sep, _ = remainder.partition(SEPARATOR)
            children.add(head + sep)
        return sorted(children)

    def close(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
