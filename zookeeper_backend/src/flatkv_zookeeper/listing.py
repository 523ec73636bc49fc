"""
Directory-style listing over znode children.

ZooKeeper only reports the names of immediate children. Flat key/value callers
also need to know which of those names lead further down, so every child is
probed for children of its own and marked with a trailing separator when it
has any.
"""

from __future__ import annotations

import logging

from flatkv.backend_protocol import SEPARATOR

from .client import TreeClient
from .paths import CLIENT_ERRORS, join_child

_LOGGER = logging.getLogger(__name__)


class ListingReconstructor:
    """
    Builds sorted listings with directory markers.

    Enumeration failures never abort a listing: a child whose children cannot
    be read is reported as a plain entry, and a parent whose children cannot
    be read yields an empty listing.
    """

    def __init__(self, client: TreeClient) -> None:
        self._client = client

    def _children(self, path: str) -> list[str]:
        try:
            return list(self._client.get_children(path))
        except CLIENT_ERRORS as exc:
            _LOGGER.warning("Failed to enumerate children path=%s error=%r", path, exc)
            return []

    def _holds_value(self, path: str) -> bool:
        try:
            value, _ = self._client.get(path)
        except CLIENT_ERRORS as exc:
            _LOGGER.warning("Failed to read node path=%s error=%r", path, exc)
            return True
        return value is not None

    def list(self, path: str) -> list[str]:
        """
        Return the sorted listing of ``path``.

        A leaf child is listed by name. A child with children is listed as
        ``name/``, and additionally by bare name when it holds a value of its
        own, so a key that is both a value and a directory shows up twice.
        """
        listing: list[str] = []
        for name in self._children(path):
            child_path = join_child(path, name)
            if not self._children(child_path):
                listing.append(name)
                continue
            listing.append(name + SEPARATOR)
            if self._holds_value(child_path):
                listing.append(name)
        listing.sort()
        _LOGGER.debug("Listed path=%s entries=%s", path, len(listing))
        return listing
