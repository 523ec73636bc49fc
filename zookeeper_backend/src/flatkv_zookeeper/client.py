"""
Tree client capability consumed by the ZooKeeper backend.

:class:`kazoo.client.KazooClient` satisfies :class:`TreeClient` directly. Tests
and alternative transports can inject any object with the same methods.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from flatkv.exceptions import BackendSetupError
from kazoo.client import KazooClient
from kazoo.exceptions import KazooException
from kazoo.handlers.threading import KazooTimeoutError

_LOGGER = logging.getLogger(__name__)


class TreeClient(Protocol):
    """
    Minimal znode tree surface, shaped after :class:`KazooClient`.

    Every method may raise :class:`kazoo.exceptions.KazooException`
    subclasses or :class:`KazooTimeoutError` on connectivity problems.
    """

    def exists(self, path: str) -> Any:
        """Return node stat, or ``None`` when ``path`` does not exist."""

    def create(self, path: str, value: bytes | None = b"", acl: Any = None) -> str:
        """Create ``path``; raise ``NodeExistsError`` when it exists."""

    def set(self, path: str, value: bytes, version: int = -1) -> Any:
        """Replace node content; ``version=-1`` skips the version check."""

    def get(self, path: str) -> tuple[bytes | None, Any]:
        """Return ``(content, stat)``; content is ``None`` when never set."""

    def get_children(self, path: str) -> list[str]:
        """Return immediate child names of ``path``."""

    def delete(self, path: str, version: int = -1) -> Any:
        """Delete ``path``; ``version=-1`` skips the version check."""


def connect_client(hosts: str, *, session_timeout_seconds: float, connect_timeout_seconds: float) -> KazooClient:
    """
    Build and start a kazoo client for a comma-separated host list.

    Raises
    ------
    BackendSetupError
        If the session cannot be established within the connect timeout.
    """
    client = KazooClient(hosts=hosts, timeout=session_timeout_seconds)
    try:
        client.start(timeout=connect_timeout_seconds)
    except (KazooTimeoutError, KazooException) as exc:
        raise BackendSetupError(f"client setup failed: {exc}") from exc
    _LOGGER.debug("ZooKeeper client connected hosts=%s", hosts)
    return client
