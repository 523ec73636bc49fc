"""
Backend factory helpers for easy store switching.

This module gives application developers a uniform way to pick a storage
backend by name without rewriting bootstrap logic.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .backend_protocol import PhysicalBackend
from .exceptions import BackendConfigurationError, BackendNotAvailableError
from .store import InMemoryBackend


class BackendKind(str, Enum):
    """
    Built-in backend names supported by the factory helpers.

    INMEM
        In-process in-memory store.
    ZOOKEEPER
        ZooKeeper znode tree provided by optional plugin package.
    """

    INMEM = "inmem"
    ZOOKEEPER = "zookeeper"


def _normalize_backend(backend: str | BackendKind) -> BackendKind:
    """
    Normalize backend name into :class:`BackendKind` enum value.
    """
    if isinstance(backend, BackendKind):
        return backend
    lowered = str(backend).strip().lower()
    try:
        return BackendKind(lowered)
    except ValueError as exc:
        valid = ", ".join(item.value for item in BackendKind)
        raise BackendConfigurationError(
            f"Unknown backend {backend!r}. Supported values: {valid}."
        ) from exc


def available_backends() -> tuple[str, ...]:
    """
    Return backend names available in the current environment.

    The ZooKeeper backend appears only when the optional plugin package and
    its client library are importable.
    """
    backends = [BackendKind.INMEM.value]
    try:
        __import__("flatkv_zookeeper")
    except ImportError:
        pass
    else:
        backends.append(BackendKind.ZOOKEEPER.value)
    return tuple(backends)


def create_backend(backend: str | BackendKind = BackendKind.INMEM, **backend_options: Any) -> PhysicalBackend:
    """
    Create a backend instance from a short backend name.

    Parameters
    ----------
    backend:
        Backend selector string (``"inmem"`` or ``"zookeeper"``).
    backend_options:
        Backend-specific options.

        ZooKeeper options:
            ``path`` (str), ``address`` (comma-separated hosts),
            ``session_timeout`` and ``connect_timeout`` (seconds), an
            injected ``client`` and optional plugin-native ``config`` object.
            A plain ``{"path": ..., "address": ...}`` mapping can therefore be
            passed as ``create_backend("zookeeper", **conf)``.
    """
    selected = _normalize_backend(backend)
    if selected is BackendKind.INMEM:
        if backend_options:
            unknown = ", ".join(sorted(str(key) for key in backend_options))
            raise BackendConfigurationError(
                f"In-memory backend does not accept options: {unknown}."
            )
        return InMemoryBackend()
    if selected is BackendKind.ZOOKEEPER:
        try:
            from flatkv_zookeeper import ZookeeperBackend, ZookeeperStoreConfig
        except ImportError as exc:
            raise BackendNotAvailableError(
                "ZooKeeper backend requires package 'flatkv_zookeeper' and the kazoo client."
            ) from exc

        config = backend_options.pop("config", None)
        client = backend_options.pop("client", None)
        if config is None:
            config = ZookeeperStoreConfig.from_mapping(backend_options)
        elif backend_options:
            unknown = ", ".join(sorted(str(key) for key in backend_options))
            raise BackendConfigurationError(
                f"Options cannot be combined with an explicit config: {unknown}."
            )
        return ZookeeperBackend(config=config, client=client)
    raise BackendConfigurationError(f"Unhandled backend: {selected!r}")
