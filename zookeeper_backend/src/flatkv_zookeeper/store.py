"""
ZooKeeper-backed flat key/value backend.

The backend implements the core ``PhysicalBackend`` protocol on top of a znode
tree. Every key is embedded under a configured root path, and each operation
materializes the key's ancestors before touching the leaf.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from flatkv.backend_protocol import SEPARATOR, Entry
from flatkv.exceptions import BackendConfigurationError

from .client import TreeClient, connect_client
from .listing import ListingReconstructor
from .paths import DEFAULT_ROOT_PATH, PathMapper, normalize_root

_LOGGER = logging.getLogger(__name__)

_MAPPING_KEYS = {
    "path": "path",
    "address": "address",
    "session_timeout": "session_timeout_seconds",
    "connect_timeout": "connect_timeout_seconds",
}


@dataclass(slots=True)
class ZookeeperStoreConfig:
    """
    Configuration for :class:`ZookeeperBackend`.

    Parameters
    ----------
    path:
        Root namespace for all keys. Normalized to one leading and one
        trailing ``/``.
    address:
        Comma-separated ``host:port`` list used when a client is not directly
        supplied.
    session_timeout_seconds:
        ZooKeeper session timeout requested by the client.
    connect_timeout_seconds:
        How long backend setup waits for the first session.
    """

    path: str = DEFAULT_ROOT_PATH
    address: str = "127.0.0.1:2181"
    session_timeout_seconds: float = 10.0
    connect_timeout_seconds: float = 15.0

    def __post_init__(self) -> None:
        """Normalize the root path and validate connection settings."""
        self.path = normalize_root(str(self.path))
        hosts = [item.strip() for item in str(self.address).split(",") if item.strip()]
        if not hosts:
            raise BackendConfigurationError("ZookeeperStoreConfig.address must list at least one host.")
        self.address = ",".join(hosts)
        self.session_timeout_seconds = float(self.session_timeout_seconds)
        self.connect_timeout_seconds = float(self.connect_timeout_seconds)
        if self.session_timeout_seconds <= 0:
            raise BackendConfigurationError("ZookeeperStoreConfig.session_timeout_seconds must be > 0.")
        if self.connect_timeout_seconds <= 0:
            raise BackendConfigurationError("ZookeeperStoreConfig.connect_timeout_seconds must be > 0.")

    @property
    def hosts(self) -> list[str]:
        return self.address.split(",")

    @classmethod
    def from_mapping(cls, conf: Mapping[str, Any]) -> "ZookeeperStoreConfig":
        """
        Create a configuration from a string-keyed mapping.

        Recognized keys are ``path``, ``address``, ``session_timeout`` and
        ``connect_timeout``; missing keys keep their defaults.
        """
        unknown = sorted(str(key) for key in conf if key not in _MAPPING_KEYS)
        if unknown:
            raise BackendConfigurationError(
                f"Unknown ZooKeeper backend options: {', '.join(unknown)}."
            )
        kwargs: dict[str, Any] = {}
        for key, field_name in _MAPPING_KEYS.items():
            if key in conf:
                kwargs[field_name] = conf[key]
        try:
            return cls(**kwargs)
        except ValueError as exc:
            raise BackendConfigurationError(f"Invalid ZooKeeper backend options: {exc}") from exc


class ZookeeperBackend:
    """
    Flat key/value backend stored in a ZooKeeper znode tree.

    Data model
    ----------
    * key ``a/b`` lives at znode ``<root>a/b``
    * values are node content; a node whose content was never set holds no
      entry
    * ancestors created for a key are never removed

    Notes
    -----
    The backend keeps no state besides the root and the shared client, and
    does no locking of its own. Concurrent writers to one key race at the
    server and the last write wins.
    """

    def __init__(
        self,
        *,
        config: ZookeeperStoreConfig | None = None,
        client: TreeClient | None = None,
    ) -> None:
        self.config = config or ZookeeperStoreConfig()
        self._owns_client = client is None
        if client is None:
            client = connect_client(
                self.config.address,
                session_timeout_seconds=self.config.session_timeout_seconds,
                connect_timeout_seconds=self.config.connect_timeout_seconds,
            )
        self._client = client
        self._paths = PathMapper(client, self.config.path)
        self._listing = ListingReconstructor(client)

    @property
    def root(self) -> str:
        return self._paths.root

    # ------------------------------------------------------------------ #
    # Backend API
    # ------------------------------------------------------------------ #

    def put(self, entry: Entry) -> None:
        """
        Write ``entry`` unconditionally, creating missing ancestors first.
        """
        path = self._paths.full_path(entry.key)
        self._paths.ensure_path(path)
        self._client.set(path, bytes(entry.value), version=-1)
        _LOGGER.debug("Put path=%s size=%s", path, len(entry.value))

    def get(self, key: str) -> Entry | None:
        """
        Read ``key``; return ``None`` when its node holds no content.

        The node is materialized first, so reading a key that was never
        written leaves an empty node behind instead of failing.
        """
        path = self._paths.full_path(key)
        self._paths.ensure_path(path)
        value, _ = self._client.get(path)
        if value is None:
            return None
        return Entry(key=key, value=value)

    def delete(self, key: str) -> None:
        """
        Remove the node for ``key`` if it exists; ancestors stay in place.
        """
        path = self._paths.full_path(key)
        if self._client.exists(path) is None:
            return
        self._client.delete(path, version=-1)
        _LOGGER.debug("Deleted path=%s", path)

    def list(self, prefix: str) -> list[str]:
        """
        List the immediate children of ``prefix`` with directory markers.
        """
        path = self._paths.full_path(prefix).removesuffix(SEPARATOR) or SEPARATOR
        self._paths.ensure_path(path)
        return self._listing.list(path)

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        """
        Stop the client if this backend created it.

        Injected clients belong to the caller and are left untouched.
        """
        if not self._owns_client:
            return
        self._client.stop()
        self._client.close()
        _LOGGER.debug("ZooKeeper client closed hosts=%s", self.config.address)

    def __enter__(self) -> "ZookeeperBackend":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
