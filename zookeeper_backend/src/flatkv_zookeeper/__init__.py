"""
ZooKeeper backend plugin for flatkv.

This package is intentionally separate from the core library so users can opt
into the kazoo dependency only when needed:

    from flatkv import Entry
    from flatkv_zookeeper import ZookeeperBackend, ZookeeperStoreConfig

    backend = ZookeeperBackend(
        config=ZookeeperStoreConfig(path="vault/", address="zk1:2181,zk2:2181"),
    )
    backend.put(Entry("sys/token", b"secret"))

ZooKeeper only stores data at paths whose every segment exists, so the backend
creates missing ancestors on demand and rebuilds directory listings from znode
children.

Users can either import this package directly or use the core backend factory:

    from flatkv import create_backend
    backend = create_backend("zookeeper", path="vault/", address="zk1:2181")
"""

from .client import TreeClient, connect_client
from .listing import ListingReconstructor
from .paths import NodeState, PathMapper, normalize_root
from .store import ZookeeperBackend, ZookeeperStoreConfig

__all__ = [
    "ListingReconstructor",
    "NodeState",
    "PathMapper",
    "TreeClient",
    "ZookeeperBackend",
    "ZookeeperStoreConfig",
    "connect_client",
    "normalize_root",
]
