"""
flatkv
======

Flat key/value storage backends behind one small interface.

Every backend implements :class:`flatkv.backend_protocol.PhysicalBackend`:

* ``put(entry)`` inserts or overwrites one :class:`Entry`
* ``get(key)`` returns the entry or ``None``
* ``delete(key)`` removes a key; missing keys are a no-op
* ``list(prefix)`` returns sorted immediate children, with a trailing ``/``
  on children that have children of their own

Built-in backends:

* ``inmem``: :class:`flatkv.store.InMemoryBackend`, process-local
* ``zookeeper``: provided by the optional ``flatkv_zookeeper`` package, which
  maps keys onto a ZooKeeper znode tree

Backend switching can be done with one parameter:

    from flatkv import Entry, create_backend

    backend = create_backend("inmem")
    backend = create_backend("zookeeper", path="vault/", address="127.0.0.1:2181")

    backend.put(Entry("sys/policy/root", b"{}"))
    backend.list("sys/")   # ["policy/"]
"""

from .backend_protocol import Entry, PhysicalBackend
from .backends import BackendKind, available_backends, create_backend
from .exceptions import (
    BackendConfigurationError,
    BackendNotAvailableError,
    BackendSetupError,
    FlatKVError,
)
from .store import InMemoryBackend

__all__ = [
    "BackendConfigurationError",
    "BackendKind",
    "BackendNotAvailableError",
    "BackendSetupError",
    "Entry",
    "FlatKVError",
    "InMemoryBackend",
    "PhysicalBackend",
    "available_backends",
    "create_backend",
]
