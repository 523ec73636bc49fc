"""
Path mapping between flat keys and the znode tree.

ZooKeeper requires every segment of a path to exist as a node before data can
be written to or read from the leaf. :class:`PathMapper` walks a path from the
root down and creates whatever is missing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

from flatkv.backend_protocol import SEPARATOR
from kazoo.exceptions import KazooException, NodeExistsError
from kazoo.handlers.threading import KazooTimeoutError
from kazoo.security import OPEN_ACL_UNSAFE

from .client import TreeClient

_LOGGER = logging.getLogger(__name__)

DEFAULT_ROOT_PATH = "vault/"

CLIENT_ERRORS = (KazooException, KazooTimeoutError)
"""Failures a tree client may raise for any request."""


class NodeState(str, Enum):
    """
    Outcome of ensuring one structural node.

    CREATED
        This call created the node.
    PRESENT
        The node already existed, possibly created by a concurrent writer
        between the existence check and the create request.
    FAILED
        The client failed to answer; the node may or may not exist.
    """

    CREATED = "created"
    PRESENT = "present"
    FAILED = "failed"


def normalize_root(path: str) -> str:
    """
    Return ``path`` with exactly one leading and one trailing separator.

    ``"foo"``, ``"/foo"``, ``"foo/"`` and ``"//foo//"`` all become
    ``"/foo/"``; an empty path becomes ``"/"``.
    """
    inner = path.strip().strip(SEPARATOR)
    if not inner:
        return SEPARATOR
    return f"{SEPARATOR}{inner}{SEPARATOR}"


def join_child(parent: str, child: str) -> str:
    if parent.endswith(SEPARATOR):
        return parent + child
    return f"{parent}{SEPARATOR}{child}"


def iter_ancestors(path: str) -> Iterator[str]:
    """
    Yield every accumulated path from the first segment to the leaf.

    Blank segments produced by repeated, leading or trailing separators are
    skipped, so ``"/a//b/"`` yields ``"/a"`` then ``"/a/b"``.
    """
    current = ""
    for segment in path.split(SEPARATOR):
        if not segment.strip():
            continue
        current = f"{current}{SEPARATOR}{segment}"
        yield current


class PathMapper:
    """
    Turns keys into absolute znode paths and materializes their ancestors.

    Parameters
    ----------
    client:
        Tree client shared with the owning backend.
    root:
        Namespace root; normalized on construction.
    """

    def __init__(self, client: TreeClient, root: str = DEFAULT_ROOT_PATH) -> None:
        self._client = client
        self.root = normalize_root(root)

    def full_path(self, key: str) -> str:
        return self.root + key

    def ensure_node(self, path: str) -> NodeState:
        """
        Create ``path`` as an empty world-accessible node unless it exists.

        Client failures are reported as :attr:`NodeState.FAILED` instead of
        being raised.
        """
        try:
            if self._client.exists(path) is not None:
                return NodeState.PRESENT
            self._client.create(path, None, acl=OPEN_ACL_UNSAFE)
        except NodeExistsError:
            return NodeState.PRESENT
        except CLIENT_ERRORS as exc:
            _LOGGER.warning("Failed to ensure node path=%s error=%r", path, exc)
            return NodeState.FAILED
        _LOGGER.debug("Created structural node path=%s", path)
        return NodeState.CREATED

    def ensure_path(self, path: str) -> None:
        """
        Ensure every node from the first segment of ``path`` to its leaf exists.

        The walk never stops early and never raises for client failures; the
        operation that follows surfaces any real problem.
        """
        for ancestor in iter_ancestors(path):
            self.ensure_node(ancestor)
