"""
Unit tests for backend selection and the in-memory backend.
"""

from __future__ import annotations

import unittest

from flatkv import BackendKind, Entry, InMemoryBackend, available_backends, create_backend
from flatkv.exceptions import BackendConfigurationError
from flatkv_zookeeper import ZookeeperBackend, ZookeeperStoreConfig
from tests.unit.fake_tree import FakeTreeClient


class CreateBackendTest(unittest.TestCase):
    def test_default_backend_is_in_memory(self) -> None:
        self.assertIsInstance(create_backend(), InMemoryBackend)
        self.assertIsInstance(create_backend(" INMEM "), InMemoryBackend)

    def test_unknown_backend_is_rejected(self) -> None:
        with self.assertRaises(BackendConfigurationError) as caught:
            create_backend("etcd")
        self.assertIn("inmem, zookeeper", str(caught.exception))

    def test_in_memory_backend_rejects_options(self) -> None:
        with self.assertRaises(BackendConfigurationError):
            create_backend("inmem", path="vault/")

    def test_available_backends_include_zookeeper(self) -> None:
        self.assertEqual(("inmem", "zookeeper"), available_backends())

    def test_zookeeper_backend_from_mapping(self) -> None:
        client = FakeTreeClient()
        conf = {"path": "secrets", "address": "zk1:2181,zk2:2181"}

        backend = create_backend(BackendKind.ZOOKEEPER, client=client, **conf)

        self.assertIsInstance(backend, ZookeeperBackend)
        self.assertEqual("/secrets/", backend.root)
        self.assertEqual("zk1:2181,zk2:2181", backend.config.address)
        backend.put(Entry("k", b"v"))
        self.assertEqual(b"v", client.nodes["/secrets/k"])

    def test_zookeeper_backend_from_config_object(self) -> None:
        config = ZookeeperStoreConfig(path="other/")
        backend = create_backend("zookeeper", config=config, client=FakeTreeClient())
        self.assertIs(config, backend.config)

    def test_config_object_cannot_be_mixed_with_options(self) -> None:
        with self.assertRaises(BackendConfigurationError):
            create_backend("zookeeper", config=ZookeeperStoreConfig(), path="x", client=FakeTreeClient())

    def test_unknown_zookeeper_option_is_rejected(self) -> None:
        with self.assertRaises(BackendConfigurationError):
            create_backend("zookeeper", client=FakeTreeClient(), hosts="zk1:2181")


class InMemoryBackendTest(unittest.TestCase):
    def setUp(self) -> None:
        self.backend = InMemoryBackend()

    def test_round_trip_and_overwrite(self) -> None:
        self.backend.put(Entry("k", b"v1"))
        self.backend.put(Entry("k", b"v2"))
        self.assertEqual(Entry("k", b"v2"), self.backend.get("k"))

    def test_missing_key_is_absent(self) -> None:
        self.assertIsNone(self.backend.get("missing"))

    def test_delete_is_idempotent(self) -> None:
        self.backend.put(Entry("k", b"v"))
        self.backend.delete("k")
        self.backend.delete("k")
        self.assertIsNone(self.backend.get("k"))
        self.assertEqual(0, len(self.backend))

    def test_stored_value_is_detached_from_caller_buffer(self) -> None:
        buffer = bytearray(b"abc")
        self.backend.put(Entry("k", buffer))
        buffer[0] = ord("z")
        self.assertEqual(b"abc", self.backend.get("k").value)

    def test_listing_matches_directory_contract(self) -> None:
        self.backend.put(Entry("a", b"1"))
        self.backend.put(Entry("b/c", b"2"))
        self.backend.put(Entry("b/d", b"3"))

        self.assertEqual(["a", "b/"], self.backend.list(""))
        self.assertEqual(["c", "d"], self.backend.list("b"))
        self.assertEqual(["c", "d"], self.backend.list("b/"))
        self.assertEqual([], self.backend.list("a"))

    def test_key_that_is_also_a_directory_is_listed_twice(self) -> None:
        self.backend.put(Entry("b", b"0"))
        self.backend.put(Entry("b/c", b"1"))
        self.assertEqual(["b", "b/"], self.backend.list(""))

    def test_empty_listing(self) -> None:
        self.assertEqual([], self.backend.list(""))


if __name__ == "__main__":
    unittest.main()
