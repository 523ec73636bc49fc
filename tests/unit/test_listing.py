"""
Unit tests for directory-style listings rebuilt from znode children.
"""

from __future__ import annotations

import unittest

from flatkv_zookeeper.listing import ListingReconstructor
from tests.unit.fake_tree import FakeTreeClient


def build_tree(client: FakeTreeClient, nodes: dict[str, bytes | None]) -> None:
    for path, value in nodes.items():
        client.nodes[path] = value
        client.versions[path] = 0


class ListingReconstructorTest(unittest.TestCase):
    def setUp(self) -> None:
        self.client = FakeTreeClient()
        build_tree(
            self.client,
            {
                "/ns": None,
                "/ns/a": b"1",
                "/ns/b": None,
                "/ns/b/c": b"2",
                "/ns/b/d": b"3",
                "/ns/e": b"",
            },
        )
        self.listing = ListingReconstructor(self.client)

    def test_children_are_sorted_with_directory_markers(self) -> None:
        self.assertEqual(["a", "b/", "e"], self.listing.list("/ns"))

    def test_nested_listing(self) -> None:
        self.assertEqual(["c", "d"], self.listing.list("/ns/b"))

    def test_node_with_value_and_children_is_listed_twice(self) -> None:
        build_tree(self.client, {"/ns/a/x": b"4"})
        self.assertEqual(["a", "a/", "b/", "e"], self.listing.list("/ns"))

    def test_marker_sorts_after_bare_name(self) -> None:
        build_tree(self.client, {"/ns/a/x": b"4", "/ns/a-b": b"5"})
        self.assertEqual(["a", "a-b", "a/", "b/", "e"], self.listing.list("/ns"))

    def test_leaf_without_children_is_listed(self) -> None:
        self.assertEqual([], self.listing.list("/ns/a"))

    def test_failed_top_level_enumeration_yields_empty_listing(self) -> None:
        self.client.fail("get_children", "/ns")
        with self.assertLogs("flatkv_zookeeper.listing", level="WARNING"):
            self.assertEqual([], self.listing.list("/ns"))

    def test_missing_parent_yields_empty_listing(self) -> None:
        with self.assertLogs("flatkv_zookeeper.listing", level="WARNING"):
            self.assertEqual([], self.listing.list("/absent"))

    def test_failed_sub_enumeration_drops_marker_only(self) -> None:
        self.client.fail("get_children", "/ns/b")
        with self.assertLogs("flatkv_zookeeper.listing", level="WARNING"):
            self.assertEqual(["a", "b", "e"], self.listing.list("/ns"))

    def test_failed_value_probe_keeps_bare_name(self) -> None:
        self.client.fail("get", "/ns/b")
        with self.assertLogs("flatkv_zookeeper.listing", level="WARNING"):
            self.assertEqual(["a", "b", "b/", "e"], self.listing.list("/ns"))

    def test_tree_root_children_are_joined_without_double_separator(self) -> None:
        self.assertEqual(["ns/"], self.listing.list("/"))
        self.assertIn(("get_children", "/ns"), self.client.calls)


if __name__ == "__main__":
    unittest.main()
