"""
Runnable demo for flatkv backends.

The demo writes a small key hierarchy, then shows reads, overwrites,
directory-style listings and idempotent deletes.

Run after installing this example package:

    flatkv-demo
    flatkv-demo --backend zookeeper --address 127.0.0.1:2181
"""

from __future__ import annotations

import argparse
import json
import sys
import uuid
from typing import Any

from flatkv import Entry, create_backend
from flatkv.exceptions import BackendNotAvailableError, BackendSetupError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="flatkv example")
    parser.add_argument("--backend", choices=("inmem", "zookeeper"), default="inmem")
    parser.add_argument("--address", default="127.0.0.1:2181")
    parser.add_argument("--path", default=f"flatkv-demo-{uuid.uuid4().hex[:8]}/")
    return parser


def _backend_options(args: argparse.Namespace) -> dict[str, Any]:
    if args.backend == "zookeeper":
        return {"path": args.path, "address": args.address}
    return {}


def _print_step(title: str, payload: Any) -> None:
    print(f"\n=== {title} ===")
    print(json.dumps(payload, indent=2, sort_keys=True))


def _describe(entry: Entry | None) -> Any:
    if entry is None:
        return None
    return {"key": entry.key, "value": entry.value.decode("utf-8", errors="replace")}


def run_demo(args: argparse.Namespace) -> int:
    backend = create_backend(args.backend, **_backend_options(args))
    try:
        backend.put(Entry("a", b"alpha"))
        backend.put(Entry("b/c", b"charlie"))
        backend.put(Entry("b/d", b"delta"))
        _print_step(
            "Listings",
            {"root": backend.list(""), "b": backend.list("b")},
        )

        backend.put(Entry("a", b"alpha-v2"))
        _print_step(
            "Reads",
            {"a": _describe(backend.get("a")), "missing": _describe(backend.get("missing"))},
        )

        backend.delete("b/c")
        backend.delete("b/c")
        _print_step("After delete", {"b": backend.list("b"), "b/c": _describe(backend.get("b/c"))})
        return 0
    finally:
        backend.close()


def main() -> int:
    parser = _build_parser()
    args = parser.parse_args()
    try:
        return run_demo(args)
    except BackendNotAvailableError as exc:
        print(f"ZooKeeper backend not available: {exc}", file=sys.stderr)
        print("Install the ZooKeeper client first: pip install kazoo", file=sys.stderr)
        return 2
    except BackendSetupError as exc:
        print(f"Could not connect to ZooKeeper: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
