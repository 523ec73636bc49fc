"""Pytest configuration helpers for test collection.

Ensure the project root and the plugin/example source directories are on
sys.path so tests can import the packages without an editable install.
"""
import sys
from pathlib import Path


def pytest_configure(config):
    repo_root = Path(__file__).resolve().parents[1]
    for path in (
        repo_root,
        repo_root / "zookeeper_backend" / "src",
        repo_root / "example" / "src",
    ):
        if str(path) not in sys.path:
            sys.path.insert(0, str(path))
