"""
FastAPI application exposing a flatkv backend over HTTP.

Point several instances at the same ZooKeeper ensemble and root path, then
write through one instance and read or list through another.

Environment:

* ``FLATKV_BACKEND``: ``inmem`` (default) or ``zookeeper``
* ``FLATKV_ZK_PATH``: root namespace, default ``vault/``
* ``FLATKV_ZK_ADDRESS``: comma-separated ``host:port`` list
"""

from __future__ import annotations

import argparse
import base64
import binascii
import logging
import os
from typing import Any

import uvicorn
from fastapi import FastAPI, HTTPException

from flatkv import Entry, PhysicalBackend, create_backend

app = FastAPI(title="flatkv FastAPI example", version="0.1.0")
_LOGGER = logging.getLogger(__name__)

_backend: PhysicalBackend | None = None


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value if value else default


def _build_backend() -> PhysicalBackend:
    backend = _get_env("FLATKV_BACKEND", "inmem").lower()
    if backend == "zookeeper":
        return create_backend(
            "zookeeper",
            path=_get_env("FLATKV_ZK_PATH", "vault/"),
            address=_get_env("FLATKV_ZK_ADDRESS", "127.0.0.1:2181"),
        )
    if backend != "inmem":
        raise RuntimeError("FLATKV_BACKEND must be inmem or zookeeper.")
    return create_backend("inmem")


def _require_backend() -> PhysicalBackend:
    if _backend is None:
        raise HTTPException(status_code=503, detail="Backend not started.")
    return _backend


@app.on_event("startup")
def on_startup() -> None:
    global _backend
    if _backend is not None:
        return
    _backend = _build_backend()
    _LOGGER.info("Backend started kind=%s", type(_backend).__name__)


@app.on_event("shutdown")
def on_shutdown() -> None:
    global _backend
    backend = _backend
    if backend is None:
        return
    try:
        backend.close()
    finally:
        _backend = None


@app.put("/kv/{key:path}")
def kv_put(key: str, payload: dict[str, Any]) -> dict[str, Any]:
    encoded = payload.get("value")
    if not isinstance(encoded, str):
        raise HTTPException(status_code=400, detail="Payload must include base64 string 'value'.")
    try:
        value = base64.b64decode(encoded, validate=True)
    except binascii.Error as exc:
        raise HTTPException(status_code=400, detail="'value' is not valid base64.") from exc
    _require_backend().put(Entry(key=key, value=value))
    return {"key": key, "size": len(value)}


@app.get("/kv/{key:path}")
def kv_get(key: str) -> dict[str, Any]:
    entry = _require_backend().get(key)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"No entry for key {key!r}.")
    return {"key": entry.key, "value": base64.b64encode(entry.value).decode("ascii")}


@app.delete("/kv/{key:path}")
def kv_delete(key: str) -> dict[str, Any]:
    _require_backend().delete(key)
    return {"deleted": key}


@app.get("/list")
def kv_list(prefix: str = "") -> dict[str, Any]:
    return {"prefix": prefix, "keys": _require_backend().list(prefix)}


def main(port: int) -> int:
    logging.basicConfig(level=logging.INFO)
    host = _get_env("FLATKV_API_HOST", "0.0.0.0")
    uvicorn.run("flatkv_example.fastapi_app:app", host=host, port=port, reload=False)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Serve a flatkv backend over HTTP.")
    parser.add_argument("--port", type=int, default=8000, help="The port number to use")
    args = parser.parse_args()
    raise SystemExit(main(args.port))
