"""
In-memory store client.

Mirrors the hosted database's semantics on a nested dict so procedures can be
exercised without a network: absent paths read as None, deletes are
idempotent, patches merge and create missing parents.
"""

import copy
import logging
from typing import Any

from infrastructure.store_client import IStoreClient, split_path
from infrastructure.store_errors import StoreConnectionError

logger = logging.getLogger("fury_fm.infrastructure.memory_store")


class InMemoryStoreClient(IStoreClient):
    """
    Store client backed by a dict tree.

    Failures can be injected per path for tests:
        store.fail_reads["managers"] = StoreReadError("boom", "managers")
        store.fail_writes["managers/bob"] = StoreWriteError("boom", "managers/bob")
    """

    def __init__(self, data: dict | None = None):
        self._root: dict = copy.deepcopy(data) if data else {}
        self.connected = False
        self.fail_connect: Exception | None = None
        self.fail_reads: dict[str, Exception] = {}
        self.fail_writes: dict[str, Exception] = {}
        # (operation, path) pairs in call order
        self.calls: list[tuple[str, str]] = []

    async def connect(self) -> None:
        if self.fail_connect is not None:
            raise self.fail_connect
        self.connected = True

    async def close(self) -> None:
        self.connected = False

    def snapshot(self) -> dict:
        """Deep copy of the whole tree."""
        return copy.deepcopy(self._root)

    def _require_session(self) -> None:
        if not self.connected:
            raise StoreConnectionError("Store client is not connected")

    def _node(self, segments: list[str]) -> Any | None:
        node: Any = self._root
        for segment in segments:
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return node

    async def fetch_subtree(self, path: str, *, shallow: bool = False) -> Any | None:
        self._require_session()
        segments = split_path(path)
        key = "/".join(segments)
        self.calls.append(("fetch", key))
        if key in self.fail_reads:
            raise self.fail_reads[key]

        node = self._node(segments)
        if node is None or node == {}:
            return None
        if shallow and isinstance(node, dict):
            return {key: True for key in node}
        return copy.deepcopy(node)

    async def delete_subtree(self, path: str) -> None:
        self._require_session()
        segments = split_path(path)
        key = "/".join(segments)
        self.calls.append(("delete", key))
        if key in self.fail_writes:
            raise self.fail_writes[key]

        if not segments:
            self._root = {}
            return
        parent = self._node(segments[:-1])
        if isinstance(parent, dict):
            parent.pop(segments[-1], None)

    async def patch_record(self, path: str, fields: dict[str, Any]) -> None:
        self._require_session()
        segments = split_path(path)
        key = "/".join(segments)
        self.calls.append(("patch", key))
        if key in self.fail_writes:
            raise self.fail_writes[key]

        node = self._root
        for segment in segments:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = {}
                node[segment] = child
            node = child
        for field_name, value in fields.items():
            if value is None:
                node.pop(field_name, None)
            else:
                node[field_name] = copy.deepcopy(value)
        logger.debug("Patched %s with %s", key, sorted(fields))
