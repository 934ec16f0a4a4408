"""Tests for the in-memory store client and path helpers."""

import pytest

from infrastructure.memory_store import InMemoryStoreClient
from infrastructure.store_client import join_path, split_path
from infrastructure.store_errors import StoreConnectionError, StoreWriteError

from tests.conftest import make_store


class TestPaths:
    def test_split_ignores_outer_slashes(self):
        assert split_path("/managers/m1/") == ["managers", "m1"]

    def test_root_is_empty(self):
        assert split_path("") == []
        assert split_path("/") == []

    def test_empty_segment_rejected(self):
        with pytest.raises(ValueError):
            split_path("managers//m1")

    def test_join(self):
        assert join_path("managers", "m1") == "managers/m1"
        assert join_path("/managers/", "m1") == "managers/m1"


class TestInMemoryStoreClient:
    @pytest.mark.asyncio
    async def test_requires_connection(self):
        store = InMemoryStoreClient({"a": 1})
        with pytest.raises(StoreConnectionError):
            await store.fetch_subtree("a")

    @pytest.mark.asyncio
    async def test_context_manager_connects_and_closes(self):
        store = InMemoryStoreClient({"a": 1})
        async with store:
            assert store.connected
            assert await store.fetch_subtree("a") == 1
        assert not store.connected

    @pytest.mark.asyncio
    async def test_injected_connect_failure(self):
        store = InMemoryStoreClient()
        store.fail_connect = StoreConnectionError("unreachable")
        with pytest.raises(StoreConnectionError):
            await store.connect()

    @pytest.mark.asyncio
    async def test_fetch_absent_returns_none(self, store):
        assert await store.fetch_subtree("nothing/here") is None

    @pytest.mark.asyncio
    async def test_fetch_returns_copy(self, store):
        managers = await store.fetch_subtree("managers")
        managers["alice"]["budget"] = 1
        assert (await store.fetch_subtree("managers/alice/budget")) == 500_000_000

    @pytest.mark.asyncio
    async def test_shallow_fetch_returns_keys(self, store):
        assert await store.fetch_subtree("loans", shallow=True) == {"loan1": True, "loan2": True}

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, store):
        await store.delete_subtree("loans")
        await store.delete_subtree("loans")
        assert await store.fetch_subtree("loans") is None

    @pytest.mark.asyncio
    async def test_delete_under_missing_parent_succeeds(self, store):
        await store.delete_subtree("nope/deeper")
        assert "nope" not in store.snapshot()

    @pytest.mark.asyncio
    async def test_patch_merges(self, store):
        await store.patch_record("managers/alice", {"points": 0})
        alice = await store.fetch_subtree("managers/alice")
        assert alice["points"] == 0
        assert alice["budget"] == 500_000_000
        assert alice["managerName"] == "Alice"

    @pytest.mark.asyncio
    async def test_patch_creates_missing_parents(self):
        store = make_store({})
        await store.patch_record("managers/new", {"budget": 5})
        assert store.snapshot() == {"managers": {"new": {"budget": 5}}}

    @pytest.mark.asyncio
    async def test_patch_with_none_removes_field(self, store):
        await store.patch_record("managers/alice", {"email": None})
        assert "email" not in (await store.fetch_subtree("managers/alice"))

    @pytest.mark.asyncio
    async def test_injected_write_failure(self, store):
        store.fail_writes["managers/bob"] = StoreWriteError("denied", "managers/bob")
        with pytest.raises(StoreWriteError):
            await store.patch_record("managers/bob", {"points": 0})
        assert (await store.fetch_subtree("managers/bob/points")) == 4

    @pytest.mark.asyncio
    async def test_records_calls(self, store):
        await store.fetch_subtree("/managers/")
        await store.delete_subtree("loans")
        assert store.calls == [("fetch", "managers"), ("delete", "loans")]
