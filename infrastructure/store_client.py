"""
Abstract client for the hierarchical realtime store.

The store is a JSON tree addressed by '/'-delimited paths. Every maintenance
operation goes through the four primitives below so procedures can run
against the hosted database or an in-memory tree.
"""

from abc import ABC, abstractmethod
from typing import Any


def split_path(path: str) -> list[str]:
    """
    Split a store path into its segments.

    Leading and trailing slashes are ignored. The root is the empty path.

    Raises:
        ValueError: If the path contains an empty segment (e.g. 'a//b')
    """
    stripped = path.strip("/")
    if not stripped:
        return []
    segments = stripped.split("/")
    if any(not segment for segment in segments):
        raise ValueError(f"Invalid store path: {path!r}")
    return segments


def join_path(*parts: str) -> str:
    """Join path parts with '/', validating the result."""
    segments: list[str] = []
    for part in parts:
        segments.extend(split_path(str(part)))
    return "/".join(segments)


class IStoreClient(ABC):
    """Async access to the store; one session per batch run."""

    @abstractmethod
    async def connect(self) -> None:
        """Open the session. Raises StoreConnectionError on failure."""
        ...

    @abstractmethod
    async def close(self) -> None: ...

    @abstractmethod
    async def fetch_subtree(self, path: str, *, shallow: bool = False) -> Any | None:
        """
        Return the value stored at path, or None when nothing exists there.

        With shallow=True only the immediate child keys are returned, each
        mapped to True.
        """
        ...

    @abstractmethod
    async def delete_subtree(self, path: str) -> None:
        """Remove everything at path. Deleting an absent path succeeds."""
        ...

    @abstractmethod
    async def patch_record(self, path: str, fields: dict[str, Any]) -> None:
        """Merge fields into the record at path, leaving other fields untouched."""
        ...

    async def __aenter__(self) -> "IStoreClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
