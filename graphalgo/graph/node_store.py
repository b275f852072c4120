"""
Identity-keyed store for attaching transient data to graph nodes.

Nodes carry no derived id, so per-run data (search costs, candidate paths,
interaction state) lives here instead of on the node itself.
"""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class NodeStore(Generic[K, V]):
    """
    Mapping from object identity to an arbitrary value.

    Two keys are the same only if they are the same object, regardless of
    how their fields compare. Insertion order is preserved; overwriting a
    key keeps its original position.

    The store holds a reference to every key so an identity cannot be
    recycled by the interpreter while its entry exists.
    """

    def __init__(self) -> None:
        self._entries: dict[int, tuple[K, V]] = {}

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value stored for key, or default if absent."""
        entry = self._entries.get(id(key))
        if entry is None:
            return default
        return entry[1]

    def put(self, key: K, value: V) -> None:
        """Store value for key, replacing any existing value."""
        self._entries[id(key)] = (key, value)

    def contains_key(self, key: K) -> bool:
        return id(key) in self._entries

    def soft_put(self, key: K, value: V) -> None:
        """Store value only if key has no entry yet."""
        if not self.contains_key(key):
            self.put(key, value)

    def remove(self, key: K) -> None:
        self._entries.pop(id(key), None)

    def entries(self) -> list[tuple[K, V]]:
        """All (key, value) pairs in insertion order."""
        return list(self._entries.values())

    def keys(self) -> list[K]:
        return [key for key, _ in self._entries.values()]

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return id(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"
