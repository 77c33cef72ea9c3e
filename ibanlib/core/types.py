"""FrozenMap — the immutable mapping behind every lookup table in ibanlib."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, final

from ibanlib.core.result import Err, Ok


@final
@dataclass(frozen=True, slots=True)
class FrozenMap[K, V]:
    """Immutable sorted mapping.

    Entries are stored as a sorted tuple of (key, value) pairs, so the
    table can be shared between threads without copying and iterates in
    a deterministic order. Lookups bisect the sorted keys.
    """

    _entries: tuple[tuple[K, V], ...]

    EMPTY: ClassVar[FrozenMap[Any, Any]]  # Assigned after class definition

    @staticmethod
    def create(items: dict[K, V] | Iterable[tuple[K, V]]) -> Ok[FrozenMap[K, V]] | Err[str]:
        """Create a FrozenMap from a dict or iterable of (key, value) pairs.

        Duplicate keys: last value wins (like dict constructor).
        Non-comparable keys: returns Err.
        """
        d = items if isinstance(items, dict) else dict(items)
        try:
            entries = tuple(sorted(d.items(), key=lambda kv: kv[0]))
        except TypeError as e:
            return Err(f"FrozenMap keys must be comparable: {e}")
        return Ok(FrozenMap(_entries=entries))

    def _index(self, key: K) -> int:
        lo = bisect_left(self._entries, key, key=lambda kv: kv[0])
        if lo < len(self._entries) and self._entries[lo][0] == key:
            return lo
        return -1

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return value for key, or default if not found."""
        try:
            i = self._index(key)
        except TypeError:
            return default
        return self._entries[i][1] if i >= 0 else default

    def __getitem__(self, key: K) -> V:
        i = self._index(key)
        if i < 0:
            raise KeyError(key)
        return self._entries[i][1]

    def __contains__(self, key: object) -> bool:
        try:
            return self._index(key) >= 0  # type: ignore[arg-type]
        except TypeError:
            return False

    def __iter__(self) -> Iterator[K]:
        return (k for k, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> tuple[K, ...]:
        return tuple(k for k, _ in self._entries)

    def items(self) -> tuple[tuple[K, V], ...]:
        """Return the sorted (key, value) entries."""
        return self._entries

    def to_dict(self) -> dict[K, V]:
        """Convert to a regular dict (for serialization boundaries)."""
        return dict(self._entries)


FrozenMap.EMPTY = FrozenMap(_entries=())
