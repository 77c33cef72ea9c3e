"""Tests for ibanlib.core.types — FrozenMap."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ibanlib.core.result import Err, Ok, unwrap
from ibanlib.core.types import FrozenMap


class TestFrozenMapCreate:
    def test_create_from_dict_sorts(self) -> None:
        fm = unwrap(FrozenMap.create({"GB": 22, "BE": 16}))
        assert fm.items() == (("BE", 16), ("GB", 22))

    def test_create_from_pairs(self) -> None:
        assert isinstance(FrozenMap.create([("z", 3), ("a", 1)]), Ok)

    def test_duplicate_keys_last_wins(self) -> None:
        fm = unwrap(FrozenMap.create([("a", 1), ("a", 2)]))
        assert fm["a"] == 2
        assert len(fm) == 1

    def test_non_comparable_keys(self) -> None:
        result = FrozenMap.create({complex(1, 2): "a", complex(3, 4): "b"})
        assert isinstance(result, Err)
        assert "comparable" in result.error


class TestFrozenMapAccess:
    def test_get(self) -> None:
        fm = unwrap(FrozenMap.create({"a": 1}))
        assert fm.get("a") == 1
        assert fm.get("z") is None
        assert fm.get("z", 99) == 99

    def test_get_with_incomparable_key_returns_default(self) -> None:
        fm = unwrap(FrozenMap.create({"a": 1}))
        assert fm.get(3, "d") == "d"  # type: ignore[arg-type]
        assert 3 not in fm

    def test_getitem_missing_raises_keyerror(self) -> None:
        fm = unwrap(FrozenMap.create({"a": 1}))
        with pytest.raises(KeyError):
            _ = fm["z"]

    def test_iter_keys_sorted(self) -> None:
        fm = unwrap(FrozenMap.create({"c": 3, "a": 1, "b": 2}))
        assert list(fm) == ["a", "b", "c"]
        assert fm.keys() == ("a", "b", "c")

    def test_empty(self) -> None:
        assert len(FrozenMap.EMPTY) == 0
        assert "a" not in FrozenMap.EMPTY

    def test_frozen(self) -> None:
        fm = unwrap(FrozenMap.create({"a": 1}))
        with pytest.raises(dataclasses.FrozenInstanceError):
            fm._entries = ()  # type: ignore[misc]


class TestFrozenMapProperties:
    @given(st.dictionaries(st.text(min_size=1), st.integers(), max_size=20))
    def test_to_dict_round_trip(self, d: dict[str, int]) -> None:
        assert unwrap(FrozenMap.create(d)).to_dict() == d

    @given(st.dictionaries(st.text(min_size=1), st.integers(), min_size=1, max_size=20))
    def test_every_key_found(self, d: dict[str, int]) -> None:
        fm = unwrap(FrozenMap.create(d))
        for k, v in d.items():
            assert k in fm
            assert fm[k] == v
