import pytest

import pushseq as ps
from pushseq import lift as L


class TestUp:
    """Lifting data into Seq"""

    def test_of(self):
        assert L.up.of(1, 2, 3).collect() == [1, 2, 3]

    def test_from_collection(self):
        assert L.up.from_collection((4, 5)).collect() == [4, 5]

    def test_empty(self):
        assert L.empty().collect() == []

    def test_once(self):
        assert L.once("x").collect() == ["x"]

    def test_optional(self):
        assert L.optional(None).collect() == []
        assert L.optional(0).collect() == [0]

    def test_optional_in_flat_map(self):
        cache = {1: "one", 3: "three"}
        result = L.up.of(1, 2, 3).flat_map(lambda key: L.up.optional(cache.get(key))).collect()
        assert result == ["one", "three"]


class TestDown:
    """Lowering Seq into values"""

    def test_to_list(self):
        assert L.down.to_list(L.up.of(1, 2)) == [1, 2]

    def test_first(self):
        assert L.down.first(L.up.of(9, 8)).unwrap() == 9

    def test_or_else(self):
        assert L.down.or_else(L.up.of(1), default=0) == 1
        assert L.or_else(L.empty(), default=0) == 0

    def test_unsafe(self):
        assert L.unsafe(L.up.of("a")) == "a"
        with pytest.raises(Exception):
            L.down.unsafe(ps.from_collection([]))
