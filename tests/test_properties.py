"""Behavioural properties that must hold for any composition."""

import operator

import pytest

import pushseq as ps

SAMPLES = [
    [],
    [0],
    [1, 2, 3, 4, 5],
    [5, -3, 8, 8, 0, 11, -7],
    list(range(50)),
]

COMPOSITIONS = {
    "identity": lambda s: s,
    "map": lambda s: s.map(lambda x: x * 2),
    "filter": lambda s: s.filter(lambda x: x % 3 != 0),
    "map_filter": lambda s: s.map(operator.neg).filter(lambda x: x < 0),
    "enumerate": lambda s: s.enumerate(),
    "concat": lambda s: ps.concat(s, ps.from_collection([]), s.map(lambda x: x + 1)),
    "take_skip": lambda s: s.skip(1).take(3),
    "chunk": lambda s: s.chunk(2),
    "flat_map": lambda s: s.flat_map(lambda x: ps.from_collection([x, x])),
}


@pytest.mark.parametrize("data", SAMPLES)
class TestProperties:
    """Order and length guarantees"""

    def test_map_is_elementwise(self, data):
        f = lambda x: x * x - 1  # noqa: E731
        assert ps.from_collection(data).map(f).collect() == [f(x) for x in data]

    def test_filter_is_ordered_subsequence(self, data):
        p = lambda x: x % 2 == 0  # noqa: E731
        result = ps.from_collection(data).filter(p).collect()
        assert result == [x for x in data if p(x)]
        assert len(result) <= len(data)

    def test_reduce_empty_or_left_fold(self, data):
        expected = 0
        for x in data:
            expected = expected * 2 + x
        assert ps.from_collection(data).reduce(0, lambda acc, x: acc * 2 + x) == expected

    def test_enumerate_indices(self, data):
        indices = ps.from_collection(data).enumerate().map(lambda e: e.index).collect()
        assert indices == list(range(len(data)))

    def test_zip_with_itself(self, data):
        assert ps.zip(data, data).collect() == [(x, x) for x in data]

    def test_zip_mismatch_is_empty(self, data):
        assert ps.zip(data, data + [None]).collect() == []

    def test_any_all_duality(self, data):
        seq = ps.from_collection(data)
        p = lambda x: x > 4  # noqa: E731
        assert seq.any(p) == (not seq.all(lambda x: not p(x)))

    @pytest.mark.parametrize("name", sorted(COMPOSITIONS))
    def test_count_equals_collect_length(self, data, name):
        seq = COMPOSITIONS[name](ps.from_collection(data))
        assert seq.count() == len(seq.collect())

    @pytest.mark.parametrize("name", sorted(COMPOSITIONS))
    def test_restartable(self, data, name):
        seq = COMPOSITIONS[name](ps.from_collection(data))
        assert seq.collect() == seq.collect()

    @pytest.mark.parametrize("name", sorted(COMPOSITIONS))
    def test_stop_is_final(self, data, name):
        """After returning False the callback is never called again"""
        seq = COMPOSITIONS[name](ps.from_collection(data))
        calls = 0

        def callback(value):
            nonlocal calls
            calls += 1
            return False

        seq(callback)
        assert calls <= 1


def test_reduce_known_values():
    seq = ps.from_collection([1, 2, 3, 4, 5])
    assert seq.reduce(0, operator.add) == 15
    assert seq.reduce(1, operator.mul) == 120
    assert ps.from_collection([]).reduce("init", operator.add) == "init"


def test_any_all_on_empty():
    empty = ps.from_collection([])
    for predicate in (lambda x: True, lambda x: False):
        assert empty.any(predicate) is False
        assert empty.all(predicate) is True
