"""
Tests for NumberLine snapshots, HalfOpenInterval and mutation records.
"""

import pytest
import torch
from segment_intensity import HalfOpenInterval, Mutation, NumberLine, SegmentIntensityStore, reference_value, replay


class TestNumberLineValidation:

    def test_rejects_unsorted_points(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            NumberLine.from_pairs([[10, 1], [5, 0]])

    def test_rejects_duplicate_points(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            NumberLine.from_pairs([[10, 1], [10, 2]])

    def test_rejects_leading_zero(self):
        with pytest.raises(ValueError, match="nonzero"):
            NumberLine.from_pairs([[10, 0]])

    def test_rejects_equal_neighbours(self):
        with pytest.raises(ValueError, match="differ"):
            NumberLine.from_pairs([[10, 1], [20, 1]])

    def test_rejects_float_intensity(self):
        with pytest.raises(ValueError, match="ints"):
            NumberLine.from_pairs([[10, 1.5]])

    def test_rejects_length_mismatch(self):
        with pytest.raises(ValueError, match="same length"):
            NumberLine(points=(1, 2), intensities=(1,))


class TestNumberLineLookup:

    @pytest.fixture
    def line(self):
        return NumberLine.from_pairs([[10, 1], [20, 2], [30, 1], [40, 0]])

    def test_value_at_scalar(self, line):
        assert line.value_at(9.99) == 0
        assert line.value_at(10) == 1
        assert line.value_at(25) == 2
        assert line.value_at(40) == 0
        assert line.value_at(1e6) == 0

    def test_value_at_batch(self, line):
        assert line.value_at([0, 10, 19, 20, 35]) == [0, 1, 1, 2, 1]
        assert line.value_at(torch.tensor([30.0, 39.5])) == [1, 1]

    def test_locate(self, line):
        idx = line.locate(torch.tensor([5.0, 10.0, 45.0]))
        assert idx.tolist() == [-1, 0, 3]

    def test_empty_line(self):
        line = NumberLine()
        assert line.is_zero
        assert line.value_at(3) == 0
        assert line.value_at([1, 2]) == [0, 0]

    def test_value_at_rejects_2d(self, line):
        with pytest.raises(ValueError):
            line.value_at([[1, 2], [3, 4]])

    def test_as_tensors(self, line):
        breaks, values = line.as_tensors()
        assert breaks.dtype == torch.float64
        assert breaks.tolist() == [10.0, 20.0, 30.0, 40.0]
        assert values.tolist() == [1.0, 2.0, 1.0, 0.0]

    def test_pairs_round_trip_through_store(self):
        store = SegmentIntensityStore()
        store.add(10, 30, 1)
        assert store.number_line().to_pairs() == store.query()
        assert len(store.number_line()) == 2


class TestHalfOpenInterval:

    def test_contains_is_half_open(self):
        interval = HalfOpenInterval(1, 3)
        assert interval.contains(1)
        assert interval.contains(2.999)
        assert not interval.contains(3)

    def test_is_empty(self):
        assert HalfOpenInterval(5, 5).is_empty
        assert HalfOpenInterval(6, 5).is_empty
        assert not HalfOpenInterval(4, 5).is_empty

    def test_mask(self):
        mask = HalfOpenInterval(1, 3).mask(torch.tensor([0.0, 1.0, 2.0, 3.0]))
        assert mask.tolist() == [False, True, True, False]


class TestMutation:

    def test_unknown_op(self):
        with pytest.raises(ValueError, match="op must be one of"):
            Mutation("mul", 0, 1, 2)

    def test_non_int_amount(self):
        with pytest.raises(ValueError, match="amount"):
            Mutation("add", 0, 1, 2.5)

    def test_replay_into_existing_store(self):
        store = SegmentIntensityStore()
        store.add(0, 10, 1)
        replay([Mutation("set", 5, 10, 3)], store=store)
        assert store.query() == [[0, 1], [5, 3], [10, 0]]


class TestExport:

    def test_as_tensors_rejects_intensities_past_float_range(self):
        store = SegmentIntensityStore()
        store.add(0, 1, 2 ** 1100)
        with pytest.raises(ValueError, match="float range"):
            store.number_line().as_tensors()

    def test_tensor_lookup_still_uses_float_points(self):
        line = NumberLine.from_pairs([[1, 3], [2, 0]])
        assert line.value_at(torch.tensor([0.5, 1.5, 2.5], dtype=torch.float32)) == [0, 3, 0]


class TestBatchedReference:
    """reference_value evaluates 1D inputs through interval masks."""

    def test_batch_matches_scalar(self):
        mutations = [Mutation("add", 0, 10, 2), Mutation("set", 5, 15, 7), Mutation("add", 12, 20, -1)]
        xs = [-1, 0, 4.5, 5, 11.9, 12, 15, 19.5, 20]
        expected = [reference_value(mutations, x) for x in xs]
        assert expected == [0, 2, 2, 7, 7, 6, -1, -1, 0]
        assert reference_value(mutations, xs) == expected
        assert reference_value(mutations, torch.tensor(xs)) == expected
