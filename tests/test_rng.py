"""Tests for RandomProvider and fisher_yates."""

import pytest

from radial_deck.rng import RandomProvider, fisher_yates


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------

class TestSeeding:
    def test_same_seed_same_sequence(self):
        a = RandomProvider(7)
        b = RandomProvider(7)

        assert [a.next_in_range(0, 1000) for _ in range(20)] == [
            b.next_in_range(0, 1000) for _ in range(20)
        ]

    def test_seed_is_recorded(self):
        assert RandomProvider(123).seed == 123

    def test_unseeded_provider_records_replayable_seed(self):
        original = RandomProvider()
        replay = RandomProvider(original.seed)

        assert isinstance(original.seed, int)
        assert [original.next_in_range(0, 100) for _ in range(10)] == [
            replay.next_in_range(0, 100) for _ in range(10)
        ]

    def test_set_seed_restarts_sequence(self):
        rng = RandomProvider(1)
        first = [rng.next_in_range(0, 1000) for _ in range(5)]
        rng.set_seed(1)

        assert [rng.next_in_range(0, 1000) for _ in range(5)] == first
        assert rng.seed == 1

    def test_set_seed_switches_stream(self):
        rng = RandomProvider(1)
        rng.set_seed(99)

        expected = RandomProvider(99)
        assert [rng.next_in_range(0, 1000) for _ in range(5)] == [
            expected.next_in_range(0, 1000) for _ in range(5)
        ]


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------

class TestRanges:
    def test_int_range_is_half_open(self, rng):
        values = {rng.next_in_range(3, 6) for _ in range(500)}

        assert values == {3, 4, 5}

    def test_single_value_range(self, rng):
        assert rng.next_in_range(4, 5) == 4

    def test_empty_int_range_raises(self, rng):
        with pytest.raises(ValueError):
            rng.next_in_range(5, 5)

    def test_float_range_bounds(self, rng):
        for _ in range(500):
            value = rng.next_float_in_range(-2.0, 3.0)
            assert -2.0 <= value < 3.0


# ---------------------------------------------------------------------------
# Forking
# ---------------------------------------------------------------------------

class TestFork:
    def test_fork_is_deterministic(self):
        assert RandomProvider(5).fork("market").seed == RandomProvider(5).fork("market").seed

    def test_fork_names_give_distinct_streams(self):
        rng = RandomProvider(5)

        assert rng.fork("player_1").seed != rng.fork("player_2").seed

    def test_fork_does_not_consume_parent_state(self):
        a = RandomProvider(5)
        b = RandomProvider(5)
        a.fork("anything")

        assert a.next_in_range(0, 1000) == b.next_in_range(0, 1000)

    def test_repr(self):
        assert repr(RandomProvider(3)) == "RandomProvider(seed=3)"


# ---------------------------------------------------------------------------
# fisher_yates
# ---------------------------------------------------------------------------

class _ScriptedProvider(RandomProvider):
    """Returns the low end of every range, so no element ever moves."""

    def next_in_range(self, lo: int, hi: int) -> int:
        return lo


class _ReversingProvider(RandomProvider):
    """Always picks the last index in range."""

    def next_in_range(self, lo: int, hi: int) -> int:
        return hi - 1


class TestFisherYates:
    def test_is_a_permutation(self, rng):
        items = list(range(30)) + [5, 5]
        shuffled = fisher_yates(list(items), rng)

        assert sorted(shuffled) == sorted(items)

    def test_shuffles_in_place_and_returns_same_list(self, rng):
        items = list(range(10))

        assert fisher_yates(items, rng) is items

    def test_deterministic_for_seed(self):
        a = fisher_yates(list(range(20)), RandomProvider(11))
        b = fisher_yates(list(range(20)), RandomProvider(11))

        assert a == b

    def test_identity_choice_keeps_order(self):
        assert fisher_yates([1, 2, 3, 4], _ScriptedProvider(0)) == [1, 2, 3, 4]

    def test_forward_swap_order(self):
        # i=0 swaps with 3, i=1 swaps with 3, i=2 swaps with 3
        # [1,2,3,4] -> [4,2,3,1] -> [4,1,3,2] -> [4,1,2,3]
        assert fisher_yates([1, 2, 3, 4], _ReversingProvider(0)) == [4, 1, 2, 3]

    def test_empty_and_single(self, rng):
        assert fisher_yates([], rng) == []
        assert fisher_yates(["only"], rng) == ["only"]

    def test_provider_shuffle_delegates(self):
        via_method = RandomProvider(8).shuffle(list(range(15)))
        via_function = fisher_yates(list(range(15)), RandomProvider(8))

        assert via_method == via_function
