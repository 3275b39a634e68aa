import dataclasses

import pytest

from listbench.benchmark.metrics import OperationResult, ResultSet, Tally, Winner, ns_to_ms, tally


def test_derived_fields_are_pure():
    """Same inputs always give the same winner and ratio."""
    first = OperationResult("x", 100, 500, 700)
    second = OperationResult("x", 100, 500, 700)

    assert first.faster is Winner.A
    assert first.faster.value == "A"
    assert first.speed_ratio == pytest.approx(1.4)
    assert second.faster is first.faster
    assert second.speed_ratio == first.speed_ratio
    assert first == second


def test_b_faster():
    result = OperationResult("prepend", 10, 9_000, 3_000)

    assert result.faster is Winner.B
    assert result.speed_ratio == pytest.approx(3.0)


@pytest.mark.parametrize("duration_a, duration_b", [
    (1, 1),
    (1, 2),
    (2, 1),
    (999, 1_000_000),
    (123_456_789, 7),
])
def test_ratio_at_least_one_for_positive_durations(duration_a, duration_b):
    result = OperationResult("x", 1, duration_a, duration_b)
    assert result.speed_ratio >= 1.0


@pytest.mark.parametrize("duration_a, duration_b", [(0, 500), (500, 0), (0, 0)])
def test_ratio_zero_when_either_duration_is_zero(duration_a, duration_b):
    result = OperationResult("x", 0, duration_a, duration_b)
    assert result.speed_ratio == 0.0


def test_equal_durations_tie_without_tolerance():
    result = OperationResult("x", 1, 800, 800)

    assert result.faster is Winner.TIE
    assert result.speed_ratio == pytest.approx(1.0)


def test_difference_below_tolerance_is_tie():
    result = OperationResult("x", 1, 1_000, 1_999, tolerance_ns=1_000)
    assert result.faster is Winner.TIE


def test_difference_at_tolerance_is_not_tie():
    result = OperationResult("x", 1, 1_000, 2_000, tolerance_ns=1_000)
    assert result.faster is Winner.A


def test_result_is_immutable():
    result = OperationResult("x", 1, 10, 20)

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.faster = Winner.B
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.duration_a = 5


def test_millisecond_views():
    result = OperationResult("x", 1, 1_500_000, 250_000)

    assert result.duration_a_ms == pytest.approx(1.5)
    assert result.duration_b_ms == pytest.approx(0.25)
    assert ns_to_ms(3_000_000) == pytest.approx(3.0)


def test_tally_counts(result_set):
    counts = tally(result_set)

    assert counts.a_wins == 2
    assert counts.b_wins == 1
    assert counts.ties == 1
    assert counts.total == 4
    assert counts.recommendation is Winner.A


@pytest.mark.parametrize("a_wins, b_wins, expected", [
    (5, 3, Winner.A),
    (2, 6, Winner.B),
    (4, 4, Winner.TIE),
    (0, 0, Winner.TIE),
])
def test_recommendation(a_wins, b_wins, expected):
    assert Tally(a_wins=a_wins, b_wins=b_wins).recommendation is expected


def test_result_set_preserves_order(result_set):
    assert result_set.names == ["append", "prepend", "get-random", "remove-back"]
    assert len(result_set) == 4
    assert result_set[1].name == "prepend"


def test_empty_result_set():
    results = ResultSet(operation_count=10)

    assert len(results) == 0
    assert results.names == []
    assert (results.variant_a, results.variant_b) == ("A", "B")
