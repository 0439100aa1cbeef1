from itertools import islice

import pytest

from advent2017.day03 import (
    distance,
    main,
    spiral_positions,
    spiral_values,
    value_greater_than,
)


@pytest.mark.parametrize(
    ("square", "expected"), [(1, 0), (12, 3), (23, 2), (1024, 31)]
)
def test_distance(square, expected):
    assert distance(square) == expected


@pytest.mark.parametrize(
    ("value", "expected"), [(1, 2), (5, 10), (130, 133), (780, 806)]
)
def test_value_greater_than(value, expected):
    assert value_greater_than(value) == expected


def test_first_positions():
    assert list(islice(spiral_positions(), 10)) == [
        (0, 0),
        (1, 0),
        (1, -1),
        (0, -1),
        (-1, -1),
        (-1, 0),
        (-1, 1),
        (0, 1),
        (1, 1),
        (2, 1),
    ]


def test_positions_are_unique():
    positions = list(islice(spiral_positions(), 500))
    assert len(set(positions)) == 500


def test_first_values():
    assert list(islice(spiral_values(), 10)) == [1, 1, 2, 4, 5, 10, 11, 23, 25, 26]


def test_distance_rejects_zero():
    with pytest.raises(ValueError):
        distance(0)


def test_main_prints_results(capsys):
    main(["12"])
    out = capsys.readouterr().out
    assert "Distance: 3" in out
    assert "Greater value: 23" in out