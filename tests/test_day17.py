import pytest

from advent2017.day17 import Spinlock


@pytest.mark.parametrize(
    ("times", "expected"),
    [
        (0, [0]),
        (1, [0, 1]),
        (2, [0, 2, 1]),
        (3, [0, 2, 3, 1]),
        (9, [0, 9, 5, 7, 2, 4, 3, 8, 6, 1]),
    ],
)
def test_spin(times, expected):
    assert Spinlock(3).spin(times) == expected


def test_get_value_after_latest():
    assert Spinlock(3).value_after_latest(2017) == 638


def test_get_value_after_zero_with_nine_spins():
    assert Spinlock(3).value_after_zero(9) == 9


def test_get_value_after_zero_with_2017_spins():
    assert Spinlock(3).value_after_zero(2017) == 1226


def test_spin_returns_a_copy():
    spinlock = Spinlock(3)
    buffer = spinlock.spin(2)
    buffer.append(99)
    assert spinlock.spin(0) == [0, 2, 1]