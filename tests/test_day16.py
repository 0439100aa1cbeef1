import pytest

from advent2017.day16 import (
    Dance,
    DanceMoveParseError,
    Exchange,
    Partner,
    Spin,
    parse_dance_move,
)


def test_dance_moves():
    dance = Dance(5)

    dance.step(Spin(1))
    dance.step(Exchange(3, 4))
    dance.step(Partner("e", "b"))

    assert dance.order() == "baedc"


def test_whole_dance():
    dance = Dance(5)

    order = dance.order_after(
        [Spin(1), Exchange(3, 4), Partner("e", "b")],
        1_000_000_000,
    )

    assert order == "abcde"


def test_initial_order():
    assert Dance(5).order() == "abcde"


def test_spin_moves_end_to_front():
    dance = Dance(5)
    dance.step(Spin(3))
    assert dance.order() == "cdeab"


def test_spin_zero_keeps_order():
    dance = Dance(4)
    dance.step(Spin(0))
    assert dance.order() == "abcd"


def test_spin_too_large_raises():
    with pytest.raises(ValueError):
        Dance(3).step(Spin(4))


def test_partner_unknown_raises():
    with pytest.raises(ValueError):
        Dance(3).step(Partner("a", "z"))


def test_exchange_out_of_range_raises():
    with pytest.raises(IndexError):
        Dance(3).step(Exchange(0, 3))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("s1", Spin(1)),
        ("x3/4", Exchange(3, 4)),
        ("pe/b", Partner("e", "b")),
        (" s15\n", Spin(15)),
    ],
)
def test_parse_dance_move(text, expected):
    assert parse_dance_move(text) == expected


@pytest.mark.parametrize("text", ["", "q1", "sx", "x3", "pab/c", "pa", "x-1/2"])
def test_parse_invalid_dance_move(text):
    with pytest.raises(DanceMoveParseError):
        parse_dance_move(text)


def test_order_after_one_round_matches_steps():
    moves = [parse_dance_move(m) for m in "s1,x3/4,pe/b".split(",")]
    assert Dance(5).order_after(moves, 1) == "baedc"


def test_order_after_two_rounds():
    moves = [Spin(1), Exchange(3, 4), Partner("e", "b")]
    assert Dance(5).order_after(moves, 2) == "ceadb"