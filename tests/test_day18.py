import pytest

from advent2017.day18 import (
    Add,
    InstructionParseError,
    Jgz,
    Mod,
    Mul,
    Number,
    Program,
    Rcv,
    Register,
    Set,
    Snd,
    Vm,
    parse_instruction,
    parse_value,
)


def test_get_values_sent_by_last_program():
    instructions = [
        Snd(Number(1)),
        Snd(Number(2)),
        Snd(Register("p")),
        Rcv("a"),
        Rcv("b"),
        Rcv("c"),
        Rcv("d"),
    ]

    vm = Vm(timeout=0.2)
    vm.init_program(instructions)
    vm.init_program(instructions)

    assert vm.execute() == 3


def test_received_values_land_in_registers():
    instructions = [
        Snd(Number(1)),
        Snd(Number(2)),
        Snd(Register("p")),
        Rcv("a"),
        Rcv("b"),
        Rcv("c"),
        Rcv("d"),
    ]

    vm = Vm(timeout=0.2)
    vm.init_program(instructions)
    vm.init_program(instructions)
    vm.execute()

    first, second = vm.programs
    assert [first.registers[r] for r in "abc"] == [1, 2, 1]
    assert [second.registers[r] for r in "abc"] == [1, 2, 0]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("snd 1", Snd(Number(1))),
        ("set a 5", Set("a", Number(5))),
        ("add b a", Add("b", Register("a"))),
        ("mul p -3", Mul("p", Number(-3))),
        ("mod a 7", Mod("a", Number(7))),
        ("rcv d", Rcv("d")),
        ("jgz a -1", Jgz(Register("a"), Number(-1))),
    ],
)
def test_parse_instruction(text, expected):
    assert parse_instruction(text) == expected


@pytest.mark.parametrize("text", ["", "foo a", "set", "set a", "jgz 1", "snd"])
def test_parse_invalid_instruction(text):
    with pytest.raises(InstructionParseError):
        parse_instruction(text)


def test_parse_value():
    assert parse_value("-17") == Number(-17)
    assert parse_value("xyz") == Register("x")


def test_parse_empty_value_raises():
    with pytest.raises(InstructionParseError):
        parse_value("")


def test_p_register_holds_pid():
    assert Program(0, [Snd(Number(1))]).value_of(Register("p")) == 0
    assert Program(1, [Snd(Number(1))]).value_of(Register("p")) == 1


def test_arithmetic_and_remainder_sign():
    program = Program(0, [Set("a", Number(-7)), Mod("a", Number(3)), Mul("a", Number(4))])
    assert program.execute() == 0
    assert program.value_of(Register("a")) == -4


def test_jgz_loops_until_zero():
    program = Program(
        0,
        [
            Set("a", Number(3)),
            Snd(Register("a")),
            Add("a", Number(-1)),
            Jgz(Register("a"), Number(-2)),
        ],
    )
    assert program.execute() == 3


def test_receive_timeout_ends_program():
    program = Program(0, [Snd(Number(5)), Rcv("a"), Snd(Number(6))], timeout=0.05)
    assert program.execute() == 1


def test_mod_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Program(0, [Mod("a", Number(0))]).execute()


def test_empty_program_raises():
    with pytest.raises(ValueError):
        Program(0, []).execute()