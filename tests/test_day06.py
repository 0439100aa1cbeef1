import pytest

from advent2017.day06 import main, max_steps_and_cycle_length


def test_max_steps_and_cycle_length():
    blocks = [0, 2, 7, 0]
    assert max_steps_and_cycle_length(blocks) == (5, 4)
    assert blocks == [2, 4, 1, 2]


def test_total_blocks_preserved():
    blocks = [3, 1, 4, 1, 5, 9, 2, 6]
    max_steps_and_cycle_length(blocks)
    assert sum(blocks) == 31


def test_empty_blocks_rejected():
    with pytest.raises(ValueError):
        max_steps_and_cycle_length([])


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("0\t2\t7\t0\n")
    main([str(path)])
    out = capsys.readouterr().out
    assert "Max steps: 5" in out
    assert "Cycle length: 4" in out