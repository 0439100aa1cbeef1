from advent2017.day05 import main, number_of_steps, number_of_steps_with_decrease


def test_number_of_steps():
    offsets = [0, 3, 0, 1, -3]
    assert number_of_steps(offsets) == 5
    assert offsets == [2, 5, 0, 1, -2]


def test_number_of_steps_with_decrease():
    offsets = [0, 3, 0, 1, -3]
    assert number_of_steps_with_decrease(offsets) == 10
    assert offsets == [2, 3, 2, 3, -1]


def test_empty_offsets_take_no_steps():
    assert number_of_steps([]) == 0


def test_main_does_not_share_offsets(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("0\n3\n0\n1\n-3\n")
    main([str(path)])
    out = capsys.readouterr().out
    assert "Number of steps: 5" in out
    assert "Number of steps with decrease: 10" in out