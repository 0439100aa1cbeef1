import pytest

from advent2017.day10 import dense_hash, knot_hash, main


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"", "a2582a3a0e66e6e86e3812dcb672a272"),
        (b"AoC 2017", "33efeb34ea91902bb2f59c9920caa6cd"),
        (b"1,2,3", "3efbe78a8d82f29979031a4aa0b16a9d"),
        (b"1,2,4", "63960835bcdc130f0b66d7ff4f6a5a8e"),
    ],
)
def test_knot_hash(data, expected):
    assert knot_hash(data) == expected


def test_text_and_bytes_agree():
    assert knot_hash("AoC 2017") == "33efeb34ea91902bb2f59c9920caa6cd"


def test_dense_hash_is_sixteen_bytes():
    digest = dense_hash(b"1,2,3")
    assert len(digest) == 16
    assert digest.hex() == "3efbe78a8d82f29979031a4aa0b16a9d"


def test_main_strips_input(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("1,2,4\n")
    main([str(path)])
    assert capsys.readouterr().out.strip() == "Hash: 63960835bcdc130f0b66d7ff4f6a5a8e"