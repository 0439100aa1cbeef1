import pytest

from advent2017.day07 import Program, ProgramParseError, Tower, main

EXAMPLE = [
    "pbga (66)",
    "xhth (57)",
    "ebii (61)",
    "havc (66)",
    "ktlj (57)",
    "fwft (72) -> ktlj, cntj, xhth",
    "qoyq (66)",
    "padx (45) -> pbga, havc, qoyq",
    "tknk (41) -> ugml, padx, fwft",
    "jptl (61)",
    "ugml (68) -> gyxo, ebii, jptl",
    "gyxo (61)",
    "cntj (57)",
]


@pytest.fixture
def tower():
    result = Tower()
    for line in EXAMPLE:
        result.add(Program.parse(line))
    return result


def test_parse_empty_string():
    with pytest.raises(ProgramParseError):
        Program.parse("")


def test_parse_name_only():
    with pytest.raises(ProgramParseError):
        Program.parse("abcd")


def test_parse_simple_program():
    assert Program.parse("abcd (10)") == Program("abcd", 10, ())


def test_parse_program_with_one_child():
    assert Program.parse("abcd (10) -> eeee") == Program("abcd", 10, ("eeee",))


def test_parse_program_with_many_children():
    assert Program.parse("abcd (10) -> eeee, xyzw, ijkl") == Program(
        "abcd", 10, ("eeee", "xyzw", "ijkl")
    )


def test_parse_bad_weight_is_zero():
    assert Program.parse("abcd (x)").weight == 0


def test_program_str_is_name():
    assert str(Program("abcd", 10)) == "abcd"


def test_find_head_of_tower(tower):
    assert tower.head().name == "tknk"


def test_find_balanced_weight(tower):
    assert tower.balanced_weight() == 60


def test_subtower_weight(tower):
    assert tower.get("ugml").subtower_weight(tower) == 251


def test_get_missing_program(tower):
    assert tower.get("nope") is None


def test_missing_child_raises():
    tower = Tower()
    tower.add(Program.parse("abcd (10) -> gone"))
    with pytest.raises(KeyError):
        tower.get("abcd").subtower_weight(tower)


def test_empty_tower():
    tower = Tower()
    assert tower.head() is None
    assert tower.balanced_weight() == 0


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n\n")
    main([str(path)])
    out = capsys.readouterr().out
    assert "Head of tower: tknk" in out
    assert "Balanced weight: 60" in out