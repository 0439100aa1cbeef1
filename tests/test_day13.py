import pytest

from advent2017.day13 import Firewall


@pytest.fixture
def firewall():
    fw = Firewall()
    fw.add_layer(0, 3)
    fw.add_layer(1, 2)
    fw.add_layer(4, 4)
    fw.add_layer(6, 4)
    return fw


def test_calculate_trip_severity(firewall):
    assert firewall.trip_severity() == 24


def test_calculate_delay_for_safe_trip(firewall):
    assert firewall.safe_trip_delay() == 10


def test_parsed_layers_give_same_results():
    fw = Firewall()
    for line in ["0: 3", "1: 2", "4: 4", "6: 4"]:
        fw.parse_layer(line)
    assert fw.trip_severity() == 24
    assert fw.safe_trip_delay() == 10


def test_empty_firewall_is_safe():
    fw = Firewall()
    assert fw.trip_severity() == 0
    assert fw.safe_trip_delay() == 0


def test_invalid_range_raises():
    with pytest.raises(ValueError):
        Firewall().add_layer(0, 1)


def test_parse_missing_range_raises():
    with pytest.raises(ValueError):
        Firewall().parse_layer("3:")