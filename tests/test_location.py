import dataclasses

import pytest

from limbo.location import LocatableValue, Location, indent


def test_location_str_format():
    assert str(Location("main.lb", 3, 7)) == "main.lb:3:7"


def test_locate_matches_str():
    loc = Location("a.lb", 10, 2)
    assert loc.locate() == str(loc)


def test_location_parts_in_order():
    loc = Location("prog", 4, 9)
    path, line, offset = str(loc).split(":")
    assert (path, int(line), int(offset)) == ("prog", 4, 9)


def test_location_equality_and_hash():
    assert Location("x", 1, 1) == Location("x", 1, 1)
    assert len({Location("x", 1, 1), Location("x", 1, 1)}) == 1
    assert Location("x", 1, 1) != Location("x", 1, 2)


def test_location_is_frozen():
    loc = Location("x", 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        loc.line = 5
    assert loc.line == 1
    assert str(loc) == "x:1:1"


def test_indent_levels():
    assert indent(0) == ""
    assert indent(1) == "    "
    assert indent(3) == indent(1) * 3


def test_locatable_value_locate_uses_location():
    loc = Location("f", 2, 5)
    lv = LocatableValue(1.0, loc)
    assert lv.locate() == str(loc)


def test_locatable_value_str_uses_value():
    lv = LocatableValue(True, Location("f", 1, 1))
    assert str(lv) == "true"
    assert str(LocatableValue("hello", Location("f", 1, 1))) == "hello"