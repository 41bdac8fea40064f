import pytest

from pava.core.direction import Direction


def test_exactly_two_members():
    assert set(Direction) == {Direction.INCREASING, Direction.DECREASING}


def test_complement():
    assert Direction.INCREASING.complement() is Direction.DECREASING
    assert Direction.DECREASING.complement() is Direction.INCREASING
    for d in Direction:
        assert d.complement().complement() is d


def test_violates_is_strict():
    assert Direction.INCREASING.violates(2.0, 1.0)
    assert not Direction.INCREASING.violates(1.0, 2.0)
    assert not Direction.INCREASING.violates(1.0, 1.0)
    assert Direction.DECREASING.violates(1.0, 2.0)
    assert not Direction.DECREASING.violates(2.0, 1.0)
    assert not Direction.DECREASING.violates(1.0, 1.0)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("increasing", Direction.INCREASING),
        ("INC", Direction.INCREASING),
        (" Decreasing ", Direction.DECREASING),
        ("dec", Direction.DECREASING),
    ],
)
def test_parse(name, expected):
    assert Direction.parse(name) is expected


@pytest.mark.parametrize("name", ["equal", "", "up"])
def test_parse_rejects_unknown(name):
    with pytest.raises(ValueError):
        Direction.parse(name)
