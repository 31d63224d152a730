from __future__ import annotations

from time_tiny.truthy import pick_truthy


def test_pick_truthy_returns_value_when_truthy():
    assert pick_truthy(7, 0) == 7


def test_pick_truthy_returns_alternate_when_falsey():
    assert pick_truthy(None, 0) == 0
    assert pick_truthy(0, 0) == 0


def test_pick_truthy_keeps_negative_numbers():
    assert pick_truthy(-3, 0) == -3
