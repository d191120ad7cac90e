# tests/test_input_router.py
import pytest
from core.input_router import InputRouter
from core.interfaces import Heading

@pytest.mark.parametrize("current", list(Heading))
def test_reversal_is_ignored(current):
    r = InputRouter(current)
    assert r.on_direction(current.opposite, current) is False
    assert r.pending is current

def test_last_valid_input_wins():
    r = InputRouter(Heading.RIGHT)
    assert r.on_direction(Heading.UP, Heading.RIGHT)
    assert r.on_direction(Heading.DOWN, Heading.RIGHT)
    assert r.pending is Heading.DOWN

def test_reversal_judged_against_applied_heading_not_pending():
    r = InputRouter(Heading.RIGHT)
    r.on_direction(Heading.UP, Heading.RIGHT)
    # LEFT reverses the applied RIGHT even though UP is pending
    assert r.on_direction(Heading.LEFT, Heading.RIGHT) is False
    assert r.pending is Heading.UP

@pytest.mark.parametrize("junk", [None, "up", 3, (0, -1)])
def test_non_heading_input_ignored(junk):
    r = InputRouter(Heading.RIGHT)
    assert r.on_direction(junk, Heading.RIGHT) is False
    assert r.pending is Heading.RIGHT

def test_reset():
    r = InputRouter(Heading.RIGHT)
    r.on_direction(Heading.DOWN, Heading.RIGHT)
    r.reset(Heading.RIGHT)
    assert r.pending is Heading.RIGHT
