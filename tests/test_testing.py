"""Tests for _testing.py — overridden and bypassed."""

import pytest

from liveoptions._kinds import INT
from liveoptions._providers import DynamicProperty
from liveoptions._state import OptionState
from liveoptions._testing import bypassed, overridden
from liveoptions._types import Option


@pytest.fixture
def state():
    return OptionState("pool.size", DynamicProperty(4), INT)


class TestOverridden:
    def test_sets_and_restores_unset(self, state):
        with overridden(state, "8") as active:
            assert active is state
            assert state.get_effective_value() == 8
        assert state.is_overridden() is False
        assert state.get_effective_value() == 4

    def test_restores_previous_directive(self, state):
        previous = Option.of("6")
        state.set_override(previous)
        with overridden(state, "8"):
            assert state.get_override_value() == 8
        assert state.get_override() is previous

    def test_inert(self, state):
        with overridden(state, None):
            assert state.is_overridden() is True
            assert state.get_effective_value() is None

    def test_restores_on_error(self, state):
        with pytest.raises(RuntimeError):
            with overridden(state, "8"):
                raise RuntimeError("boom")
        assert state.get_override() is None


class TestBypassed:
    def test_masks_override(self, state):
        state.set_override(Option.of("8"))
        with bypassed(state, "16"):
            assert state.get_effective_value() == 16
        assert state.get_effective_value() == 8
        assert state.is_bypassed() is False

    def test_nested_with_overridden(self, state):
        with overridden(state, "8"), bypassed(state, None):
            assert state.get_effective_value() is None
        assert state.get_effective_value() == 4
