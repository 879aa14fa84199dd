"""Tests for the name list and per-item expansion state."""

import pytest

from codelab.app.state import GreetingsState, ItemState, make_names
from codelab.app.state.greeting_state import EXPANDED_TEXT, EXPANDED_TEXT_UNIT, expanded_text


class TestMakeNames:
    def test_default_has_thousand_names_in_order(self):
        names = make_names()
        assert len(names) == 1000
        assert names[0] == "0"
        assert names[5] == "5"
        assert names[-1] == "999"
        assert list(names) == [str(i) for i in range(1000)]

    def test_no_duplicates(self):
        names = make_names()
        assert len(set(names)) == len(names)

    def test_is_immutable_sequence(self):
        assert isinstance(make_names(3), tuple)

    def test_zero_is_empty(self):
        assert make_names(0) == ()

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            make_names(-1)


class TestItemState:
    @pytest.mark.parametrize("name", ["0", "42", "", "anything"])
    def test_starts_collapsed(self, name):
        assert ItemState(name).is_expanded is False

    @pytest.mark.parametrize("calls", range(6))
    def test_toggle_parity(self, calls):
        item = ItemState("7")
        for _ in range(calls):
            item.toggle()
        assert item.is_expanded == (calls % 2 == 1)

    def test_toggle_notifies(self, recorder):
        item = ItemState("1")
        item.expanded.listen(recorder)

        item.toggle()
        item.toggle()

        assert recorder.calls == 2

    def test_disposed_item_ignores_toggle(self):
        item = ItemState("1")
        item.dispose()
        item.toggle()
        assert item.is_expanded is False


class TestGreetingsState:
    def test_defaults_to_generated_names(self):
        greetings = GreetingsState()
        assert greetings.names == make_names()
        assert len(greetings) == 1000

    def test_item_is_stable(self):
        greetings = GreetingsState(make_names(10))
        assert greetings.item("3") is greetings.item("3")
        assert greetings.item_at(3) is greetings.item("3")

    def test_unknown_name_raises(self):
        greetings = GreetingsState(make_names(10))
        with pytest.raises(KeyError):
            greetings.item("10")

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError):
            GreetingsState(["a", "a"])

    def test_items_are_independent(self):
        greetings = GreetingsState(make_names(10))
        greetings.item("5").toggle()

        assert greetings.expanded_names() == ["5"]
        assert all(not item.is_expanded for item in greetings.items() if item.name != "5")

    def test_restored_flags(self):
        greetings = GreetingsState(make_names(10), expanded={"2": True, "4": False, "99": True})
        assert greetings.expanded_names() == ["2"]
        assert greetings.snapshot() == {"2": True, "4": False}

    def test_restore_in_place(self, recorder):
        greetings = GreetingsState(make_names(5))
        first = greetings.item("1")
        first.toggle()
        second = greetings.item("2")
        second.expanded.listen(recorder)

        greetings.restore({"2": True, "9": True})

        assert greetings.item("1") is first
        assert greetings.item("2") is second
        assert greetings.expanded_names() == ["2"]
        assert recorder.calls == 1

    def test_dispose_disposes_items(self):
        greetings = GreetingsState(make_names(3))
        items = greetings.items()
        greetings.dispose()
        for item in items:
            item.toggle()
        assert greetings.expanded_names() == []


def test_expanded_text_is_constant():
    assert EXPANDED_TEXT == EXPANDED_TEXT_UNIT * 4
    assert expanded_text() == EXPANDED_TEXT
    assert expanded_text(1) == "Composem ipsum color sit, padding theme elit, send do bouncy, "
