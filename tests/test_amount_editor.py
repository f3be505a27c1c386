"""Tests for amount buffer editing and keypad actions."""

import pytest

from amount_editor import (
    BACKSPACE,
    CONFIRM,
    KEYPAD,
    append,
    apply_key,
    delete_last,
    keypad_actions,
)


def test_append_concatenates_in_order():
    buffer = ""
    for key in ["1", "2", ".", "5", " ", "-", "."]:
        buffer = append(buffer, key)
    assert buffer == "12.5 -."


def test_append_multi_character_key():
    assert append("1", "00") == "100"


def test_delete_last_on_empty_buffer():
    assert delete_last("") == ""
    assert delete_last(delete_last("")) == ""


@pytest.mark.parametrize("buffer", ["", "1", "12.5", "1..2", " -"])
@pytest.mark.parametrize("key", ["0", "9", ".", "-", " "])
def test_delete_undoes_single_character_append(buffer, key):
    assert delete_last(append(buffer, key)) == buffer


def test_apply_key_insert_and_backspace():
    assert apply_key("1", "insert:0") == "10"
    assert apply_key("10", BACKSPACE) == "1"
    assert apply_key("", BACKSPACE) == ""


def test_apply_key_space_action():
    assert apply_key("1", "insert: ") == "1 "


def test_confirm_is_a_no_op():
    assert apply_key("42", CONFIRM) == "42"
    assert apply_key("", CONFIRM) == ""


def test_unknown_action_raises():
    with pytest.raises(ValueError):
        apply_key("1", "equals")


def test_keypad_layout():
    """Four rows of four keys, duplicated decimal point included."""
    assert [len(row) for row in KEYPAD] == [4, 4, 4, 4]
    labels = [label for row in KEYPAD for label, _action, _kind in row]
    assert labels == [
        "1", "2", "3", "-",
        "4", "5", "6", "sp",
        "7", "8", "9", "x",
        ".", "0", ".", "<-",
    ]


def test_keypad_actions():
    actions = keypad_actions()
    assert len(actions) == 16
    assert actions.count("insert:.") == 2
    assert "insert: " in actions
    assert actions.count(BACKSPACE) == 1
    assert actions[-1] == CONFIRM
    for digit in "0123456789":
        assert f"insert:{digit}" in actions
