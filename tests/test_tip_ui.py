"""Tests for the window's event handlers, driven through fake tk variables."""

from regression_tip_checks import _active_preset, _make_app, _type, run_regressions
from tip_engine import TipCalculatorEngine, compute
from tip_ui import TipCalculatorApp, format_summary


def test_format_summary():
    assert format_summary(compute("50", 15)) == ("Tip: $7.50", "Total Bill: $57.50")
    assert format_summary(compute("", 20)) == ("Tip: $0.00", "Total Bill: $0.00")


def test_initial_render():
    app = _make_app()
    assert app.tip_var.get() == "Tip: $0.00"
    assert app.total_var.get() == "Total Bill: $0.00"
    assert _active_preset(app) == 15


def test_keypad_updates_field_and_totals():
    app = _make_app()
    _type(app, ["5", "0"])
    assert app.amount_var.get() == "50"
    assert app.engine.amount == "50"
    assert app.tip_var.get() == "Tip: $7.50"
    assert app.total_var.get() == "Total Bill: $57.50"


def test_delete_key():
    app = _make_app()
    _type(app, ["1", "0", "x"])
    assert app.amount_var.get() == "1"


def test_preset_selection_highlights_one_button():
    app = _make_app()
    app._select_tip(18)
    on = TipCalculatorApp.C["preset_on"]
    off = TipCalculatorApp.C["preset_off"]
    assert app._preset_buttons[18].options["bg"] == on
    assert app._preset_buttons[15].options["bg"] == off
    assert app._preset_buttons[20].options["bg"] == off


def test_field_edit_flows_into_engine():
    app = _make_app()
    app.amount_var.set("80")
    assert app.engine.amount == "80"
    assert app.tip_var.get() == "Tip: $12.00"


def test_confirm_and_clear():
    app = _make_app()
    _type(app, ["4", "2", "<-"])
    assert app.amount_var.get() == "42"
    app._select_tip(20)
    app._clear()
    assert app.amount_var.get() == ""
    assert _active_preset(app) == 15


def test_uses_given_engine():
    engine = TipCalculatorEngine()
    engine.amount = "10"
    app = _make_app(engine)
    assert app.amount_var.get() == "10"
    assert app.tip_var.get() == "Tip: $1.50"


def test_regression_script_passes(capsys):
    run_regressions()
    assert "All regression checks passed." in capsys.readouterr().out
