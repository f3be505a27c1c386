from amount_editor import KEYPAD, keypad_actions
from tip_engine import TipCalculatorEngine
from tip_ui import TipCalculatorApp
import sys


class _FakeVar:
	def __init__(self, value=""):
		self.v = value
		self._callbacks = []

	def set(self, x):
		self.v = x
		for callback in self._callbacks:
			callback()

	def get(self):
		return self.v

	def trace_add(self, _mode, callback):
		self._callbacks.append(callback)


class _FakeEntry:
	def icursor(self, _):
		return None

	def focus_set(self):
		return None


class _FakeButton:
	def __init__(self):
		self.options = {}

	def config(self, **kw):
		self.options.update(kw)


class _DummyApp(TipCalculatorApp):
	def __init__(self):
		pass


def _make_app(engine: TipCalculatorEngine | None = None) -> _DummyApp:
	app = _DummyApp()
	app.engine = engine if engine is not None else TipCalculatorEngine()
	app.amount_var = _FakeVar(app.engine.amount)
	app.amount_var.trace_add("write", app._on_amount_edited)
	app.amount_entry = _FakeEntry()
	app.tip_var = _FakeVar()
	app.total_var = _FakeVar()
	app._preset_buttons = {p: _FakeButton() for p in app.engine.presets}
	app._refresh()
	return app


_LABEL_TO_ACTION = {
	label: action for row in KEYPAD for label, action, _kind in row
}


def _type(app: _DummyApp, labels: list[str]) -> None:
	for label in labels:
		app._on_key(_LABEL_TO_ACTION[label])


def _active_preset(app: _DummyApp) -> int | None:
	on = TipCalculatorApp.C["preset_on"]
	for percent, btn in app._preset_buttons.items():
		if btn.options.get("bg") == on:
			return percent
	return None


def inspect_keys(labels: list[str], *, tip: int = 15) -> None:
	"""Imprime el estado tras cada tecla pulsada."""
	app = _make_app()
	app._select_tip(tip)

	print("Key inspection")
	print(f"tip preset:     {tip}%")
	print(f"start:          {app.amount_var.get()!r} | {app.tip_var.get()} | {app.total_var.get()}")
	for i, label in enumerate(labels, start=1):
		_type(app, [label])
		print(f"  {i}. {label!r:>5} -> {app.amount_var.get()!r} | {app.tip_var.get()} | {app.total_var.get()}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	checks.append(("keypad has 16 keys", len(keypad_actions()) == 16))
	checks.append(("keypad keeps both decimal point keys", keypad_actions().count("insert:.") == 2))

	app = _make_app()
	checks.append(("starts on first preset", app.engine.tip_percentage == 15))
	checks.append(("first preset is highlighted", _active_preset(app) == 15))
	expected_actual.append(("empty buffer tip", "Tip: $0.00", app.tip_var.get()))
	expected_actual.append(("empty buffer total", "Total Bill: $0.00", app.total_var.get()))

	_type(app, ["5", "0"])
	expected_actual.append(("50 at 15% tip", "Tip: $7.50", app.tip_var.get()))
	expected_actual.append(("50 at 15% total", "Total Bill: $57.50", app.total_var.get()))

	app = _make_app()
	app._select_tip(20)
	checks.append(("empty buffer at 20% shows zero tip", app.tip_var.get() == "Tip: $0.00"))
	checks.append(("empty buffer at 20% shows zero total", app.total_var.get() == "Total Bill: $0.00"))
	checks.append(("20% preset is highlighted", _active_preset(app) == 20))

	app = _make_app()
	app._select_tip(18)
	_type(app, ["1", "0", "x"])
	expected_actual.append(("10 then delete", "1", app.amount_var.get()))
	expected_actual.append(("1 at 18% tip", "Tip: $0.18", app.tip_var.get()))
	expected_actual.append(("1 at 18% total", "Total Bill: $1.18", app.total_var.get()))

	app = _make_app()
	_type(app, ["1", "0", "0"])
	app._select_tip(18)
	tip_18, total_18 = app.tip_var.get(), app.total_var.get()
	app._select_tip(20)
	tip_20, total_20 = app.tip_var.get(), app.total_var.get()
	checks.append(("100 tip goes 18.00 -> 20.00", (tip_18, tip_20) == ("Tip: $18.00", "Tip: $20.00")))
	checks.append(("100 total goes 118.00 -> 120.00", (total_18, total_20) == ("Total Bill: $118.00", "Total Bill: $120.00")))

	app = _make_app()
	_type(app, ["x", "x"])
	checks.append(("delete on empty buffer is a no-op", app.amount_var.get() == ""))

	app = _make_app()
	_type(app, ["4", "2", "<-"])
	checks.append(("confirm key leaves buffer untouched", app.amount_var.get() == "42"))

	app = _make_app()
	_type(app, ["1", ".", "5", "."])
	expected_actual.append(("second decimal point is kept", "1.5.", app.amount_var.get()))
	checks.append(("malformed number falls back to zero", app.total_var.get() == "Total Bill: $0.00"))

	app = _make_app()
	_type(app, ["1", "sp", "2"])
	checks.append(("space key appends a space", app.amount_var.get() == "1 2"))
	checks.append(("inner space falls back to zero", app.tip_var.get() == "Tip: $0.00"))

	app = _make_app()
	_type(app, ["-", "2", "0"])
	expected_actual.append(("negative amount tip", "Tip: $-3.00", app.tip_var.get()))

	app = _make_app()
	app.amount_var.set("80")
	checks.append(("typing in the field updates the engine", app.engine.amount == "80"))
	checks.append(("typing in the field refreshes tip", app.tip_var.get() == "Tip: $12.00"))

	app = _make_app()
	_type(app, ["9", "9"])
	app._select_tip(20)
	app._clear()
	checks.append(("clear empties the buffer", app.amount_var.get() == ""))
	checks.append(("clear returns to the first preset", _active_preset(app) == 15))

	failed = [name for name, ok in checks if not ok]
	failed += [label for label, expected, actual in expected_actual if expected != actual]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_tip_checks.py
	#   python regression_tip_checks.py --inspect 1,0,x
	#   python regression_tip_checks.py --inspect 1,.,5,sp --tip 20
	if "--inspect" in sys.argv:
		try:
			keys = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key list after --inspect")

		labels = keys.split(",")
		unknown = [label for label in labels if label not in _LABEL_TO_ACTION]
		if unknown:
			raise SystemExit(f"Unknown keys: {', '.join(unknown)}")

		tip = 15
		if "--tip" in sys.argv:
			idx = sys.argv.index("--tip")
			try:
				tip = int(sys.argv[idx + 1])
			except (ValueError, IndexError):
				raise SystemExit("Invalid value for --tip")

		try:
			inspect_keys(labels, tip=tip)
		except ValueError as exc:
			raise SystemExit(str(exc))
	else:
		run_regressions()
