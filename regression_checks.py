from calculator_engine import CalculatorEngine
from input_adapters import dispatch, parse_script, run_script
import sys


def _final(script: str) -> str:
	displays = run_script(CalculatorEngine(), script)
	return displays[-1] if displays else "0"


def _walk(script: str):
	"""Devuelve (comando, visor, estado) para cada paso del guion."""
	engine = CalculatorEngine()
	steps = []
	for command, argument in parse_script(script):
		text = dispatch(engine, command, argument)
		steps.append((command, argument, text, engine.snapshot()))
	return engine, steps


def inspect_commands(script: str) -> None:
	"""Imprime el visor y el estado interno tras cada comando."""
	_, steps = _walk(script)

	print("Command inspection")
	print(f"script:         {script}")
	print(f"commands:       {len(steps)}")

	for i, (command, argument, text, state) in enumerate(steps, start=1):
		arg = "" if argument is None else f" {getattr(argument, 'value', argument)}"
		op = state.operator.value if state.operator is not None else "-"
		print(
			f"  {i:>2}. {command.name + arg:<18} display={text!r:<14}"
			f" current={state.current!r} previous={state.previous!r}"
			f" op={op} evaluated={state.just_evaluated}"
		)


def build_checks():
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	for script, expected in (
		("2+3*4=", "20"),
		(".1+.2=", "0.3"),
		("0.1+0.2=", "0.3"),
		("5/0=", "Error"),
		("10/4=", "2.5"),
		("2.5*2=", "5"),
		("1/3=", "0.333333333333"),
		("7-10=", "-3"),
		("50%", "0.5"),
		("0.001%", "0.00001"),
		("0.001%5", "0.000015"),
		("0.00002*0.5=", "0.00001"),
	):
		actual = _final(script)
		expected_actual.append((script, expected, actual))
		checks.append((f"{script} displays {expected}", actual == expected))

	checks.append(("digits keep leading-zero collapse", _final("00012") == "12"))
	checks.append(("second decimal point is ignored", _final("1..5") == "1.5"))
	checks.append(("clear after division by zero restores 0", _final("5/0=C") == "0"))
	checks.append(("digit after Error starts fresh", _final("5/0=7") == "7"))
	checks.append(("backspace after equals clears entry", _final("2+3=<") == "0"))
	checks.append(("digit after backspace-on-result starts fresh", _final("2+3=<4") == "4"))
	checks.append(("backspace on lone negative digit collapses", _final("5~<") == "0"))
	checks.append(("sign toggle on zero is no-op", _final("~") == "0"))
	checks.append(("double sign toggle restores entry", _final("12.5~~") == "12.5"))
	checks.append(("percent then equals without operator", _final("50%=") == "0.5"))
	checks.append(("operator keeps left operand on display", _final("8*") == "8"))
	checks.append(("chained operator shows folded result", _final("2+3*") == "5"))
	checks.append(("result feeds the next operation", _final("2+3=*4=") == "20"))
	checks.append(("equals with no operand pending is no-op", _final("9==") == "9"))

	engine, _ = _walk("1+2")
	other = CalculatorEngine()
	checks.append(("engines do not share state", other.display == "0" and engine.display == "2"))

	return checks, expected_actual


def run_regressions() -> None:
	checks, expected_actual = build_checks()

	failed = [name for name, ok in checks if not ok]
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
	#   python regression_checks.py
	#   python regression_checks.py --inspect "2+3*4="
	if "--inspect" in sys.argv:
		try:
			script = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing script after --inspect")

		try:
			inspect_commands(script)
		except ValueError as exc:
			raise SystemExit(str(exc))
	else:
		run_regressions()
