"""Punto de entrada de la calculadora.

Uso:
    python main.py                      # ventana tkinter
    python main.py --script "2+3*4="    # ejecuta un guion y muestra el visor
"""

import logging
import os
import sys

from calculator_engine import CalculatorEngine
from input_adapters import parse_script, dispatch


WINDOW_GEOMETRY = "340x460"
WINDOW_MIN_SIZE = (300, 420)
LOG_LEVEL_ENV = "CALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging() -> logging.Logger:
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.WARNING)

    logger = logging.getLogger()
    logger.setLevel(level)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


def run_script_mode(script: str, out=None) -> str:
    """Ejecuta el guion sin interfaz; imprime el visor tras cada comando."""
    out = out if out is not None else sys.stdout
    try:
        actions = parse_script(script)
    except ValueError as exc:
        raise SystemExit(f"Guion inválido: {exc}") from exc

    engine = CalculatorEngine()
    for command, argument in actions:
        text = dispatch(engine, command, argument)
        label = command.name if argument is None else f"{command.name} {getattr(argument, 'value', argument)}"
        print(f"{label:<20} {text}", file=out)
    return engine.display


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()

    if "--script" in argv:
        try:
            script = argv[argv.index("--script") + 1]
        except IndexError:
            raise SystemExit("Missing script after --script")
        run_script_mode(script)
        return

    import tkinter as tk

    from calculator_ui import CalculatorApp

    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)
    CalculatorApp(root, engine=CalculatorEngine())
    root.mainloop()


if __name__ == "__main__":
    main()
