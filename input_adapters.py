"""Traducción de teclas, botones y guiones de texto a comandos del motor.

Todas las fuentes de entrada pasan por ``dispatch``; el motor no sabe si
el comando vino de un clic, del teclado o de un guion.
"""

from __future__ import annotations

from enum import Enum

from calculator_engine import DIGITS, CalculatorEngine
from operations import Operator


class Command(Enum):
    DIGIT = "digit"
    DECIMAL_POINT = "decimal_point"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    TOGGLE_SIGN = "toggle_sign"
    PERCENT = "percent"
    BACKSPACE = "backspace"


# (comando, argumento)
Action = tuple[Command, "str | Operator | None"]


def dispatch(engine: CalculatorEngine, command: Command, argument=None) -> str:
    """Ejecuta un comando sobre el motor y devuelve el texto a mostrar."""
    if command is Command.DIGIT:
        return engine.input_digit(argument)
    if command is Command.DECIMAL_POINT:
        return engine.input_decimal_point()
    if command is Command.OPERATOR:
        return engine.set_operator(argument)
    if command is Command.EQUALS:
        return engine.evaluate()
    if command is Command.CLEAR:
        return engine.clear()
    if command is Command.TOGGLE_SIGN:
        return engine.toggle_sign()
    if command is Command.PERCENT:
        return engine.percent()
    if command is Command.BACKSPACE:
        return engine.backspace()
    raise ValueError(f"Comando desconocido: {command!r}")


# ═════════════════════════════════════════════════════════════════
#  Teclado
# ═════════════════════════════════════════════════════════════════

# keysym de Tk -> acción; se consulta antes que el carácter
KEYSYM_ACTIONS: dict[str, Action] = {
    "Return":      (Command.EQUALS, None),
    "KP_Enter":    (Command.EQUALS, None),
    "BackSpace":   (Command.BACKSPACE, None),
    "Escape":      (Command.CLEAR, None),
    "Delete":      (Command.BACKSPACE, None),
    "F9":          (Command.TOGGLE_SIGN, None),
    "KP_Add":      (Command.OPERATOR, Operator.ADD),
    "KP_Subtract": (Command.OPERATOR, Operator.SUBTRACT),
    "KP_Multiply": (Command.OPERATOR, Operator.MULTIPLY),
    "KP_Divide":   (Command.OPERATOR, Operator.DIVIDE),
    "KP_Decimal":  (Command.DECIMAL_POINT, None),
}

CHAR_ACTIONS: dict[str, Action] = {
    ".": (Command.DECIMAL_POINT, None),
    "=": (Command.EQUALS, None),
    "%": (Command.PERCENT, None),
}


def command_for_key(char: str = "", keysym: str = "") -> Action | None:
    """Acción de una pulsación de teclado, o ``None`` si no se usa."""
    if keysym in KEYSYM_ACTIONS:
        return KEYSYM_ACTIONS[keysym]

    if not char:
        return None
    if char in DIGITS:
        return Command.DIGIT, char
    if char in CHAR_ACTIONS:
        return CHAR_ACTIONS[char]

    op = Operator.from_symbol(char)
    if op is not None:
        return Command.OPERATOR, op
    return None


# ═════════════════════════════════════════════════════════════════
#  Botones
# ═════════════════════════════════════════════════════════════════

BUTTON_ACTIONS: dict[str, Action] = {
    "dot":       (Command.DECIMAL_POINT, None),
    "equals":    (Command.EQUALS, None),
    "clear":     (Command.CLEAR, None),
    "sign":      (Command.TOGGLE_SIGN, None),
    "percent":   (Command.PERCENT, None),
    "backspace": (Command.BACKSPACE, None),
}


def command_for_action(action: str) -> Action:
    """Convierte la acción de un botón ("digit:7", "op:+", "clear"...)."""
    if action.startswith("digit:"):
        digit = action[6:]
        if digit in DIGITS:
            return Command.DIGIT, digit
    elif action.startswith("op:"):
        op = Operator.from_symbol(action[3:])
        if op is not None:
            return Command.OPERATOR, op
    elif action in BUTTON_ACTIONS:
        return BUTTON_ACTIONS[action]

    raise ValueError(f"Acción de botón desconocida: {action}")


# ═════════════════════════════════════════════════════════════════
#  Guiones de texto
# ═════════════════════════════════════════════════════════════════

SCRIPT_ACTIONS: dict[str, Action] = {
    "C": (Command.CLEAR, None),
    "c": (Command.CLEAR, None),
    "~": (Command.TOGGLE_SIGN, None),
    "<": (Command.BACKSPACE, None),
}


def parse_script(text: str) -> list[Action]:
    """Convierte un guion compacto como ``"2+3*4="`` en comandos.

    Además de las teclas normales admite ``C`` (borrar), ``~`` (signo)
    y ``<`` (retroceso). Los espacios se ignoran.

    Raises:
        ValueError: carácter sin comando asociado.
    """
    actions: list[Action] = []
    for position, char in enumerate(text):
        if char.isspace():
            continue
        action = SCRIPT_ACTIONS.get(char) or command_for_key(char)
        if action is None:
            raise ValueError(
                f"Carácter no válido en la posición {position}: {char!r}"
            )
        actions.append(action)
    return actions


def run_script(engine: CalculatorEngine, text: str) -> list[str]:
    """Ejecuta el guion y devuelve el visor tras cada comando."""
    return [dispatch(engine, command, argument)
            for command, argument in parse_script(text)]
