"""Operaciones binarias y formato numérico de la calculadora básica.

El resultado de una operación es un valor etiquetado: ``Success`` con el
número calculado o ``Failure`` con el tipo de error. El formato del
resultado sólo se aplica a la rama de éxito.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union


ERROR_TEXT = "Error"
RESULT_FRACTION_DIGITS = 12
PLAIN_INTEGER_LIMIT = 1e21
PLAIN_DECIMAL_MIN = 1e-6


class Operator(Enum):
    """Operación binaria pendiente, identificada por su símbolo."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol) -> Operator | None:
        """Devuelve el operador del símbolo (admite × ÷ −) o ``None``."""
        if isinstance(symbol, cls):
            return symbol
        return _SYMBOLS.get(symbol)


_SYMBOLS = {op.value: op for op in Operator}
_SYMBOLS.update({
    "\u00D7": Operator.MULTIPLY,   # ×
    "\u00F7": Operator.DIVIDE,     # ÷
    "\u2212": Operator.SUBTRACT,   # −
})


class ErrorKind(Enum):
    DIVIDE_BY_ZERO = "divide_by_zero"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class Success:
    value: float


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind


EvaluationResult = Union[Success, Failure]


# ── Operandos ────────────────────────────────────────────────────

def parse_operand(text: str | None) -> float | None:
    """Convierte el texto a float; ``None`` si no es un número finito."""
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


# ── Evaluación ───────────────────────────────────────────────────

def apply_operator(op: Operator, left: float, right: float) -> EvaluationResult:
    if op is Operator.ADD:
        value = left + right
    elif op is Operator.SUBTRACT:
        value = left - right
    elif op is Operator.MULTIPLY:
        value = left * right
    elif op is Operator.DIVIDE:
        if right == 0:
            return Failure(ErrorKind.DIVIDE_BY_ZERO)
        value = left / right
    else:
        raise ValueError(f"Operador desconocido: {op!r}")

    if not math.isfinite(value):
        return Failure(ErrorKind.OVERFLOW)
    return Success(value)


# ── Formato ──────────────────────────────────────────────────────

def format_number(value: float) -> str:
    """Conversión por defecto de número a texto.

    Los valores enteros se muestran sin parte fraccionaria ("1", no "1.0").
    Entre 1e-6 y 1e21 se usa notación posicional con los dígitos más cortos
    que reproducen el valor ("0.00001", no "1e-05"); fuera de ese rango,
    notación exponencial sin ceros de relleno ("1e-7", "1.5e+21").
    """
    if not math.isfinite(value):
        return repr(value)
    if value == int(value) and abs(value) < PLAIN_INTEGER_LIMIT:
        return str(int(value))

    text = repr(value)
    if PLAIN_DECIMAL_MIN <= abs(value) < PLAIN_INTEGER_LIMIT:
        return format(Decimal(text), "f")

    mantissa, _, exponent = text.partition("e")
    if not exponent:
        return text
    return f"{mantissa}e{int(exponent):+d}"


def format_result(value: float) -> str:
    """Texto de un resultado sin artefactos de coma flotante.

    Si la conversión por defecto tiene punto decimal, se redondea a 12
    decimales y se eliminan los ceros finales (0.1 + 0.2 -> "0.3").
    """
    text = format_number(value)
    if "." not in text:
        return text

    text = f"{value:.{RESULT_FRACTION_DIGITS}f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def render(result: EvaluationResult) -> str:
    if isinstance(result, Failure):
        return ERROR_TEXT
    return format_result(result.value)
