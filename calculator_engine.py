"""
Motor de cálculo para la calculadora básica.

Este módulo provee la clase CalculatorEngine, una máquina de estados que
consume comandos abstractos (dígito, punto decimal, operador, igual,
borrar, cambio de signo, porcentaje, retroceso) y devuelve el texto a
mostrar después de cada uno. No depende de ninguna interfaz gráfica:
los adaptadores de entrada traducen teclas y botones a estos comandos.

Contrato de interfaz:
    - clear() / input_digit(d) / input_decimal_point() / set_operator(op)
      toggle_sign() / percent() / backspace() / evaluate()  -> str
    - display: propiedad de solo lectura con el texto actual
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from operations import (
    ERROR_TEXT,
    Operator,
    apply_operator,
    format_number,
    parse_operand,
    render,
)


DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class CalculatorState:
    current: str
    previous: Optional[str]
    operator: Optional[Operator]
    just_evaluated: bool
    display: str


class CalculatorEngine:
    """Calculadora de cuatro operaciones con evaluación de izquierda a derecha."""

    def __init__(self, display_sink: Callable[[str], None] | None = None):
        self._display_sink = display_sink
        self._current = "0"
        self._previous: str | None = None
        self._operator: Operator | None = None
        self._just_evaluated = False
        self._display = "0"

    # ── Lectura de estado ────────────────────────────────────────

    @property
    def display(self) -> str:
        return self._display

    @property
    def current(self) -> str:
        return self._current

    @property
    def previous(self) -> str | None:
        return self._previous

    @property
    def operator(self) -> Operator | None:
        return self._operator

    @property
    def just_evaluated(self) -> bool:
        return self._just_evaluated

    def snapshot(self) -> CalculatorState:
        return CalculatorState(
            current=self._current,
            previous=self._previous,
            operator=self._operator,
            just_evaluated=self._just_evaluated,
            display=self._display,
        )

    # ── Comandos ─────────────────────────────────────────────────

    def clear(self) -> str:
        self._current = "0"
        self._previous = None
        self._operator = None
        self._just_evaluated = False
        return self._show(self._current)

    def input_digit(self, digit: str) -> str:
        if digit not in DIGITS:
            return self._display

        if self._just_evaluated:
            self._current = digit
            self._just_evaluated = False
        elif self._current == "0":
            self._current = digit
        else:
            self._current += digit
        return self._show(self._current)

    def input_decimal_point(self) -> str:
        if self._just_evaluated:
            self._current = "0."
            self._just_evaluated = False
        elif "." not in self._current:
            self._current += "."
        return self._show(self._current)

    def set_operator(self, op) -> str:
        """Registra la operación pendiente.

        Si ya había una pendiente se evalúa primero, así que
        ``2 + 3 * 4`` da 20. El visor sigue mostrando el operando izquierdo
        mientras la entrada vuelve a "0".
        """
        op = Operator.from_symbol(op)
        if op is None:
            return self._display

        if self._operator is not None and not self._just_evaluated:
            self.evaluate()

        self._previous = self._current
        self._operator = op
        self._current = "0"
        self._just_evaluated = False
        return self._show(self._previous)

    def toggle_sign(self) -> str:
        if self._current in ("0", ERROR_TEXT):
            return self._display

        if self._current.startswith("-"):
            self._current = self._current[1:]
        else:
            self._current = "-" + self._current
        return self._show(self._current)

    def percent(self) -> str:
        value = parse_operand(self._current)
        if value is None:
            return self._display

        self._current = format_number(value / 100)
        return self._show(self._current)

    def backspace(self) -> str:
        if self._just_evaluated:
            # Tras "=" actúa como borrar entrada
            self._current = "0"
            self._just_evaluated = False
            return self._show(self._current)

        current = self._current
        if len(current) <= 1 or (len(current) == 2 and current.startswith("-")):
            self._current = "0"
        else:
            self._current = current[:-1]
        return self._show(self._current)

    def evaluate(self) -> str:
        if self._operator is None or self._previous is None:
            return self._display

        left = parse_operand(self._previous)
        right = parse_operand(self._current)
        if left is None or right is None:
            return self._display

        result = apply_operator(self._operator, left, right)
        self._current = render(result)
        self._previous = None
        self._operator = None
        self._just_evaluated = True
        return self._show(self._current)

    # ── Visor ────────────────────────────────────────────────────

    def _show(self, text: str) -> str:
        self._display = text
        if self._display_sink is not None:
            self._display_sink(text)
        return text
