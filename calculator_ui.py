"""
Interfaz gráfica de la calculadora básica.

Usa tkinter. Los botones y el teclado sólo traducen la entrada a comandos
(ver input_adapters); cada comando se ejecuta de forma síncrona y el
texto devuelto por el motor se muestra tal cual.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine
from input_adapters import command_for_action, command_for_key, dispatch


log = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════
#  Widget: visor del resultado
# ═════════════════════════════════════════════════════════════════

class ResultDisplay:
    """Entry de solo lectura que muestra el texto recibido sin formatearlo."""

    VISIBLE_CHARS = 17

    def __init__(self, parent, **kw):
        self._var = tk.StringVar(value="0")
        kw.setdefault("width", self.VISIBLE_CHARS + 1)
        self._entry = tk.Entry(parent, textvariable=self._var,
                               state="readonly", **kw)

    @property
    def widget(self):
        return self._entry

    # ── Texto ────────────────────────────────────────────────────

    def set_text(self, text: str):
        self._var.set(text)
        # Entradas largas: mantener visibles los últimos dígitos
        self._entry.after(10, self._scroll_to_end)

    def get_text(self) -> str:
        return self._var.get()

    def _scroll_to_end(self):
        self._entry.icursor(tk.END)
        self._entry.xview_moveto(1.0)


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#F38BA8",
        "op_fg":      "#1E1E2E",
        "func":       "#45475A",
        "func_fg":    "#CDD6F4",
        "special":    "#585B70",
        "special_fg": "#CDD6F4",
        "equals":     "#89B4FA",
        "equals_fg":  "#1E1E2E",
        "result_fg":  "#A6E3A1",
    }

    # ── Definiciones del teclado ──────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  tipo_color: "num", "op", "func", "special", "equals"

    KEYPAD = [
        [("AC", "clear",     "special"), ("\u232B", "backspace", "special"),
         ("%",  "percent",   "func"),    ("\u00F7", "op:/",      "op")],

        [("7",  "digit:7",   "num"), ("8", "digit:8", "num"),
         ("9",  "digit:9",   "num"), ("\u00D7", "op:*", "op")],

        [("4",  "digit:4",   "num"), ("5", "digit:5", "num"),
         ("6",  "digit:6",   "num"), ("\u2212", "op:-", "op")],

        [("1",  "digit:1",   "num"), ("2", "digit:2", "num"),
         ("3",  "digit:3",   "num"), ("+", "op:+",    "op")],

        [("\u00B1", "sign",  "func"), ("0", "digit:0", "num"),
         (".",  "dot",       "num"), ("=", "equals",  "equals")],
    ]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine()

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()

        self.result_display.set_text(self.engine.display)
        self.root.focus_set()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_result = tkfont.Font(family="Consolas", size=22, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=15)
        self._f_small  = tkfont.Font(family="Segoe UI", size=11)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        row = tk.Frame(frame, bg=self.C["display_bg"])
        row.pack(fill="x", pady=(2, 4))

        self.result_display = ResultDisplay(
            row,
            font=self._f_result, bg=self.C["display_bg"],
            fg=self.C["result_fg"],
            readonlybackground=self.C["display_bg"],
            relief="flat", justify="right", bd=0,
        )

        tk.Button(
            row, text="Copiar", font=self._f_small,
            bg=self.C["func"], fg=self.C["func_fg"],
            activebackground=self.C["special"], relief="flat",
            cursor="hand2", command=self._copy_result, padx=8,
        ).pack(side="right", padx=(6, 0))

        self.result_display.widget.pack(side="right")

    # ── Teclado numérico / operadores ────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        for c in range(len(self.KEYPAD[0])):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            for c, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"],
                    relief="flat",
                    command=lambda a=action: self._on_button(a),
                )
                btn.grid(row=r, column=c, sticky="nsew",
                         padx=2, pady=2, ipady=8)

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keypress)

    # ── Acciones ─────────────────────────────────────────────────

    def _on_button(self, action: str):
        command, argument = command_for_action(action)
        self._run(command, argument)

    def _on_keypress(self, event):
        action = command_for_key(event.char, event.keysym)
        if action is None:
            log.debug("Tecla ignorada: char=%r keysym=%s", event.char, event.keysym)
            return None
        self._run(*action)
        return "break"

    def _run(self, command, argument=None):
        text = dispatch(self.engine, command, argument)
        log.debug("%s %r -> %s", command.name, argument, text)
        self.result_display.set_text(text)

    # ── Copiar resultado ─────────────────────────────────────────

    def _copy_result(self):
        text = self.result_display.get_text()
        self.root.clipboard_clear()
        self.root.clipboard_append(text)
