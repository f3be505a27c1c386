"""
Interfaz gráfica de la calculadora de propinas.

Usa tkinter. Todo el cálculo es inmediato y se hace en el hilo de la
interfaz: cada tecla o porcentaje vuelve a derivar propina y total.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from amount_editor import KEYPAD
from tip_engine import TipCalculatorEngine, TipResult

logger = logging.getLogger(__name__)


def format_summary(result: TipResult) -> tuple[str, str]:
    """Textos de propina y total tal como se muestran en pantalla."""
    return (f"Tip: ${result.tip_text}", f"Total Bill: ${result.total_text}")


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class TipCalculatorApp:
    """Ventana principal de la calculadora de propinas."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":          "#FFFFFF",
        "title_bg":    "#000000",
        "title_fg":    "#FFFFFF",
        "summary_fg":  "#000000",
        "label_fg":    "#555555",
        "underline":   "#00FF00",
        "preset_on":   "#1EB980",
        "preset_off":  "#000000",
        "preset_fg":   "#FFFFFF",
        "keypad_bg":   "#CCCCCC",
        "num":         "#FFFFFF",
        "num_fg":      "#000000",
        "special":     "#B0B0B0",
        "special_fg":  "#000000",
        "confirm":     "#0000FF",
        "confirm_fg":  "#FFFFFF",
    }

    # Etiquetas con símbolo para las teclas que no son dígitos
    KEY_GLYPHS = {
        "sp": "\u2423",   # ␣ espacio
        "x":  "\u232B",   # ⌫ borrar
        "-":  "\u2212",   # − menos
        "<-": "\u2713",   # ✓ confirmar
    }

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Tip Calculator")
        self.root.configure(bg=self.C["bg"])

        self.engine = engine if engine is not None else TipCalculatorEngine()
        self._preset_buttons: dict[int, tk.Button] = {}

        self._init_fonts()
        self._create_title_bar()
        self._create_summary()
        self._create_amount_field()
        self._create_presets()
        self._create_keypad()
        self._bind_keyboard()

        self._refresh()
        self.amount_entry.focus_set()
        logger.info("Calculadora de propinas iniciada")

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_title   = tkfont.Font(family="Segoe UI", size=20)
        self._f_summary = tkfont.Font(family="Segoe UI", size=15)
        self._f_amount  = tkfont.Font(family="Segoe UI", size=16)
        self._f_label   = tkfont.Font(family="Segoe UI", size=10)
        self._f_preset  = tkfont.Font(family="Segoe UI", size=13)
        self._f_key     = tkfont.Font(family="Segoe UI", size=18)

    # ── Barra de título ──────────────────────────────────────────

    def _create_title_bar(self):
        frame = tk.Frame(self.root, bg=self.C["title_bg"], padx=20, pady=8)
        frame.pack(fill="x")
        tk.Label(
            frame, text="Tip Calculator", font=self._f_title,
            bg=self.C["title_bg"], fg=self.C["title_fg"], anchor="w",
        ).pack(fill="x")

    # ── Propina y total ──────────────────────────────────────────

    def _create_summary(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="x", padx=16, pady=(18, 4))

        self.tip_var = tk.StringVar()
        self.total_var = tk.StringVar()

        inner = tk.Frame(frame, bg=self.C["bg"])
        inner.pack()
        style = dict(font=self._f_summary, bg=self.C["bg"],
                     fg=self.C["summary_fg"])
        tk.Label(inner, textvariable=self.tip_var, **style).pack(side="left")
        tk.Label(inner, text=", ", **style).pack(side="left")
        tk.Label(inner, textvariable=self.total_var, **style).pack(side="left")

    # ── Campo del importe ────────────────────────────────────────

    def _create_amount_field(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="x", padx=32, pady=(8, 0))

        tk.Label(
            frame, text="Enter Amount", font=self._f_label,
            bg=self.C["bg"], fg=self.C["label_fg"], anchor="w",
        ).pack(fill="x")

        # Campo editable: el teclado físico también escribe en el importe
        self.amount_var = tk.StringVar(value=self.engine.amount)
        self.amount_entry = tk.Entry(
            frame, textvariable=self.amount_var, font=self._f_amount,
            bg=self.C["bg"], relief="flat", bd=0,
        )
        self.amount_entry.pack(fill="x", pady=(2, 0))
        self.amount_var.trace_add("write", self._on_amount_edited)

        # Subrayado verde
        tk.Frame(frame, bg=self.C["underline"], height=2).pack(fill="x")

    # ── Botones de porcentaje ────────────────────────────────────

    def _create_presets(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="x", padx=30, pady=16)

        for col, percent in enumerate(self.engine.presets):
            frame.columnconfigure(col, weight=1, uniform="preset")
            btn = tk.Button(
                frame, text=f"{percent}%", font=self._f_preset,
                fg=self.C["preset_fg"], activeforeground=self.C["preset_fg"],
                relief="flat", cursor="hand2",
                command=lambda p=percent: self._select_tip(p),
            )
            btn.grid(row=0, column=col, sticky="nsew", ipady=8)
            self._preset_buttons[percent] = btn

    # ── Teclado numérico ─────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["keypad_bg"])
        frame.pack(side="bottom", fill="both", expand=True)

        for c in range(max(len(row) for row in KEYPAD)):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(KEYPAD):
            for c, (label, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=self.KEY_GLYPHS.get(label, label),
                    font=self._f_key,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=c, sticky="nsew", padx=1, pady=1,
                         ipady=6)
            frame.rowconfigure(r, weight=1)

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.amount_entry.bind("<Return>", lambda _e: self._on_key("confirm"))
        self.amount_entry.bind("<KP_Enter>", lambda _e: self._on_key("confirm"))
        self.root.bind("<Escape>", lambda _e: self._clear())

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, action: str):
        amount = self.engine.press(action)
        if amount != self.amount_var.get():
            self.amount_var.set(amount)
        self.amount_entry.icursor(tk.END)
        self.amount_entry.focus_set()
        self._refresh()

    def _on_amount_edited(self, *_args):
        self.engine.amount = self.amount_var.get()
        self._refresh()

    def _select_tip(self, percent: int):
        self.engine.select_percentage(percent)
        self._refresh()
        self.amount_entry.focus_set()

    def _clear(self):
        self.engine.clear()
        self.amount_var.set(self.engine.amount)
        self._refresh()

    # ── Valores derivados ────────────────────────────────────────

    def _refresh(self):
        tip_text, total_text = format_summary(self.engine.result())
        self.tip_var.set(tip_text)
        self.total_var.set(total_text)

        active = self.engine.tip_percentage
        for percent, btn in self._preset_buttons.items():
            color = self.C["preset_on"] if percent == active else self.C["preset_off"]
            btn.config(bg=color, activebackground=color)
