"""
Motor de cálculo para la calculadora de propinas.

Este módulo provee la función compute() que deriva propina y total a
partir del importe escrito y del porcentaje elegido, y la clase
TipCalculatorEngine que guarda esas dos celdas de estado.

Contrato de interfaz:
    - compute(buffer: str, percentage: int) -> TipResult
    - TipCalculatorEngine.result() -> TipResult
    - tip_percentage: propiedad con valores en TIP_PRESETS
"""

from __future__ import annotations

import logging
import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import NamedTuple, Optional

import amount_editor

logger = logging.getLogger(__name__)

TIP_PRESETS = (15, 18, 20)
ZERO_TEXT = "0.00"

_CENT = Decimal("0.01")
# Cubre los 309 dígitos enteros del mayor float finito
_MONEY_CONTEXT = Context(prec=400)
_NUMBER_RE = re.compile(
    r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$"
)


class TipResult(NamedTuple):
    """Valores derivados de un estado; None si el importe no es un número."""

    amount: Optional[float]
    percentage: int
    tip: Optional[float]
    total: Optional[float]
    tip_text: str
    total_text: str


# ── Conversión y formato ─────────────────────────────────────────

def parse_amount(buffer: str) -> float | None:
    """Interpreta el búfer como número decimal en base 10.

    Devuelve None cuando el texto no es un número (vacío, dos puntos,
    espacios intermedios, "nan", "inf"...) o cuando desborda a infinito.
    """
    if not _NUMBER_RE.match(buffer):
        return None
    value = float(buffer)
    if not math.isfinite(value):
        return None
    return value


def format_money(value: float | None) -> str:
    """Formatea con dos decimales redondeando la mitad hacia arriba."""
    if value is None:
        return ZERO_TEXT
    # Decimal(float) es exacto: se redondea el valor binario real
    return str(Decimal(value).quantize(
        _CENT, rounding=ROUND_HALF_UP, context=_MONEY_CONTEXT
    ))


def compute(buffer: str, percentage: int) -> TipResult:
    """Calcula propina y total para el búfer y el porcentaje dados."""
    amount = parse_amount(buffer)
    if amount is None:
        return TipResult(None, percentage, None, None, ZERO_TEXT, ZERO_TEXT)

    tip = amount * percentage / 100
    total = tip + amount
    if not math.isfinite(total):
        # Importes cercanos al máximo de float desbordan al multiplicar
        return TipResult(amount, percentage, None, None, ZERO_TEXT, ZERO_TEXT)
    return TipResult(
        amount, percentage, tip, total, format_money(tip), format_money(total)
    )


# ═════════════════════════════════════════════════════════════════
#  Estado de la calculadora
# ═════════════════════════════════════════════════════════════════

class TipCalculatorEngine:
    """Guarda el importe escrito y el porcentaje de propina elegido."""

    def __init__(self, presets: tuple[int, ...] = TIP_PRESETS):
        if not presets:
            raise ValueError("Se necesita al menos un porcentaje")
        self._presets = tuple(presets)
        self._amount = ""
        self._tip_percentage = self._presets[0]

    # ── Propiedad: importe ───────────────────────────────────────

    @property
    def amount(self) -> str:
        return self._amount

    @amount.setter
    def amount(self, text: str):
        self._amount = text

    # ── Propiedad: porcentaje ────────────────────────────────────

    @property
    def presets(self) -> tuple[int, ...]:
        return self._presets

    @property
    def tip_percentage(self) -> int:
        return self._tip_percentage

    @tip_percentage.setter
    def tip_percentage(self, value: int):
        if value not in self._presets:
            raise ValueError(
                f"El porcentaje debe ser uno de {self._presets}, no {value!r}"
            )
        self._tip_percentage = value

    def select_percentage(self, value: int):
        self.tip_percentage = value
        logger.debug("Porcentaje seleccionado: %d%%", value)

    # ── Teclado ──────────────────────────────────────────────────

    def press(self, action: str) -> str:
        """Aplica la acción de una tecla al importe y lo devuelve."""
        if action == amount_editor.CONFIRM:
            logger.debug("Tecla confirmar: sin efecto")
        self._amount = amount_editor.apply_key(self._amount, action)
        logger.debug("Tecla %r -> importe %r", action, self._amount)
        return self._amount

    def clear(self):
        self._amount = ""
        self._tip_percentage = self._presets[0]

    # ── Valores derivados ────────────────────────────────────────

    def result(self) -> TipResult:
        return compute(self._amount, self._tip_percentage)
