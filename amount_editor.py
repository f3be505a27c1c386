"""Edición del importe escrito con el teclado de la calculadora de propinas.

El búfer es texto libre: no se valida que forme un número bien escrito.
Las funciones de este módulo son puras y nunca fallan con un búfer
cualquiera.
"""

INSERT_PREFIX = "insert:"
BACKSPACE = "backspace"
CONFIRM = "confirm"


# ── Teclado ──────────────────────────────────────────────────────
#  Cada fila es una lista de (etiqueta, acción, tipo_color)
#  tipo_color: "num", "special", "confirm"

KEYPAD = [
    [("1", "insert:1", "num"), ("2", "insert:2", "num"),
     ("3", "insert:3", "num"), ("-", "insert:-", "special")],

    [("4", "insert:4", "num"), ("5", "insert:5", "num"),
     ("6", "insert:6", "num"), ("sp", "insert: ", "special")],

    [("7", "insert:7", "num"), ("8", "insert:8", "num"),
     ("9", "insert:9", "num"), ("x", BACKSPACE, "special")],

    # El punto aparece dos veces y no hay tecla para borrarlo todo
    [(".", "insert:.", "num"), ("0", "insert:0", "num"),
     (".", "insert:.", "num"), ("<-", CONFIRM, "confirm")],
]


# ── Operaciones sobre el búfer ───────────────────────────────────

def append(buffer: str, key: str) -> str:
    """Añade los caracteres de ``key`` al final del búfer."""
    return buffer + key


def delete_last(buffer: str) -> str:
    """Quita el último carácter. Con el búfer vacío no hace nada."""
    return buffer[:-1]


def apply_key(buffer: str, action: str) -> str:
    """Aplica la acción de una tecla y devuelve el búfer resultante.

    Raises:
        ValueError: acción desconocida.
    """
    if action.startswith(INSERT_PREFIX):
        return append(buffer, action[len(INSERT_PREFIX):])
    if action == BACKSPACE:
        return delete_last(buffer)
    if action == CONFIRM:
        # Confirmar no modifica el estado
        return buffer
    raise ValueError(f"Acción de teclado desconocida: {action!r}")


def keypad_actions() -> list[str]:
    """Acciones del teclado en orden de lectura, fila por fila."""
    return [action for row in KEYPAD for _label, action, _kind in row]
