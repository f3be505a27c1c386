"""Punto de entrada de la calculadora de propinas."""

import logging
import tkinter as tk

from tip_engine import TIP_PRESETS, TipCalculatorEngine
from tip_ui import TipCalculatorApp


WINDOW_GEOMETRY = "380x620"
WINDOW_MIN_SIZE = (340, 560)
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)
    engine = TipCalculatorEngine(presets=TIP_PRESETS)
    TipCalculatorApp(root, engine=engine)
    root.mainloop()


if __name__ == "__main__":
    main()
