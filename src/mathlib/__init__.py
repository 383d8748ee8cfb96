"""mathlib: a small arithmetic utility and its demonstration program.

Exposes four static integer operations on ``Calculator`` and a console
demo that prints their results for two operands.
"""

from mathlib.calculator import Calculator
from mathlib.exceptions import CalculatorError, DivisionByZeroError

__version__ = "0.1.0"

__all__ = ["Calculator", "CalculatorError", "DivisionByZeroError", "__version__"]
