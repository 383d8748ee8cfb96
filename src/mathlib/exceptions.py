"""Exceptions raised by mathlib."""


class CalculatorError(Exception):
    """Base class for all mathlib errors."""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when dividing by a zero operand."""
