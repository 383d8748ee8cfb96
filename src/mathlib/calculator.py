"""Stateless integer arithmetic."""

from __future__ import annotations

from mathlib.exceptions import DivisionByZeroError


class Calculator:
    """Four arithmetic operations over integers.

    All methods are static and side-effect free, so a single ``Calculator``
    (or the class itself) can be shared between threads without locking.

    Examples:
        >>> Calculator.add(10, 5)
        15
        >>> Calculator.divide(10, 5)
        2.0
    """

    @staticmethod
    def add(a: int, b: int) -> int:
        """Return ``a + b``."""
        return a + b

    @staticmethod
    def subtract(a: int, b: int) -> int:
        """Return ``a - b``."""
        return a - b

    @staticmethod
    def multiply(a: int, b: int) -> int:
        """Return ``a * b``.

        Python integers are arbitrary precision, so the product never wraps.
        """
        return a * b

    @staticmethod
    def divide(a: int, b: int) -> float:
        """Return ``a / b`` as a float.

        Args:
            a: Dividend
            b: Divisor

        Returns:
            The true quotient of a and b

        Raises:
            DivisionByZeroError: If b is zero
        """
        if b == 0:
            raise DivisionByZeroError("Division by zero")
        return a / b
