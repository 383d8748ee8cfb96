"""Interface contract for arithmetic utilities."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CalculatorProtocol(Protocol):
    """Protocol defining the calculator interface."""

    def add(self, a: int, b: int) -> int:
        """Add two integers and return the result."""
        ...

    def subtract(self, a: int, b: int) -> int:
        """Subtract b from a and return the result."""
        ...

    def multiply(self, a: int, b: int) -> int:
        """Multiply two integers and return the result."""
        ...

    def divide(self, a: int, b: int) -> float:
        """Divide a by b and return the quotient as a float."""
        ...
