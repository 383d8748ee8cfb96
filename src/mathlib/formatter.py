"""Formatting of calculation results for console output."""

from __future__ import annotations

OPERATION_SYMBOLS: dict[str, str] = {
    "add": "+",
    "subtract": "-",
    "multiply": "*",
    "divide": "/",
}


def format_result(operation: str, a: int, b: int, result: int | float) -> str:
    """Format a calculation result as a human-readable line.

    Args:
        operation: The operation performed ('add', 'subtract', 'multiply', 'divide')
        a: First operand
        b: Second operand
        result: The calculation result

    Returns:
        A string of the form ``"<a> <symbol> <b> = <result>"``

    Examples:
        >>> format_result('add', 10, 5, 15)
        '10 + 5 = 15'
        >>> format_result('divide', 10, 5, 2.0)
        '10 / 5 = 2.0'
    """
    # Unknown operations fall back to their own name
    symbol = OPERATION_SYMBOLS.get(operation.lower(), operation)
    return f"{a} {symbol} {b} = {result}"
