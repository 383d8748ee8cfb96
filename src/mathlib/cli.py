"""CLI interface for the calculator demonstration program."""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.console import Console

from mathlib import __version__
from mathlib.calculator import Calculator
from mathlib.config import DEFAULT_TITLE, DemoConfig
from mathlib.exceptions import DivisionByZeroError
from mathlib.formatter import format_result

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

DEFAULT_CONFIG_PATH = Path("mathlib-demo.yaml")


def _emit(line: str) -> None:
    console.print(line, markup=False, highlight=False)


def run_demo(a: int, b: int, title: str = DEFAULT_TITLE) -> list[str]:
    """Print the banner and the result of each operation on a and b.

    Division by zero is reported on stderr and does not stop the demo.

    Returns:
        The result lines that were printed, in order
    """
    _emit(title)
    _emit("=" * len(title))

    lines = [
        format_result("add", a, b, Calculator.add(a, b)),
        format_result("subtract", a, b, Calculator.subtract(a, b)),
        format_result("multiply", a, b, Calculator.multiply(a, b)),
    ]
    for line in lines:
        _emit(line)

    try:
        line = format_result("divide", a, b, Calculator.divide(a, b))
    except DivisionByZeroError as e:
        err_console.print(f"Error: {e}", markup=False, highlight=False)
    else:
        _emit(line)
        lines.append(line)

    return lines


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to config file (default: mathlib-demo.yaml)",
)
def main(config: str | None) -> None:
    """Print the results of add, subtract, multiply and divide.

    Operands default to 10 and 5 unless the config file overrides them.
    """
    config_path = Path(config) if config else DEFAULT_CONFIG_PATH
    try:
        cfg = DemoConfig.load(config_path)
    except (ValidationError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid config {config_path}: {e}") from e

    run_demo(cfg.a, cfg.b, cfg.title)


if __name__ == "__main__":
    main()
