"""Pydantic model for the demo's YAML configuration."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TITLE = "Calculator Example Application"


class DemoConfig(BaseModel):
    """Operands and banner for the demonstration program."""

    model_config = ConfigDict(extra="forbid")

    a: int = Field(default=10, description="First operand")
    b: int = Field(default=5, description="Second operand")
    title: str = Field(default=DEFAULT_TITLE, description="Banner printed first")

    @classmethod
    def load(cls, path: str | Path) -> "DemoConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False, sort_keys=False)
