"""Tests for DemoConfig loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mathlib.config import DEFAULT_TITLE, DemoConfig


class TestDemoConfig:
    """Tests for DemoConfig."""

    def test_defaults(self) -> None:
        """Test the sample operands are the defaults."""
        cfg = DemoConfig()
        assert cfg.a == 10
        assert cfg.b == 5
        assert cfg.title == DEFAULT_TITLE

    def test_load_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """Test a missing file yields the default config."""
        cfg = DemoConfig.load(tmp_path / "absent.yaml")
        assert cfg == DemoConfig()

    def test_load_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        """Test an empty YAML document yields the default config."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert DemoConfig.load(path) == DemoConfig()

    def test_load_partial_override(self, tmp_path: Path) -> None:
        """Test keys absent from the file keep their defaults."""
        path = tmp_path / "demo.yaml"
        path.write_text("b: 0\n")
        cfg = DemoConfig.load(path)
        assert cfg.a == 10
        assert cfg.b == 0

    def test_load_rejects_unknown_keys(self, tmp_path: Path) -> None:
        """Test unknown keys fail validation."""
        path = tmp_path / "demo.yaml"
        path.write_text("c: 3\n")
        with pytest.raises(ValidationError):
            DemoConfig.load(path)

    def test_load_rejects_non_integer_operand(self, tmp_path: Path) -> None:
        """Test a non-numeric operand fails validation."""
        path = tmp_path / "demo.yaml"
        path.write_text("a: ten\n")
        with pytest.raises(ValidationError):
            DemoConfig.load(path)

    def test_save_then_load(self, tmp_path: Path) -> None:
        """Test a saved config loads back unchanged."""
        path = tmp_path / "nested" / "demo.yaml"
        cfg = DemoConfig(a=-4, b=3, title="Demo")
        cfg.save(path)
        assert DemoConfig.load(path) == cfg
