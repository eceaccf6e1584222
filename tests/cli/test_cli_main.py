"""Tests for the root ``zeppctl`` group options."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

from click.testing import CliRunner

from zeppctl.cli import main

if TYPE_CHECKING:
    from pathlib import Path


class TestTelemetryOptions:
    def test_no_tracing_by_default(self, tmp_path: Path) -> None:
        with patch("zeppctl.utils.telemetry.configure_telemetry") as configure:
            result = CliRunner().invoke(main, ["layout", "-d", str(tmp_path)])

        assert result.exit_code == 0, result.output
        configure.assert_not_called()

    def test_telemetry_flag_exports_to_console(self, tmp_path: Path) -> None:
        with patch("zeppctl.utils.telemetry.configure_telemetry") as configure:
            result = CliRunner().invoke(main, ["--telemetry", "layout", "-d", str(tmp_path)])

        assert result.exit_code == 0, result.output
        configure.assert_called_once_with(export_to_console=True, otlp_endpoint=None)

    def test_otlp_endpoint_alone_enables_tracing(self, tmp_path: Path) -> None:
        with patch("zeppctl.utils.telemetry.configure_telemetry") as configure:
            result = CliRunner().invoke(
                main, ["--otlp-endpoint", "http://collector:4317", "layout", "-d", str(tmp_path)]
            )

        assert result.exit_code == 0, result.output
        configure.assert_called_once_with(export_to_console=False, otlp_endpoint="http://collector:4317")

    def test_console_and_otlp_together(self, tmp_path: Path) -> None:
        with patch("zeppctl.utils.telemetry.configure_telemetry") as configure:
            result = CliRunner().invoke(
                main,
                ["--telemetry", "--otlp-endpoint", "http://collector:4317", "layout", "-d", str(tmp_path)],
            )

        assert result.exit_code == 0, result.output
        configure.assert_called_once_with(export_to_console=True, otlp_endpoint="http://collector:4317")

    def test_missing_sdk_exits_one_with_diagnostic(self, tmp_path: Path) -> None:
        err = ImportError(
            "opentelemetry-sdk is required for configure_telemetry(). Install it with: pip install zeppctl[otel]"
        )
        with patch("zeppctl.utils.telemetry.configure_telemetry", side_effect=err):
            result = CliRunner().invoke(main, ["--telemetry", "layout", "-d", str(tmp_path)])

        assert result.exit_code == 1
        assert "Telemetry error" in result.output
        assert "pip install zeppctl[otel]" in result.output
        assert not isinstance(result.exception, ImportError)
        assert "Zeppelin Install Layout" not in result.output
