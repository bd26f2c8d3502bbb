"""Unit tests for console and logging helpers (pagegen.utils)."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.logging import RichHandler

from pagegen.utils import (
    configure_logging,
    format_path,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    @pytest.mark.unit
    def test_installs_single_rich_handler(self, restore_root_logger):
        configure_logging("INFO")
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0], RichHandler)
        assert restore_root_logger.level == logging.INFO

    @pytest.mark.unit
    def test_case_insensitive(self, restore_root_logger):
        configure_logging("debug")
        assert restore_root_logger.level == logging.DEBUG

    @pytest.mark.unit
    def test_unknown_level_falls_back(self, restore_root_logger):
        configure_logging("LOUD")
        assert restore_root_logger.level == logging.WARNING


class TestFormatPath:
    @pytest.mark.unit
    def test_posix_separators(self):
        assert format_path(Path("lib") / "screens" / "a.dart") == "lib/screens/a.dart"

    @pytest.mark.unit
    def test_string_input(self):
        assert format_path("lib/a.dart") == "lib/a.dart"


class TestRichOutput:
    @pytest.mark.unit
    def test_print_success(self):
        with patch("pagegen.utils.console") as mock_console:
            print_success("Done.")
            mock_console.print.assert_called_once_with("[bold green]Done.[/bold green]")

    @pytest.mark.unit
    def test_print_error_escapes_markup(self):
        with patch("pagegen.utils.console") as mock_console:
            print_error("conflict in [red]lib[/red]")
            printed = mock_console.print.call_args[0][0]
            assert "\\[red]" in printed

    @pytest.mark.unit
    def test_print_warning(self):
        with patch("pagegen.utils.console") as mock_console:
            print_warning("careful")
            mock_console.print.assert_called_once_with("[bold yellow]careful[/bold yellow]")

    @pytest.mark.unit
    def test_print_summary_table(self):
        with patch("pagegen.utils.console") as mock_console:
            print_summary_table({"lib/a.dart": "created"}, title="pagegen make:page")
            mock_console.print.assert_called_once()
