"""Tests for shared CLI helpers."""

from pathlib import Path

import click
from click.testing import CliRunner
from rich.console import Console

from dir_organizer.cli import base
from dir_organizer.cli.base import OrganizerDisplay, common_options, init_logging
from dir_organizer.config import OrganizerConfig
from dir_organizer.rules import DEFAULT_RULES, RuleTable


def _display(quiet: bool = False) -> OrganizerDisplay:
    return OrganizerDisplay(
        console=Console(record=True, width=200, color_system=None), quiet=quiet
    )


class TestOrganizerDisplay:
    """Tests for OrganizerDisplay."""

    def test_default_console(self) -> None:
        """Test that a console is created when none is given."""
        display = OrganizerDisplay()
        assert isinstance(display.console, Console)
        assert display.quiet is False

    def test_welcome_lists_categories(self) -> None:
        """Test that the banner names every category of the rule table."""
        display = _display()

        display.welcome(DEFAULT_RULES)
        output = display.console.export_text()

        assert "Welcome to the File Organizer!" in output
        assert "Archives, Documents, Images, Music, Video" in output

    def test_welcome_uses_given_rules(self) -> None:
        """Test the banner with a custom rule table."""
        display = _display()

        display.welcome(RuleTable(rules={".py": "Code"}))
        output = display.console.export_text()

        assert "category folders: Code." in output

    def test_settings(self, tmp_path: Path) -> None:
        """Test the settings table."""
        display = _display()
        config = OrganizerConfig(source_dir=tmp_path, log_file=Path("run.log"))

        display.settings(config)
        output = display.console.export_text()

        assert "Source directory" in output
        assert "run.log" in output
        assert "NO" in output
        assert "DRY RUN MODE" not in output

    def test_settings_values_are_not_markup(self) -> None:
        """Test that square brackets in paths are printed literally."""
        display = _display()
        config = OrganizerConfig(source_dir=Path("/data/[old]/files"))

        display.settings(config)

        assert "/data/[old]/files" in display.console.export_text()

    def test_quiet_keeps_errors_and_dry_run_notice(self, tmp_path: Path) -> None:
        """Test that quiet mode hides chatter but not warnings or errors."""
        display = _display(quiet=True)

        display.welcome(DEFAULT_RULES)
        display.directory_found(tmp_path)
        display.settings(OrganizerConfig(source_dir=tmp_path, dry_run=True))
        display.error("broken")
        output = display.console.export_text()

        assert "Welcome" not in output
        assert "Directory found" not in output
        assert "Source directory" not in output
        assert "DRY RUN MODE" in output
        assert "broken" in output

    def test_aborted(self) -> None:
        """Test the abort message."""
        display = _display(quiet=True)

        display.aborted(RuntimeError("Cannot move a.jpg"), Path("organizer.log"))
        output = display.console.export_text()

        assert "organizing aborted: Cannot move a.jpg" in output
        assert "See organizer.log for details." in output


class TestDecorators:
    """Tests for common_options and init_logging."""

    def test_flags_reach_setup_logging(self, monkeypatch) -> None:
        """Test that -v and -q are passed through to setup_logging."""
        calls = []
        monkeypatch.setattr(
            base,
            "setup_logging",
            lambda verbose, quiet: calls.append((verbose, quiet)),
        )

        @click.command()
        @common_options
        @init_logging
        def command(verbose: bool, quiet: bool) -> None:
            click.echo(f"verbose={verbose} quiet={quiet}")

        runner = CliRunner()

        result = runner.invoke(command, ["-v"])
        assert result.exit_code == 0
        assert "verbose=True quiet=False" in result.output

        result = runner.invoke(command, ["--quiet"])
        assert result.exit_code == 0
        assert "verbose=False quiet=True" in result.output

        assert calls == [(True, False), (False, True)]
