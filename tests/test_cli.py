"""Tests for the link-relay CLI."""

from pathlib import Path

from typer.testing import CliRunner

from link_relay import __version__
from link_relay.cli.main import app
from link_relay.settings.storage import SettingsStorage


runner = CliRunner()


class TestCliBasic:
    """Basic CLI tests."""

    def test_help_lists_commands(self):
        """Test that --help shows every command."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("kinds", "detect", "pad", "config", "version"):
            assert command in result.output

    def test_version(self):
        """Test the version command."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"Link Relay v{__version__}" in result.output


class TestKindsCommand:
    """Tests for the kinds command."""

    def test_lists_every_kind(self):
        """Test that all declared kinds are listed."""
        result = runner.invoke(app, ["kinds"])

        assert result.exit_code == 0
        for kind in ("terminal", "text-editor", "cursor-ai", "claude-code", "github-copilot-chat"):
            assert kind in result.output


class TestDetectCommand:
    """Tests for the detect command."""

    def test_detect_by_extension(self):
        """Test detection through an installed extension."""
        result = runner.invoke(app, ["detect", "--app-name", "Code", "-e", "anthropic.claude-code"])

        assert result.exit_code == 0
        assert "extensions" in result.output
        assert "No chat assistant detected" not in result.output

    def test_detect_nothing(self):
        """Test the warning when nothing is detected."""
        result = runner.invoke(app, ["detect", "--app-name", "Code", "--uri-scheme", "vscode"])

        assert result.exit_code == 0
        assert "No chat assistant detected" in result.output

    def test_detect_inactive_extension(self):
        """Test that an inactive Claude Code extension is not reported."""
        result = runner.invoke(app, [
            "detect", "--app-name", "Code",
            "-e", "anthropic.claude-code", "--inactive", "anthropic.claude-code",
        ])

        assert result.exit_code == 0
        assert "No chat assistant detected" in result.output


class TestPadCommand:
    """Tests for the pad command."""

    def test_pad(self):
        """Test that the padded text is shown quoted."""
        result = runner.invoke(app, ["pad", "src/a.ts#L10"])

        assert result.exit_code == 0
        assert '" src/a.ts#L10 "' in result.output

    def test_pad_blank(self):
        """Test that blank text is reported."""
        result = runner.invoke(app, ["pad", "   "])

        assert result.exit_code == 0
        assert "blank" in result.output


class TestConfigCommand:
    """Tests for the config command."""

    def test_set_timeout(self, tmp_path: Path):
        """Test that a valid timeout is saved."""
        result = runner.invoke(app, ["--config-dir", str(tmp_path), "config", "--timeout", "2.5"])

        assert result.exit_code == 0
        assert SettingsStorage(tmp_path).load().focus_command_timeout_seconds == 2.5

    def test_invalid_timeout_not_saved(self, tmp_path: Path):
        """Test that an invalid timeout is refused."""
        result = runner.invoke(app, ["--config-dir", str(tmp_path), "config", "--timeout", "0"])

        assert result.exit_code == 1
        assert "not saved" in result.output
        assert SettingsStorage(tmp_path).exists() is False

    def test_set_log_level(self, tmp_path: Path):
        """Test that the log level is normalised to upper case."""
        result = runner.invoke(app, ["--config-dir", str(tmp_path), "config", "--log-level", "debug"])

        assert result.exit_code == 0
        assert SettingsStorage(tmp_path).load().log_level == "DEBUG"

    def test_show(self, tmp_path: Path):
        """Test showing the configuration."""
        result = runner.invoke(app, ["--config-dir", str(tmp_path), "config", "--show"])

        assert result.exit_code == 0
        assert "Timeout" in result.output
        assert "5.0s" in result.output
