# ABOUTME: Tests for mcpcfg CLI commands
# ABOUTME: Calls main() in-process and inspects captured output
import base64
import json
from unittest.mock import patch

import pytest

from mcpcfg import config as config_module
from mcpcfg.cli import (
    EXIT_CONFIG_ERROR,
    EXIT_FATAL,
    EXIT_SUCCESS,
    NOT_RUNNING_MESSAGE,
    UNIVERSAL_NOTE,
    main,
)


@pytest.fixture(autouse=True)
def no_default_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.mcpcfg/config.json."""
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "missing" / "config.json")


class TestListCommand:
    """Tests for mcpcfg list."""

    def test_lists_all_clients(self, capsys):
        """Test every client appears with the cursor one-click marker."""
        assert main(["list"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        for client in ("claude-code", "gemini", "cursor", "windsurf", "cline", "kiro", "augment"):
            assert client in out
        assert "Cursor (one-click install)" in out
        assert "Total: 7 client(s)" in out


class TestShowCommand:
    """Tests for mcpcfg show."""

    def test_show_claude_code(self, capsys):
        """Test title, steps, command and configuration are printed."""
        assert main(["show", "claude-code"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert UNIVERSAL_NOTE in out
        assert "Claude Code Configuration" in out
        assert "  1. Open a terminal and run the following command:" in out
        assert "claude mcp add --transport http archon http://localhost:8051/mcp" in out
        assert '"transport": "http"' in out
        assert "cursor://" not in out

    def test_show_cursor_includes_link(self, capsys):
        """Test cursor output includes the one-click link."""
        assert main(["show", "cursor", "--host", "[::1]", "--port", "65535"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "One-Click Install for Cursor (Opens Cursor with configuration):" in out
        assert "cursor://anysphere.cursor-deeplink/mcp/install?name=archon&config=" in out
        assert "http://[::1]:65535/mcp" in out
        assert "Command:" not in out

    def test_show_not_running(self, tmp_path, capsys):
        """Test the placeholder is printed when the server is stopped."""
        settings = tmp_path / "config.json"
        settings.write_text(json.dumps({"server": {"status": "stopped"}}))

        assert main(["show", "cursor", "--config", str(settings)]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out.strip() == NOT_RUNNING_MESSAGE

    def test_show_unknown_client(self, capsys):
        """Test unknown clients exit with a config error."""
        assert main(["show", "vscode"]) == EXIT_CONFIG_ERROR

        err = capsys.readouterr().err
        assert "Client 'vscode' is not supported" in err

    def test_show_invalid_port(self, capsys):
        """Test invalid ports exit with a config error."""
        assert main(["show", "cursor", "--port", "70000"]) == EXIT_CONFIG_ERROR
        assert "Invalid port" in capsys.readouterr().err

    def test_show_missing_settings_file(self, tmp_path, capsys):
        """Test a missing explicit settings file is a config error."""
        missing = tmp_path / "nope.json"
        assert main(["show", "cursor", "--config", str(missing)]) == EXIT_CONFIG_ERROR
        assert "Settings file not found" in capsys.readouterr().err

    def test_unexpected_error_is_fatal(self, capsys):
        """Test unexpected exceptions map to the fatal exit code."""
        with patch("mcpcfg.cli.render", side_effect=RuntimeError("boom")):
            assert main(["show", "gemini"]) == EXIT_FATAL
        assert "Fatal error: boom" in capsys.readouterr().err


class TestConfigCommand:
    """Tests for mcpcfg config."""

    def test_config_is_pipeable_json(self, capsys):
        """Test only the JSON document is printed."""
        assert main(["config", "cline", "--host", "localhost", "--port", "8051"]) == EXIT_SUCCESS

        data = json.loads(capsys.readouterr().out)
        assert data["mcpServers"]["archon"]["args"] == [
            "mcp-remote",
            "http://localhost:8051/mcp",
            "--allow-http",
        ]

    def test_config_from_settings_file(self, tmp_path, capsys):
        """Test host and port come from the settings file."""
        settings = tmp_path / "config.toml"
        settings.write_text('[server]\nhost = "box"\nport = 7000\n')

        assert main(["config", "windsurf", "--config", str(settings)]) == EXIT_SUCCESS

        data = json.loads(capsys.readouterr().out)
        assert data == {"mcpServers": {"archon": {"serverUrl": "http://box:7000/mcp"}}}

    def test_config_host_only_settings_with_port_flag(self, tmp_path, capsys):
        """Test a host from settings and a port from the flag are combined."""
        settings = tmp_path / "config.json"
        settings.write_text(json.dumps({"server": {"host": "box.example"}}))

        assert main(["config", "cursor", "--config", str(settings), "--port", "9000"]) == EXIT_SUCCESS

        data = json.loads(capsys.readouterr().out)
        assert data == {"mcpServers": {"archon": {"url": "http://box.example:9000/mcp"}}}


class TestCommandCommand:
    """Tests for mcpcfg command."""

    def test_claude_code_command(self, capsys):
        """Test the claude mcp add command is printed alone."""
        assert main(["command", "claudecode"]) == EXIT_SUCCESS
        assert (
            capsys.readouterr().out.strip()
            == "claude mcp add --transport http archon http://localhost:8051/mcp"
        )

    def test_client_without_command(self, capsys):
        """Test clients without a command exit with a config error."""
        assert main(["command", "kiro"]) == EXIT_CONFIG_ERROR
        assert "Kiro has no setup command" in capsys.readouterr().err


class TestLinkCommand:
    """Tests for mcpcfg link."""

    def test_cursor_link(self, capsys):
        """Test the deep link decodes back to the URL payload."""
        assert main(["link", "cursor"]) == EXIT_SUCCESS

        link = capsys.readouterr().out.strip()
        encoded = link.split("config=", 1)[1]
        assert json.loads(base64.b64decode(encoded)) == {"url": "http://localhost:8051/mcp"}

    def test_client_without_link(self, capsys):
        """Test clients without one-click install exit with a config error."""
        assert main(["link", "augment"]) == EXIT_CONFIG_ERROR
        assert "does not support one-click install" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    """Test running without a subcommand prints help."""
    assert main([]) == EXIT_SUCCESS
    assert "usage" in capsys.readouterr().out.lower()
