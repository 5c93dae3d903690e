#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
"""

import pytest
from click.testing import CliRunner

from centwise.cli.main import main


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        """Test centwise --help shows all registered subcommands."""
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Fixed-Point Money Arithmetic" in result.output

        expected_commands = ["add", "config", "distribute", "divide", "format", "multiply", "subtract", "version"]

        for command in expected_commands:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        """Test centwise version displays version and author."""
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "centwise v0.1.0" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self):
        """Test centwise config displays current configuration."""
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert "Symbol: $" in result.output
        assert "Precision: 2" in result.output
        assert "Vedic Grouping: False" in result.output
        assert "Log Level: INFO" in result.output

    def test_config_command_reflects_environment(self, monkeypatch):
        """Test display settings are read from the environment."""
        monkeypatch.setenv("CENTWISE_SYMBOL", "€")
        monkeypatch.setenv("CENTWISE_PRECISION", "3")

        result = self.runner.invoke(main, ["config"])

        assert "Symbol: €" in result.output
        assert "Precision: 3" in result.output

    def test_invalid_command_shows_error(self):
        """Test that invalid command shows helpful error."""
        result = self.runner.invoke(main, ["invalid-command"])

        assert result.exit_code != 0
        assert "Error" in result.output or "No such" in result.output

    def test_verbose_flag_enables_verbose_output(self):
        """Test --verbose flag prints the environment first."""
        result = self.runner.invoke(main, ["--verbose", "format", "1"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["Environment: test", "$1.00"]

    def test_config_env_override_changes_environment(self):
        """Test --config-env flag overrides environment."""
        result = self.runner.invoke(main, ["--config-env", "production", "config"])

        assert result.exit_code == 0
        assert "Environment: production" in result.output

    def test_invalid_configuration_is_reported(self, monkeypatch):
        """Test configuration errors stop the CLI with a message."""
        monkeypatch.setenv("CENTWISE_PRECISION", "two")

        result = self.runner.invoke(main, ["format", "1"])

        assert result.exit_code == 1
        assert "CENTWISE_PRECISION" in result.output

    def test_debug_flag(self):
        """Test --debug announces debug logging."""
        result = self.runner.invoke(main, ["--debug", "format", "1"])

        assert result.exit_code == 0
        assert "Debug logging enabled" in result.output
