"""
Integration tests for the CLI commands.
"""

import logging

import pytest
from unittest.mock import MagicMock, patch
from typer.testing import CliRunner

from label_locator.browsers import HtmlDocument
from label_locator.config import reset_settings


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def fresh_settings():
    """Each invocation reloads settings."""
    reset_settings()
    yield
    reset_settings()


class TestCLIHelp:
    """Test the command surface."""

    def test_help_lists_commands(self, runner):
        from label_locator.main import app
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("resolve", "check", "practice-form"):
            assert command in result.stdout

    def test_resolve_options(self, runner):
        from label_locator.main import app
        result = runner.invoke(app, ["resolve", "--help"])
        assert result.exit_code == 0
        assert "--kind" in result.stdout
        assert "--engine" in result.stdout


class TestCLICheck:
    """Test the offline 'check' command."""

    def test_check_input(self, runner, practice_form_path):
        from label_locator.main import app
        result = runner.invoke(app, ["check", str(practice_form_path), "First Name"])
        assert result.exit_code == 0
        assert "association" in result.stdout
        assert 'id="fname"' in result.stdout

    def test_check_select_lists_options(self, runner, practice_form_path):
        from label_locator.main import app
        result = runner.invoke(app, ["check", str(practice_form_path), "State", "--kind", "select"])
        assert result.exit_code == 0
        assert "native" in result.stdout
        assert "Canada" in result.stdout

    def test_check_unknown_label(self, runner, practice_form_path):
        from label_locator.main import app
        result = runner.invoke(app, ["check", str(practice_form_path), "Middle Name"])
        assert result.exit_code == 1
        assert "Could not find input field with label: Middle Name" in result.stdout

    def test_check_missing_file(self, runner, tmp_path):
        from label_locator.main import app
        result = runner.invoke(app, ["check", str(tmp_path / "missing.html"), "First Name"])
        assert result.exit_code == 1
        assert "Error" in result.stdout


class TestCLIPracticeForm:
    """Test the 'practice-form' command against the offline form."""

    @pytest.fixture
    def offline_session(self, practice_form_path):
        session = MagicMock()
        session.__enter__.return_value = session
        session.open.return_value = HtmlDocument.from_file(practice_form_path)
        with patch("label_locator.main.open_session", return_value=session):
            yield session

    def test_all_scenarios_pass(self, runner, offline_session):
        from label_locator.main import app
        result = runner.invoke(app, ["practice-form"])
        assert result.exit_code == 0
        assert result.stdout.count("PASS") == 3
        offline_session.open.assert_called_once_with("https://app.cloudqa.io/home/AutomationPracticeForm")

    def test_custom_url(self, runner, offline_session):
        from label_locator.main import app
        runner.invoke(app, ["practice-form", "https://example.com/form"])
        offline_session.open.assert_called_once_with("https://example.com/form")

    def test_failure_exit_code(self, runner, offline_session):
        from label_locator.main import app
        offline_session.open.return_value = HtmlDocument.from_string("<p>nothing here</p>")
        result = runner.invoke(app, ["practice-form"])
        assert result.exit_code == 1
        assert "FAIL" in result.stdout


class TestCLILogging:
    """Test that logging follows the configuration."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_configured_level_and_file(self, runner, practice_form_path, monkeypatch):
        from label_locator.main import app
        monkeypatch.setenv("LABEL_LOCATOR__LOGGING__LEVEL", "ERROR")
        monkeypatch.setenv("LABEL_LOCATOR__LOGGING__FILE", "label-locator.log")
        with patch("label_locator.main.setup_logging") as setup_logging:
            result = runner.invoke(app, ["check", str(practice_form_path), "First Name"])
        assert result.exit_code == 0
        setup_logging.assert_called_once_with("ERROR", "label-locator.log")

    def test_verbose_overrides_level(self, runner, practice_form_path, monkeypatch):
        from label_locator.main import app
        monkeypatch.setenv("LABEL_LOCATOR__LOGGING__LEVEL", "ERROR")
        with patch("label_locator.main.setup_logging") as setup_logging:
            runner.invoke(app, ["check", str(practice_form_path), "First Name", "--verbose"])
        setup_logging.assert_called_once_with("DEBUG", None)

    def test_debug_setting_forces_debug(self, runner, practice_form_path, monkeypatch):
        from label_locator.main import app
        monkeypatch.setenv("LABEL_LOCATOR__DEBUG", "true")
        with patch("label_locator.main.setup_logging") as setup_logging:
            runner.invoke(app, ["check", str(practice_form_path), "First Name"])
        setup_logging.assert_called_once_with("DEBUG", None)

    def test_resolution_written_to_log_file(self, runner, practice_form_path, tmp_path, monkeypatch):
        from label_locator.main import app
        log_file = tmp_path / "resolve.log"
        monkeypatch.setenv("LABEL_LOCATOR__LOGGING__FILE", str(log_file))
        result = runner.invoke(app, ["check", str(practice_form_path), "First Name"])
        assert result.exit_code == 0
        assert "Resolved input 'First Name' via association" in log_file.read_text()
