#!/usr/bin/env python3
"""
Tests for the command dispatcher.
"""

import pytest
from unittest.mock import patch

from tinysh.commands import BuiltinRegistry
from tinysh.core import CONTINUE, STOP, FatalShellError
from tinysh.engine import execute


# ============================================================================
# Builtin Dispatch Tests
# ============================================================================

class TestBuiltinDispatch:
    """Tests for dispatching to builtins."""

    def test_empty_tokens(self):
        """Test a blank line does nothing and continues."""
        with patch("tinysh.engine.dispatch.launch") as mock_launch:
            assert execute([]) == CONTINUE
        mock_launch.assert_not_called()

    def test_plus(self, capsys):
        """Test plus is run as a builtin."""
        assert execute(["plus", "2", "3"]) == CONTINUE
        assert capsys.readouterr().out == "5\n"

    def test_plus_bad_argument(self, capsys):
        """Test plus diagnostics go to stderr and the loop continues."""
        assert execute(["plus", "2", "x"]) == CONTINUE
        assert capsys.readouterr().err == 'tinysh: unacceptable arguments for "plus"\n'

    def test_exit_ignores_arguments(self):
        """Test exit stops even with extra arguments."""
        assert execute(["exit", "now", "please"]) == STOP

    def test_builtin_names_are_case_sensitive(self):
        """Test an uppercase builtin name goes to the launcher."""
        with patch("tinysh.engine.dispatch.launch", return_value=CONTINUE) as mock_launch:
            assert execute(["CD", "/"]) == CONTINUE
        mock_launch.assert_called_once_with(["CD", "/"])

    def test_builtin_shadows_program(self):
        """Test a builtin wins over an external program of the same name."""
        registry = BuiltinRegistry()

        @registry.register("true", "Shadow /bin/true")
        def cmd_true(tokens):
            return STOP

        with patch("tinysh.engine.dispatch.launch") as mock_launch:
            assert execute(["true"], registry=registry) == STOP
        mock_launch.assert_not_called()

    def test_failing_builtin_is_reported(self, capsys):
        """Test an unexpected error in a builtin does not end the session."""
        registry = BuiltinRegistry()

        @registry.register("boom", "Always fails")
        def cmd_boom(tokens):
            raise RuntimeError("kaboom")

        assert execute(["boom"], registry=registry) == CONTINUE
        assert capsys.readouterr().err == "tinysh: boom: kaboom\n"

    def test_fatal_error_propagates(self):
        """Test fatal errors are not swallowed by the dispatcher."""
        registry = BuiltinRegistry()

        @registry.register("fatal", "Fatal failure")
        def cmd_fatal(tokens):
            raise FatalShellError("out of luck")

        with pytest.raises(FatalShellError):
            execute(["fatal"], registry=registry)


# ============================================================================
# External Dispatch Tests
# ============================================================================

class TestExternalDispatch:
    """Tests for dispatching to external programs."""

    def test_external_program(self, capfd):
        """Test a non-builtin is launched."""
        assert execute(["echo", "hello"]) == CONTINUE
        assert capfd.readouterr().out == "hello\n"

    def test_missing_program(self, capfd):
        """Test a missing program is reported and the loop continues."""
        assert execute(["nonexistent-program-xyz"]) == CONTINUE
        assert "tinysh: nonexistent-program-xyz" in capfd.readouterr().err

    def test_cd_without_argument_keeps_directory(self, capfd, tmp_path, monkeypatch):
        """Test a failed cd leaves the directory children inherit unchanged."""
        monkeypatch.chdir(tmp_path)
        assert execute(["cd"]) == CONTINUE
        assert execute(["pwd"]) == CONTINUE
        out, err = capfd.readouterr()
        assert err == 'tinysh: expected argument to "cd"\n'
        assert out == f"{tmp_path.resolve()}\n"

    def test_cd_changes_child_directory(self, capfd, tmp_path, monkeypatch):
        """Test children run in the directory set by cd."""
        monkeypatch.chdir(tmp_path)
        sub = tmp_path / "sub"
        sub.mkdir()
        assert execute(["cd", "sub"]) == CONTINUE
        execute(["pwd"])
        assert capfd.readouterr().out == f"{sub.resolve()}\n"
