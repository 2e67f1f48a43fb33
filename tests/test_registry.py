#!/usr/bin/env python3
"""
Tests for the builtin registry and loader.
"""

import logging
import pytest

from tinysh.commands import BuiltinRegistry, builtin_registry, load_builtin_commands
from tinysh.commands.loader import PACKAGE_BUILTINS, discover_commands, load_user_commands
from tinysh.core import CONTINUE, STOP


@pytest.fixture
def registry():
    """Create an empty registry with two builtins."""
    reg = BuiltinRegistry()

    @reg.register("first", "First builtin", usage="first <x>")
    def cmd_first(tokens):
        return CONTINUE

    @reg.register("second", "Second builtin")
    def cmd_second(tokens):
        return STOP

    return reg


# ============================================================================
# BuiltinRegistry Tests
# ============================================================================

class TestBuiltinRegistry:
    """Tests for BuiltinRegistry."""

    def test_count(self, registry):
        """Test count and len() report the number of builtins."""
        assert registry.count == 2
        assert len(registry) == 2

    def test_get_exact_name(self, registry):
        """Test lookup by exact name returns the entry."""
        entry = registry.get("first")
        assert entry is not None
        assert entry.name == "first"
        assert entry.description == "First builtin"
        assert entry.usage == "first <x>"

    def test_get_is_case_sensitive(self, registry):
        """Test lookup does not fold case."""
        assert registry.get("FIRST") is None
        assert registry.get("First") is None

    def test_get_does_not_match_prefix(self, registry):
        """Test lookup does not match prefixes or padded names."""
        assert registry.get("firs") is None
        assert registry.get("first ") is None

    def test_names_in_registration_order(self, registry):
        """Test names() keeps registration order."""
        assert registry.names() == ["first", "second"]
        assert [e.name for e in registry] == ["first", "second"]

    def test_contains(self, registry):
        """Test membership by name."""
        assert "second" in registry
        assert "third" not in registry

    def test_default_usage_is_name(self, registry):
        """Test usage defaults to the command name."""
        assert registry.get("second").usage == "second"

    def test_execute_passes_tokens(self):
        """Test entry.execute hands the whole token list to the handler."""
        reg = BuiltinRegistry()
        seen = []

        @reg.register("echo", "Remember tokens")
        def cmd_echo(tokens):
            seen.append(tokens)
            return 7

        assert reg.get("echo").execute(["echo", "a", "b"]) == 7
        assert seen == [["echo", "a", "b"]]

    def test_register_returns_function(self):
        """Test the decorator returns the original function."""
        reg = BuiltinRegistry()

        def handler(tokens):
            return CONTINUE

        assert reg.register("x", "X")(handler) is handler

    def test_reregister_replaces(self, registry):
        """Test a second registration under a name replaces the first."""
        @registry.register("first", "Replacement")
        def cmd_other(tokens):
            return STOP

        assert registry.count == 2
        assert registry.get("first").description == "Replacement"
        assert registry.get("first").execute(["first"]) == STOP

    @pytest.mark.parametrize("name", ["", " cd", "cd "])
    def test_invalid_name(self, name):
        """Test empty or padded names are refused."""
        with pytest.raises(ValueError):
            BuiltinRegistry().register(name, "Bad")

    def test_get_completions(self, registry):
        """Test completions map names to descriptions."""
        assert registry.get_completions() == {
            "first": "First builtin",
            "second": "Second builtin",
        }


# ============================================================================
# Package Builtins Tests
# ============================================================================

class TestPackageBuiltins:
    """Tests for the builtins shipped with the package."""

    def test_all_builtins_registered(self):
        """Test cd, help, plus and exit are registered in table order."""
        load_builtin_commands()
        names = builtin_registry.names()
        assert [n for n in names if n in PACKAGE_BUILTINS] == list(PACKAGE_BUILTINS)

    def test_load_is_idempotent(self):
        """Test loading twice does not duplicate entries."""
        load_builtin_commands()
        count = builtin_registry.count
        load_builtin_commands()
        assert builtin_registry.count == count


# ============================================================================
# User Commands Loader Tests
# ============================================================================

class TestUserCommands:
    """Tests for loading builtins from a user directory."""

    def _write_command(self, root, dirname, body):
        cmd_dir = root / dirname
        cmd_dir.mkdir()
        (cmd_dir / "__init__.py").write_text(body)
        return cmd_dir

    def test_missing_directory(self, tmp_path):
        """Test a missing directory loads nothing."""
        assert load_user_commands(tmp_path / "nope") == 0

    def test_discover_skips_private_and_incomplete(self, tmp_path):
        """Test hidden, private and __init__-less directories are skipped."""
        self._write_command(tmp_path, "good", "")
        self._write_command(tmp_path, "_private", "")
        self._write_command(tmp_path, ".hidden", "")
        (tmp_path / "empty").mkdir()
        (tmp_path / "stray.py").write_text("")

        found = discover_commands(tmp_path)
        assert [p.parent.name for p in found] == ["good"]

    def test_discover_file_instead_of_directory(self, tmp_path, caplog):
        """Test a file path is rejected with a warning."""
        path = tmp_path / "commands"
        path.write_text("")
        with caplog.at_level(logging.WARNING, logger="tinysh"):
            assert discover_commands(path) == []
        assert "not a directory" in caplog.text

    def test_load_registers_builtin(self, tmp_path, capsys):
        """Test a user command registers itself in the global registry."""
        self._write_command(tmp_path, "greet", (
            "from tinysh.commands import builtin_registry\n"
            "from tinysh.core import CONTINUE\n"
            "\n"
            "@builtin_registry.register('greet-test', 'Say hello')\n"
            "def cmd_greet(tokens):\n"
            "    print('hello', *tokens[1:])\n"
            "    return CONTINUE\n"
        ))
        try:
            assert load_user_commands(tmp_path) == 1
            entry = builtin_registry.get("greet-test")
            assert entry is not None
            assert entry.execute(["greet-test", "world"]) == CONTINUE
            assert capsys.readouterr().out == "hello world\n"
        finally:
            builtin_registry._builtins.pop("greet-test", None)

    def test_broken_command_is_reported(self, tmp_path, caplog):
        """Test a command with a syntax error is skipped with a warning."""
        self._write_command(tmp_path, "broken", "def oops(:\n")
        with caplog.at_level(logging.WARNING, logger="tinysh"):
            assert load_user_commands(tmp_path) == 0
        assert "Failed to load command 'broken'" in caplog.text
