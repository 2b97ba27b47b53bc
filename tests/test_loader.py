#!/usr/bin/env python3
"""Tests for loading rule sets from ignore files."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from fileignore.core.constants import ErrorCode
from fileignore.infrastructure.logger import Logger, LogLevel, set_global_logger
from fileignore.loader import (
    IgnoreFileError,
    find_ignore_file,
    load_ignore_file,
    read_rule_lines,
)
from fileignore.rules.ruleset import RuleSet


class TestReadRuleLines:
    """Tests for read_rule_lines."""

    def test_line_terminators(self, tmp_path):
        """Test \\n, \\r\\n and \\r all end lines."""
        path = tmp_path / ".fileignore"
        path.write_bytes(b"a\nb\r\nc\rd")
        assert read_rule_lines(path) == ["a", "b", "c", "d"]

    def test_trailing_whitespace_kept(self, tmp_path):
        """Test spaces are not stripped from lines."""
        path = tmp_path / ".fileignore"
        path.write_bytes(b"foo \n")
        assert read_rule_lines(path)[0] == "foo "

    def test_decode_error(self, tmp_path):
        """Test undecodable bytes raise INTERNAL_ERROR."""
        path = tmp_path / ".fileignore"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(IgnoreFileError) as exc_info:
            read_rule_lines(path)
        assert exc_info.value.error_code == ErrorCode.INTERNAL_ERROR
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_unknown_encoding(self, tmp_path):
        """Test an unknown encoding name raises IgnoreFileError."""
        path = tmp_path / ".fileignore"
        path.write_text("a")
        with pytest.raises(IgnoreFileError):
            read_rule_lines(path, encoding="no-such-codec")


class TestLoadIgnoreFile:
    """Tests for load_ignore_file."""

    def test_loads_rules(self, write_ignore_file, sample_lines):
        """Test a file builds the same rule set as its lines."""
        path = write_ignore_file(sample_lines)
        rules = load_ignore_file(path)

        assert isinstance(rules, RuleSet)
        assert [r.source for r in rules.ignore_rules] == ["build/", "*.tmp", "node_modules"]
        assert [r.source for r in rules.negation_rules] == ["!build/keep.txt"]
        assert rules.is_ignored("build/output.o")
        assert not rules.is_ignored("build/keep.txt")

    def test_accepts_string_path(self, write_ignore_file):
        """Test str paths are accepted."""
        path = write_ignore_file(["*.log"])
        assert load_ignore_file(str(path)).is_ignored("a.log")

    def test_empty_file(self, tmp_path):
        """Test an empty file ignores nothing."""
        path = tmp_path / ".fileignore"
        path.write_text("")
        rules = load_ignore_file(path)
        assert len(rules) == 0
        assert not rules.is_ignored("anything")

    def test_none_path(self):
        """Test None is rejected."""
        with pytest.raises(IgnoreFileError) as exc_info:
            load_ignore_file(None)
        assert exc_info.value.error_code == ErrorCode.INVALID_INPUT

    def test_missing_file(self, tmp_path):
        """Test a nonexistent file raises NOT_FOUND."""
        with pytest.raises(IgnoreFileError) as exc_info:
            load_ignore_file(tmp_path / ".fileignore")
        assert exc_info.value.error_code == ErrorCode.NOT_FOUND
        assert "does not exist" in str(exc_info.value)

    def test_wrong_name(self, write_ignore_file):
        """Test a file with another name is rejected."""
        path = write_ignore_file(["a"], name=".gitignore")
        with pytest.raises(IgnoreFileError) as exc_info:
            load_ignore_file(path)
        assert exc_info.value.error_code == ErrorCode.INVALID_INPUT
        assert ".gitignore" in str(exc_info.value)

    def test_custom_name(self, write_ignore_file):
        """Test file_name changes the required name."""
        path = write_ignore_file(["a"], name=".myignore")
        assert load_ignore_file(path, file_name=".myignore").is_ignored("a")

    def test_directory_is_unreadable(self, tmp_path):
        """Test a directory named like the ignore file fails to read."""
        (tmp_path / ".fileignore").mkdir()
        with pytest.raises(IgnoreFileError) as exc_info:
            load_ignore_file(tmp_path / ".fileignore")
        assert exc_info.value.error_code == ErrorCode.INTERNAL_ERROR

    def test_io_error(self, write_ignore_file):
        """Test an OSError while reading is wrapped."""
        path = write_ignore_file(["a"])
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(IgnoreFileError) as exc_info:
                load_ignore_file(path)
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_latin1_encoding(self, tmp_path):
        """Test the encoding argument is used."""
        path = tmp_path / ".fileignore"
        path.write_bytes("caf\xe9\n".encode("latin-1"))
        assert load_ignore_file(path, encoding="latin-1").is_ignored("menu/caf\xe9.txt")

    def test_logs_load(self, write_ignore_file, sample_lines):
        """Test a debug message is logged with rule counts."""
        handler = MagicMock(spec=logging.Handler)
        handler.level = logging.DEBUG
        set_global_logger(Logger(level=LogLevel.DEBUG, handlers=[handler]))

        load_ignore_file(write_ignore_file(sample_lines))

        message = handler.handle.call_args[0][0].getMessage()
        assert message.startswith("Loaded ignore file")
        assert "ignore=3" in message
        assert "negation=1" in message

    def test_logs_missing_file(self, tmp_path):
        """Test an error message is logged for a missing file."""
        handler = MagicMock(spec=logging.Handler)
        handler.level = logging.DEBUG
        set_global_logger(Logger(level=LogLevel.DEBUG, handlers=[handler]))

        with pytest.raises(IgnoreFileError):
            load_ignore_file(tmp_path / ".fileignore")

        record = handler.handle.call_args[0][0]
        assert record.levelno == logging.ERROR
        assert "Ignore file not found" in record.getMessage()


class TestFindIgnoreFile:
    """Tests for find_ignore_file."""

    def test_finds_in_start_directory(self, write_ignore_file, tmp_path):
        """Test the start directory is searched first."""
        path = write_ignore_file(["a"])
        assert find_ignore_file(tmp_path) == path.resolve()

    def test_finds_in_parent(self, write_ignore_file, tmp_path):
        """Test parents are searched."""
        path = write_ignore_file(["a"])
        nested = tmp_path / "src" / "pkg"
        nested.mkdir(parents=True)
        assert find_ignore_file(nested) == path.resolve()

    def test_nearest_wins(self, write_ignore_file, tmp_path):
        """Test the closest file is returned."""
        write_ignore_file(["a"])
        inner = write_ignore_file(["b"], directory=tmp_path / "src")
        assert find_ignore_file(tmp_path / "src") == inner.resolve()

    def test_custom_name(self, write_ignore_file, tmp_path):
        """Test file_name selects the file to look for."""
        path = write_ignore_file(["a"], name=".myignore")
        assert find_ignore_file(tmp_path, ".myignore") == path.resolve()

    def test_directory_not_returned(self, tmp_path):
        """Test a directory with the file name is skipped."""
        nested = tmp_path / "a"
        (nested / ".neverignore").mkdir(parents=True)
        assert find_ignore_file(nested, ".neverignore") is None

    def test_not_found(self, tmp_path):
        """Test None when no file exists."""
        assert find_ignore_file(tmp_path, ".surely-absent-ignore-file") is None
