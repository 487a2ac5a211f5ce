"""Tests for error types and failure classification."""

from __future__ import annotations

from yarn_packager.errors import (
    ProcessExecutionError,
    ScriptExecutionError,
    can_recover,
    is_benign_failure,
)


class TestIsBenignFailure:
    def test_empty_stderr_is_benign(self):
        assert is_benign_failure("", [])
        assert is_benign_failure("\n  \n", [])

    def test_any_line_is_fatal_without_ignore_list(self):
        assert not is_benign_failure("YN0001: boom", [])

    def test_all_lines_ignored(self):
        stderr = "YN0060: peer mismatch\n\nYN0002: missing peer\n"
        assert is_benign_failure(stderr, ["YN0060", "YN0002"])

    def test_one_unknown_line_is_fatal(self):
        stderr = "YN0060: peer mismatch\nYN0001: exception\n"
        assert not is_benign_failure(stderr, ["YN0060"])


class TestCanRecover:
    def test_needs_stdout(self):
        error = ProcessExecutionError("yarn", ["info"], 1, stdout="", stderr="")
        assert not can_recover(error, [])

    def test_benign_with_stdout(self):
        error = ProcessExecutionError("yarn", ["info"], 1, stdout='{"value":"a@1"}', stderr="")
        assert can_recover(error, [])


class TestMessages:
    def test_process_error_message(self):
        error = ProcessExecutionError("yarn", ["install"], 2, stderr="bad things\n")
        assert str(error) == "yarn install failed (exit 2): bad things"
        assert error.args_list == ["install"]

    def test_not_started_message(self):
        error = ProcessExecutionError("yarn", ["install"], None)
        assert str(error) == "yarn install could not be started"

    def test_script_error_keeps_output(self):
        cause = ProcessExecutionError("yarn", ["run", "build"], 1, stdout="out", stderr="err")
        error = ScriptExecutionError("build", cause)
        assert error.script == "build"
        assert error.stdout == "out"
        assert error.stderr == "err"
        assert isinstance(error, ProcessExecutionError)
