"""Error types raised by the yarn packager and the failure classification helper."""

from __future__ import annotations

from collections.abc import Sequence


class PackagerError(RuntimeError):
    """Base error for failures while driving the package manager."""


class ProcessExecutionError(PackagerError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(
        self,
        command: str,
        args: Sequence[str],
        returncode: int | None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.command = command
        self.args_list = list(args)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(self._describe())

    def _describe(self) -> str:
        cmdline = " ".join([self.command, *self.args_list])
        if self.returncode is None:
            message = f"{cmdline} could not be started"
        else:
            message = f"{cmdline} failed (exit {self.returncode})"
        detail = self.stderr.strip()
        if detail:
            message = f"{message}: {detail}"
        return message


class ScriptExecutionError(ProcessExecutionError):
    """Raised when a package script fails; later scripts in the sequence are not run."""

    def __init__(self, script: str, cause: ProcessExecutionError) -> None:
        self.script = script
        super().__init__(
            cause.command,
            cause.args_list,
            cause.returncode,
            stdout=cause.stdout,
            stderr=cause.stderr,
        )


class MalformedOutputError(PackagerError, ValueError):
    """Raised by strict parsing when the tree output holds no usable record."""


class UnsupportedYarnVersionError(PackagerError):
    """Raised when the installed yarn is older than the packager supports."""


def is_benign_failure(stderr: str, ignored_errors: Sequence[str]) -> bool:
    """Return True when every non-empty stderr line matches an ignored prefix.

    An empty ``ignored_errors`` list means any diagnostic on stderr is fatal.
    """
    for line in stderr.splitlines():
        if not line.strip():
            continue
        if not any(line.startswith(prefix) for prefix in ignored_errors):
            return False
    return True


def can_recover(error: ProcessExecutionError, ignored_errors: Sequence[str]) -> bool:
    """Decide whether a failed listing still produced output worth parsing."""
    return bool(error.stdout) and is_benign_failure(error.stderr, ignored_errors)
