"""Thin process runner used to invoke yarn."""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from .errors import ProcessExecutionError

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ProcessResult:
    """Captured output of a finished command."""

    stdout: str
    stderr: str
    returncode: int = 0


class ProcessRunner(Protocol):
    """Structural protocol for anything able to run a command in a directory."""

    def __call__(
        self, command: str, args: Sequence[str], *, cwd: Path | str
    ) -> ProcessResult: ...


def yarn_command(platform: str = sys.platform) -> str:
    """Return the yarn executable name for the given platform."""
    return "yarn.cmd" if platform.startswith("win") else "yarn"


def run_process(command: str, args: Sequence[str], *, cwd: Path | str) -> ProcessResult:
    """Run ``command`` with ``args`` in ``cwd`` and capture its output.

    Raises:
        ProcessExecutionError: on a non-zero exit, or when the executable is missing.
    """
    argv = [command, *args]
    logger.debug("Running %s in %s", " ".join(argv), cwd)
    try:
        completed = subprocess.run(
            argv,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise ProcessExecutionError(command, args, None, stderr=str(exc)) from exc

    if completed.returncode != 0:
        raise ProcessExecutionError(
            command,
            args,
            completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    return ProcessResult(
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
        returncode=completed.returncode,
    )
