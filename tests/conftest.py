"""Shared pytest fixtures for yarn-packager tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from yarn_packager.errors import ProcessExecutionError
from yarn_packager.process import ProcessResult


class FakeRunner:
    """Record invocations and answer them from a handler."""

    def __init__(self, handler: Callable[[list[str]], ProcessResult] | None = None) -> None:
        self.calls: list[tuple[str, list[str], Path | str]] = []
        self.handler = handler or (lambda args: ProcessResult(stdout="", stderr=""))

    def __call__(self, command: str, args: Sequence[str], *, cwd: Path | str) -> ProcessResult:
        self.calls.append((command, list(args), cwd))
        return self.handler(list(args))

    @property
    def argvs(self) -> list[list[str]]:
        return [args for _, args, _ in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    return FakeRunner


@pytest.fixture
def failure() -> Callable[..., ProcessExecutionError]:
    def _failure(
        args: Sequence[str], stdout: str = "", stderr: str = "", code: int = 1
    ) -> ProcessExecutionError:
        return ProcessExecutionError("yarn", args, code, stdout=stdout, stderr=stderr)

    return _failure


TREE_OUTPUT = "\n".join(
    [
        '{"value":"lodash@npm:4.17.21","children":{"Version":"4.17.21"}}',
        '{"value":"@babel/runtime@npm:7.22.5","children":{"Version":"7.22.5",'
        '"Dependencies":[{"descriptor":"regenerator-runtime@npm:^0.13.11",'
        '"locator":"regenerator-runtime@npm:0.13.11"}]}}',
        '{"value":"regenerator-runtime@npm:0.13.11","children":{"Version":"0.13.11"}}',
    ]
)


@pytest.fixture
def tree_output() -> str:
    return TREE_OUTPUT
