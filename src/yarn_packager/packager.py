"""Yarn (v2+) packager used by the build pipeline.

This module MUST NOT read or write files itself; lockfile content and target
directories come from the caller so the same adapter serves the pipeline and
the standalone CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from packaging.version import Version

from .config import PackagerOptions
from .errors import (
    ProcessExecutionError,
    ScriptExecutionError,
    UnsupportedYarnVersionError,
    can_recover,
)
from .models import DependencyGraph
from .parsers.dependency_tree import parse as parse_dependency_tree
from .parsers.lockfile import LOCKFILE_NAME, rebase
from .process import ProcessRunner, run_process, yarn_command
from .version import MINIMUM_YARN_VERSION, is_supported, parse_yarn_version

logger = logging.getLogger(__name__)

PROD_DEPENDENCIES_ARGS = ("info", "--recursive", "--json")


def _coerce_options(options: PackagerOptions | Mapping[str, Any] | None) -> PackagerOptions:
    if options is None:
        return PackagerOptions()
    if isinstance(options, PackagerOptions):
        return options
    return PackagerOptions.from_dict(options)


class Yarn2Packager:
    """Drive yarn 2+ on behalf of the packaging step."""

    lockfile_name = LOCKFILE_NAME
    # Manifest sections copied verbatim into the packaged package.json.
    copy_package_section_names: tuple[str, ...] = ("resolutions",)
    must_copy_modules = False

    def __init__(
        self,
        runner: ProcessRunner = run_process,
        ignored_errors: Sequence[str] = (),
        command: str | None = None,
    ) -> None:
        self.runner = runner
        self.ignored_errors = tuple(ignored_errors)
        self.command = command or yarn_command()

    def _run(self, args: Sequence[str], cwd: Path | str):
        return self.runner(self.command, list(args), cwd=cwd)

    def get_prod_dependencies(self, cwd: Path | str) -> DependencyGraph:
        """Return the production dependency graph of the project in ``cwd``."""
        try:
            stdout = self._run(PROD_DEPENDENCIES_ARGS, cwd).stdout
        except ProcessExecutionError as exc:
            if not can_recover(exc, self.ignored_errors):
                raise
            logger.warning("yarn info exited with %s; using partial output", exc.returncode)
            stdout = exc.stdout

        graph = parse_dependency_tree(stdout)
        logger.debug("found %d top-level dependencies in %s", len(graph), cwd)
        return graph

    def rebase_lockfile(self, path_to_root: str, lockfile: str) -> str:
        return rebase(lockfile, path_to_root)

    def install(
        self,
        cwd: Path | str,
        options: PackagerOptions | Mapping[str, Any] | None = None,
    ) -> None:
        args = ["install", *_coerce_options(options).install_args()]
        logger.info("Running yarn %s in %s", " ".join(args), cwd)
        try:
            self._run(args, cwd)
        except ProcessExecutionError as exc:
            if exc.stdout:
                logger.error("%s", exc.stdout)
            raise

    def prune(
        self,
        cwd: Path | str,
        options: PackagerOptions | Mapping[str, Any] | None = None,
    ) -> None:
        # yarn install prunes node_modules on its own.
        self.install(cwd, options)

    def run_scripts(self, cwd: Path | str, script_names: Sequence[str]) -> None:
        """Run each script in order, stopping at the first failure."""
        for script in script_names:
            logger.info("Running script %s in %s", script, cwd)
            try:
                self._run(["run", script], cwd)
            except ProcessExecutionError as exc:
                raise ScriptExecutionError(script, exc) from exc

    def get_version(self, cwd: Path | str) -> Version:
        return parse_yarn_version(self._run(["--version"], cwd).stdout)

    def ensure_supported(self, cwd: Path | str) -> Version:
        """Return the yarn version in ``cwd``, raising if it predates yarn 2."""
        version = self.get_version(cwd)
        if not is_supported(version):
            raise UnsupportedYarnVersionError(
                f"yarn {version} found in {cwd}; {MINIMUM_YARN_VERSION} or newer is required"
            )
        return version
