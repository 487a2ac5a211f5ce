"""Parsers for yarn command output and lockfiles."""

from .dependency_tree import parse as parse_dependency_tree
from .lockfile import LOCKFILE_NAME, rebase as rebase_lockfile

__all__ = [
    "LOCKFILE_NAME",
    "parse_dependency_tree",
    "rebase_lockfile",
]
