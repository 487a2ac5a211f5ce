"""Parse ``yarn info --recursive --json`` output into a dependency graph.

Yarn prints one JSON document per line and may interleave diagnostics on the
same stream, so every line is decoded on its own and anything that does not
decode to a non-empty value is dropped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from typing import Any

from ..errors import MalformedOutputError
from ..models import DependencyGraph, DependencyNode

logger = logging.getLogger(__name__)

TOP_LEVEL_KEY = "value"
CHILD_KEY = "locator"


def iter_records(raw_output: str) -> Iterator[Any]:
    """Yield every line of ``raw_output`` that decodes to a non-empty JSON value."""
    for index, raw_line in enumerate(raw_output.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        try:
            record = json.loads(line)
        except json.JSONDecodeError as exc:
            logger.debug("line %d: skipped, invalid JSON (%s)", index, exc.msg)
            continue
        if not isinstance(record, (dict, list, str)) or not record:
            logger.debug("line %d: skipped, empty value", index)
            continue
        yield record


def split_locator(locator: str) -> str:
    """Return the package name of a locator such as ``@scope/name@npm:1.0.0``."""
    fragments = locator.split("@")
    # A scoped name starts with "@", which leaves an empty first fragment.
    if locator.startswith("@"):
        fragments = fragments[1:]
        fragments[0] = "@" + fragments[0]
    return fragments[0]


def _children(record: dict[str, Any]) -> dict[str, Any]:
    children = record.get("children")
    return children if isinstance(children, dict) else {}


def build_version_index(records: Iterable[Any]) -> dict[str, str | None]:
    """Map each top-level locator to the version yarn resolved for it."""
    versions: dict[str, str | None] = {}
    for record in records:
        if not isinstance(record, dict):
            continue
        locator = record.get(TOP_LEVEL_KEY)
        if not isinstance(locator, str):
            continue
        version = _children(record).get("Version")
        versions[locator] = version if isinstance(version, str) else None
    return versions


def _convert(
    entries: Iterable[Any], key: str, versions: dict[str, str | None]
) -> dict[str, DependencyNode]:
    nodes: dict[str, DependencyNode] = {}
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        locator = entry.get(key)
        if not isinstance(locator, str) or not locator:
            logger.debug("skipping entry without %r: %r", key, entry)
            continue
        name = split_locator(locator)
        if not name or name == "@":
            logger.debug("skipping entry with unusable locator %r", locator)
            continue

        dependencies = _children(entry).get("Dependencies")
        if isinstance(dependencies, list):
            children = _convert(dependencies, CHILD_KEY, versions)
        else:
            children = {}

        # Later entries for the same name replace earlier ones.
        nodes[name] = DependencyNode(
            name=name,
            version=versions.get(locator),
            dependencies=children,
        )
    return nodes


def parse(raw_output: str, strict: bool = False) -> DependencyGraph:
    """Return the dependency graph described by yarn's recursive info output.

    With ``strict=True`` an output that yields no record at all raises
    ``MalformedOutputError`` instead of producing an empty graph.
    """
    records = list(iter_records(raw_output))
    if strict and not any(isinstance(record, dict) for record in records):
        raise MalformedOutputError("yarn info output contained no dependency records")

    versions = build_version_index(records)
    return DependencyGraph(dependencies=_convert(records, TOP_LEVEL_KEY, versions))
