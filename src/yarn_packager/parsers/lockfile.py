"""Rebase local ``file:`` references inside yarn.lock."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LOCKFILE_NAME = "yarn.lock"

# "<name>@file:../path" or "<name>@./path", up to the next quote, colon or comma.
_FILE_REFERENCE = re.compile(r'[^"/]@(?:file:)?((?:\./|\.\./).*?)[":,]', re.MULTILINE)


@dataclass(slots=True, frozen=True)
class LockfileReference:
    """A relative path found in the lockfile and its span in the text."""

    old_ref: str
    start: int
    end: int

    def rebased(self, path_to_root: str) -> str:
        return f"{path_to_root}/{self.old_ref}".replace("\\", "/")


def find_references(lockfile_text: str) -> list[LockfileReference]:
    """Return every relative path reference, in order of appearance."""
    return [
        LockfileReference(old_ref=match.group(1), start=match.start(1), end=match.end(1))
        for match in _FILE_REFERENCE.finditer(lockfile_text)
    ]


def rebase(lockfile_text: str, path_to_root: str) -> str:
    """Prefix every relative path reference with ``path_to_root``.

    Only the matched spans are rewritten; text outside a reference is left alone
    even when it contains the same path.
    """
    references = find_references(lockfile_text)
    if not references:
        return lockfile_text

    parts: list[str] = []
    cursor = 0
    for reference in references:
        parts.append(lockfile_text[cursor : reference.start])
        parts.append(reference.rebased(path_to_root))
        cursor = reference.end
    parts.append(lockfile_text[cursor:])

    logger.debug("rebased %d lockfile reference(s) onto %s", len(references), path_to_root)
    return "".join(parts)
