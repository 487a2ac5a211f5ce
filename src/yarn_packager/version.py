"""Yarn version detection built atop packaging.version."""

from __future__ import annotations

from packaging.version import InvalidVersion, Version

MINIMUM_YARN_VERSION = Version("2.0.0")


def parse_yarn_version(text: str) -> Version:
    """Parse the first non-empty line of ``yarn --version`` output.

    Raises:
        ValueError: if the output holds no recognisable version.
    """
    for line in text.splitlines():
        candidate = line.strip()
        if not candidate:
            continue
        try:
            return Version(candidate.lstrip("v"))
        except InvalidVersion as exc:
            raise ValueError(f"Unrecognised yarn version: {candidate!r}") from exc
    raise ValueError("yarn --version printed nothing")


def is_supported(version: Version) -> bool:
    # Release candidates of a supported major sort below it, so compare majors.
    return version.major >= MINIMUM_YARN_VERSION.major
