#!/usr/bin/env python3
"""Local CLI entrypoint to run the yarn packager outside of the build pipeline.

Usage:
  python scripts/packager.py deps path/to/service [--format text]
  python scripts/packager.py install path/to/service [--ignore-scripts]
  python scripts/packager.py rebase path/to/yarn.lock packages/svc

This calls the same yarn_packager.cli.main installed as ``yarn-packager``.
"""

from __future__ import annotations

from yarn_packager.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
