"""Command-line entrypoint for the yarn packager."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import ConfigError, PackagerOptions, Settings, load_settings
from .errors import PackagerError
from .packager import Yarn2Packager
from .summary import render_tree

logger = logging.getLogger(__name__)


def _add_install_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("cwd", type=Path, help="Directory holding package.json")
    parser.add_argument(
        "--no-frozen-lockfile",
        action="store_true",
        default=None,
        help="Allow yarn to update yarn.lock",
    )
    parser.add_argument(
        "--ignore-scripts",
        action="store_true",
        default=None,
        help="Do not run lifecycle scripts during install",
    )
    parser.add_argument(
        "--network-concurrency",
        type=int,
        default=None,
        help="Maximum number of concurrent network requests",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="yarn-packager", description=__doc__)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON settings file (defaults to $YARN_PACKAGER_CONFIG)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    deps = sub.add_parser("deps", help="List production dependencies")
    deps.add_argument("cwd", type=Path)
    deps.add_argument("--format", choices=("json", "text"), default="json")
    deps.add_argument("--depth", type=int, default=None, help="Limit text output depth")

    _add_install_flags(sub.add_parser("install", help="Install node_modules"))
    _add_install_flags(sub.add_parser("prune", help="Prune node_modules"))

    run = sub.add_parser("run", help="Run package scripts in order")
    run.add_argument("cwd", type=Path)
    run.add_argument("scripts", nargs="+")

    rebase = sub.add_parser("rebase", help="Rebase local file references in a lockfile")
    rebase.add_argument("lockfile", type=Path)
    rebase.add_argument("path_to_root")
    rebase.add_argument(
        "--output", type=Path, default=None, help="Write here instead of stdout"
    )

    version = sub.add_parser("version", help="Check the yarn version in a directory")
    version.add_argument("cwd", type=Path)

    args = parser.parse_args(argv)
    if getattr(args, "depth", None) is not None and args.depth < 1:
        parser.error("--depth must be at least 1")
    return args


def _install_options(args: argparse.Namespace, settings: Settings) -> PackagerOptions:
    overrides = {
        "noFrozenLockfile": args.no_frozen_lockfile,
        "ignoreScripts": args.ignore_scripts,
        "networkConcurrency": args.network_concurrency,
    }
    merged = settings.packager_options.to_dict()
    merged.update({key: value for key, value in overrides.items() if value is not None})
    return PackagerOptions.from_dict(merged)


def _dispatch(args: argparse.Namespace, packager: Yarn2Packager, settings: Settings) -> int:
    if args.command == "deps":
        graph = packager.get_prod_dependencies(args.cwd)
        if args.format == "text":
            sys.stdout.write(render_tree(graph, max_depth=args.depth))
        else:
            print(json.dumps(graph.to_dict(), indent=2))
    elif args.command in ("install", "prune"):
        options = _install_options(args, settings)
        if args.command == "install":
            packager.install(args.cwd, options)
        else:
            packager.prune(args.cwd, options)
    elif args.command == "run":
        packager.run_scripts(args.cwd, args.scripts)
    elif args.command == "rebase":
        content = args.lockfile.read_text(encoding="utf-8")
        rebased = packager.rebase_lockfile(args.path_to_root, content)
        if args.output is None:
            sys.stdout.write(rebased)
        else:
            args.output.write_text(rebased, encoding="utf-8")
            logger.info("Wrote rebased lockfile to %s", args.output)
    elif args.command == "version":
        print(packager.ensure_supported(args.cwd))
    return 0


def main(argv: list[str] | None = None, packager: Yarn2Packager | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        settings = load_settings(args.config)
        if packager is None:
            packager = Yarn2Packager(ignored_errors=settings.ignored_errors)
        return _dispatch(args, packager, settings)
    except (ConfigError, PackagerError, OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
