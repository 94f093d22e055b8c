"""
userdirs.cli

Command-line interface for userdirs: inspect the directories an application would use.

Responsibilities:
- Parse CLI arguments and dispatch subcommands.
- Build a DirectoryResolver from flags and an optional YAML config.
- Print every directory (show) or a single one (get).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path, PurePath

import yaml

from .errors import HomeDirError
from .log import get_logger, setup_logging
from .platform import Platform
from .resolver import DirectoryResolver, ResolvedDirectories
from .settings import Settings, load_settings
from .xdg import Category

logger = get_logger("cli")

CATEGORIES = ["home", "data", "config", "cache", "state", "runtime"]

# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def resolve_settings(arg: str | None) -> Settings:
    """Load --config if given; otherwise an empty config (live process state)."""
    if not arg:
        return Settings()
    return load_settings(Path(arg).expanduser())


def build_resolver(args: argparse.Namespace, cfg: Settings) -> DirectoryResolver:
    """
    Combine flags and config into a resolver.

    Priority for each setting:
      1) command-line flag
      2) config file value
      3) live process state
    """
    platform = Platform.from_name(args.platform) if args.platform else cfg.platform
    home = args.home or cfg.home
    home_lookup = (lambda: home) if home else None

    return DirectoryResolver(
        environ=cfg.environment,
        platform=platform,
        home_lookup=home_lookup,
        overrides=not args.native,
    )


def scoped(dirs: ResolvedDirectories, app: str | None) -> ResolvedDirectories:
    return dirs.joinpath(app) if app else dirs


def render(dirs: ResolvedDirectories, fmt: str) -> str:
    values = dirs.as_dict()
    if fmt == "json":
        return json.dumps(values, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(values, sort_keys=False).rstrip("\n")

    width = max(len(k) for k in values)
    return "\n".join(f"{k:<{width}}  {v if v is not None else '-'}" for k, v in values.items())

# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------

def cmd_show(args: argparse.Namespace, resolver: DirectoryResolver) -> int:
    """Print all directories."""
    dirs = scoped(resolver.all_directories(), args.app)
    print(render(dirs, args.format))
    return 0


def cmd_get(args: argparse.Namespace, resolver: DirectoryResolver) -> int:
    """
    Print one directory.

    Only the requested category is resolved, so a category satisfied by an
    override works even when home cannot be determined. An override value is
    printed exactly as set, before any path normalisation.
    """
    category = args.category
    if category != "home" and not args.app:
        raw = resolver.override(Category(category))
        if raw is not None:
            print(raw)
            return 0

    path: PurePath | None = getattr(resolver, category)()

    if path is not None and args.app and category != "home":
        path = path / args.app

    if path is None:
        print(f"no {category} directory on this platform", file=sys.stderr)
        return 1

    print(path)
    return 0

# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct top-level argument parser and subcommands.
    """
    p = argparse.ArgumentParser(prog="userdirs")
    p.add_argument("--config", default=None, help="Path to config YAML (platform, home, environment)")
    p.add_argument("--platform", choices=[x.value for x in Platform], default=None,
                   help="Resolve as if running on this platform")
    p.add_argument("--home", default=None, help="Use this home directory instead of asking the OS")
    p.add_argument("-v", "--verbose", action="store_true", help="Log where each directory comes from")
    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("show", help="Print every user directory")
    ps.add_argument("--format", choices=["text", "yaml", "json"], default="text")
    ps.add_argument("--native", action="store_true", help="Ignore XDG variables (platform conventions only)")
    ps.add_argument("--app", default=None, help="Scope directories to an application name")
    ps.set_defaults(func=cmd_show)

    pg = sub.add_parser("get", help="Print a single user directory")
    pg.add_argument("category", choices=CATEGORIES)
    pg.add_argument("--native", action="store_true", help="Ignore XDG variables (platform conventions only)")
    pg.add_argument("--app", default=None, help="Scope the directory to an application name")
    pg.set_defaults(func=cmd_get)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        cfg = resolve_settings(args.config)
    except (OSError, yaml.YAMLError) as exc:
        print(f"userdirs: cannot load config: {exc}", file=sys.stderr)
        return 2

    resolver = build_resolver(args, cfg)
    logger.debug("resolver: %r", resolver)

    try:
        return int(args.func(args, resolver))
    except HomeDirError as exc:
        print(f"userdirs: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
