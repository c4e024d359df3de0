"""Perch CLI: serve a directory of static files.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"

Runs with no arguments (serves ``./public`` on port 8000).  Flags
override the defaults.
"""

import argparse
import logging
import sys
from dataclasses import fields

from perch.config import LOG_LEVELS, SiteConfig
from perch.errors import ConfigurationError

logger = logging.getLogger("perch.server")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch: a minimal static file server.",
    )
    parser.add_argument("--root", default=None, help="Directory to serve (default: public)")
    parser.add_argument("--host", default=None, help="Bind host address (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Bind port number (default: 8000)")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        help="Logging verbosity (default: info)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SiteConfig:
    """Build a SiteConfig from parsed flags; unset flags keep defaults."""
    names = {f.name for f in fields(SiteConfig)}
    overrides = {
        name: value
        for name, value in vars(args).items()
        if name in names and value is not None
    }
    return SiteConfig(**overrides)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logging.basicConfig(level=config.log_level.upper(), format="%(message)s")

    from perch.app import StaticSite

    site = StaticSite(config)
    try:
        site.run()
    except ImportError as exc:
        print(
            f"Error: {exc}. Install the server with: pip install perch[server]",
            file=sys.stderr,
        )
        raise SystemExit(1) from exc
    except OSError as exc:
        print(
            f"Error: cannot listen on {config.host}:{config.port}: {exc}",
            file=sys.stderr,
        )
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        logger.info("Shutting down...")
