"""Command line entry point for the project initializer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from .config import InitializerSettings
from .errors import InvalidProjectNameError, KickoffError
from .initializer import ProjectInitializer
from .prompt import Prompter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rename a freshly cloned project template and optionally reset its git history"
    )
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Repository root containing package.json and apps/",
    )
    parser.add_argument(
        "-t",
        "--template",
        type=Path,
        help="README template to render (default: scripts/README.template.md under the root)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every file and git command to stderr",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    settings = InitializerSettings.for_root(args.root, readme_template=args.template)
    initializer = ProjectInitializer(settings, Prompter(stdin, stdout))

    try:
        initializer.run()
    except InvalidProjectNameError as exc:
        print(f"\n❌ {exc}", file=sys.stderr)
        return 1
    except (KickoffError, OSError, ValueError) as exc:
        print(f"Setup failed: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nSetup cancelled", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
