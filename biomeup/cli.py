"""CLI entrypoint for biomeup."""

from __future__ import annotations

import argparse
from pathlib import Path

from .config import load_config
from .errors import MigrationError
from .logging import configure_logging, get_logger
from .orchestrator import Migrator
from .prompts import Prompter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biomeup",
        description="Migrate a JavaScript/TypeScript project from ESLint/Prettier to Biome.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Accept the default answer to every question without prompting.",
    )
    parser.add_argument(
        "--biome-version",
        default=None,
        help="Biome version to install and reference in biome.json.",
    )
    parser.add_argument(
        "--skip-fix",
        action="store_true",
        help="Do not run the lint:fix script after migrating.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for the biomeup command."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = get_logger("cli")

    try:
        configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
        config = load_config(Path(args.path))
        if args.biome_version:
            config.biome_version = args.biome_version
        if args.skip_fix:
            config.run_fix = False
        migrator = Migrator(
            args.path,
            prompter=Prompter(assume_yes=bool(args.yes)),
            config=config,
        )
        migrator.run()
    except MigrationError as exc:
        logger.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted.")
        return 1
    except Exception:
        logger.exception("Unexpected error while running Biome setup:")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
