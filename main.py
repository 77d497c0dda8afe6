import sys
import argparse
from pathlib import Path
from typing import List, Optional

# --- Settings/Logging ---
from psl_scoreboard.logging.setup import setup_logging
from psl_scoreboard.config.settings import settings, VALID_LOG_LEVELS

from loguru import logger

# Core Logic Imports
from psl_scoreboard.league.league import League
from psl_scoreboard.models.data_models import BatchResult
from psl_scoreboard.export.text_exporter import export_ranking
from psl_scoreboard.presentation.console import print_ranking, print_status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a PSL league table from match result lines like 'Pirates 1, Chiefs 2'."
    )
    parser.add_argument(
        "results",
        nargs="*",
        type=Path,
        help="Text files with one result per line (reads stdin when omitted).",
    )
    parser.add_argument(
        "--teams-file",
        type=Path,
        help="Text file with one team name per line, seeded before processing.",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Do not seed the default PSL teams.",
    )
    parser.add_argument(
        "--export",
        type=Path,
        metavar="PATH",
        help="Export the ranking to a text file.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        help="Override LOG_LEVEL from the environment (e.g. DEBUG).",
    )
    return parser


def read_text(path: Path) -> Optional[str]:
    """Reads a whole input file, returning None (and logging) on failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        logger.info(f"Loaded file: {path.name}")
        return text
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {path}: {e}")
        return None


def run(args: argparse.Namespace) -> int:
    """Seeds, processes and reports one league table. Returns the exit code."""
    exit_code = 0
    league = League()

    if settings.seed_default_teams and not args.no_seed:
        league.seed_teams(settings.default_teams)
        logger.info("Seeded default PSL teams.")

    if args.teams_file:
        teams_text = read_text(args.teams_file)
        if teams_text is None:
            print_status(f"Error reading file: {args.teams_file}")
            exit_code = 1
        else:
            league.seed_teams(teams_text.splitlines())

    texts: List[str] = []
    if args.results:
        for path in args.results:
            text = read_text(path)
            if text is None:
                print_status(f"Error reading file: {path}")
                exit_code = 1
                continue
            texts.append(text)
    else:
        texts.append(sys.stdin.read())

    applied = failed = 0
    for text in texts:
        batch = league.process_text(text)
        applied += batch.applied
        failed += batch.failed

    ranking = league.get_ranking()
    print_ranking(ranking)
    print_status(BatchResult(applied=applied, failed=failed).summary)

    if args.export:
        try:
            output_path = export_ranking(
                ranking, args.export, encoding=settings.export_encoding
            )
            logger.success(f"Exported ranking to {output_path}")
            print_status(f"Exported ranking to {output_path.name}")
        except OSError as e:
            logger.error(f"Failed to write ranking to {args.export}: {e}")
            print_status(f"Write error: {e}")
            exit_code = 1

    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)
    logger.info("Starting PSL Scoreboard")
    return run(args)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
