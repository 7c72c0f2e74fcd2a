"""Command-line interface for sound profile analysis."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .pipeline import ProfilePipeline
from .render import render_scores
from .utils import AudioLoadError

DEFAULT_INPUT = Path("./song.wav")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score the aggressiveness, tonality, softness, "
        "high-low balance and density of a WAV recording",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze ./song.wav
  sound-profile

  # Analyze a specific file
  sound-profile track.wav

  # Full result as JSON, written to a file
  sound-profile track.wav --json -o profile.json
        """,
    )

    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=DEFAULT_INPUT,
        help="WAV file to analyze (default: ./song.wav)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON instead of bars",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Write the full result as JSON to this file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    pipeline = ProfilePipeline()

    try:
        result = pipeline.analyze_file(args.input)
    except AudioLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:  # noqa: BLE001
        if args.verbose:
            logger.exception(f"Analysis of {args.input} failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        for line in render_scores(result.scores):
            print(line)

    if args.output:
        try:
            args.output.write_text(json.dumps(result.to_dict(), indent=2))
        except OSError as e:
            print(f"Error: Could not write {args.output}: {e}", file=sys.stderr)
            return 1
        logger.info(f"Results written to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
