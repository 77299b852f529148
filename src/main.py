"""
Main entry point for replaying moves with the Scrabble Core engine.

Usage:
    python -m src.main replay.yaml
    python -m src.main replay.yaml --output results/run1.json --verbose
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

import yaml

from .replay import Replay, ReplayConfig


def load_config(config_path: str) -> ReplayConfig:
    """Load replay configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return ReplayConfig(**data)


def main():
    parser = argparse.ArgumentParser(
        description="Replay a list of moves on a Scrabble board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example replay.yaml:
  dictionary: words.txt
  stop_on_invalid: false
  moves:
    - 7 6 H OAT
    - 5 8 V NU.
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON (default: results/replay_<timestamp>.json)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    # Determine output path
    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"replay_{timestamp}.json"

    try:
        replay = Replay.create(config=config)
    except (OSError, ValueError) as e:
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        print(f"Config: {args.config}")
        print(f"Output: {output_path}")
        print()

    try:
        result = replay.run(verbose=args.verbose)
    except KeyboardInterrupt:
        print("\nReplay interrupted by user")
        replay.end_reason = "Interrupted by user"
        result = replay.get_result()

    replay.save_result(output_path)

    if args.verbose:
        print()
        print(f"Results saved to: {output_path}")

    # Print summary
    print()
    print("=== Replay Summary ===")
    print(f"Moves played: {result.moves_played}")
    print(f"Moves rejected: {result.moves_rejected}")
    print(f"Total score: {result.total_score}")
    print(f"End reason: {result.end_reason}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
