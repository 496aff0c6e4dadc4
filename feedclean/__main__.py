# feedclean/__main__.py
from __future__ import annotations

import argparse
import json
import logging
import sys

from feedclean.core import CoreError
from feedclean.io import load_path
from feedclean.quality import DEFAULT_CONFIG, CleanerConfig, clean_batch


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feedclean",
        description="Drop duplicate readings from a provider feed and report gaps per provider.",
    )
    parser.add_argument("path", help="JSON array of {provider_id, key, value, timestamp} records")
    parser.add_argument("--time-tolerance", type=int, default=DEFAULT_CONFIG.time_tolerance)
    parser.add_argument("--stddev-fraction", type=float, default=DEFAULT_CONFIG.stddev_fraction)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = CleanerConfig(
            time_tolerance=args.time_tolerance,
            stddev_fraction=args.stddev_fraction,
        )
        report = clean_batch(load_path(args.path), config=config)
    except (CoreError, OSError) as e:
        print(f"feedclean: {e}", file=sys.stderr)
        return 1

    gaps = {str(pid): stats.as_dict() for pid, stats in report.gaps.items()}
    json.dump(gaps, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
