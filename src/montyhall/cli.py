"""
Command-line entry point.

    montyhall [--trials N] [--seed S] [--jobs J] [--csv PATH] [--plot PATH] [-v]

Prints the six-line report to standard output. Diagnostics go to standard
error through the ``montyhall`` logger.
"""

import argparse
import logging
import sys

from .exceptions import MontyHallError
from .simulation import DEFAULT_N_TRIALS, simulate

logger = logging.getLogger('montyhall')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='montyhall',
        description="Monte Carlo check of the Monty Hall stay/switch win rates",
    )
    parser.add_argument('-n', '--trials', type=int, default=DEFAULT_N_TRIALS,
                        help="trials per strategy (default %(default)s)")
    parser.add_argument('-s', '--seed', type=int, default=None,
                        help="seed for the random stream (default: fresh entropy)")
    parser.add_argument('-j', '--jobs', type=int, default=1,
                        help="worker processes (default %(default)s)")
    parser.add_argument('--csv', metavar='PATH',
                        help="also write the per-strategy table to PATH")
    parser.add_argument('--plot', metavar='PATH',
                        help="also save a bar chart to PATH (needs matplotlib)")
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help="log progress; repeat for debug output")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        results = simulate(args.trials, seed=args.seed, n_jobs=args.jobs)
        print(results.summary())
        if args.csv:
            results.to_csv(args.csv)
            logger.info("Wrote %s", args.csv)
        if args.plot:
            results.plot(graph_options={'savefig': args.plot})
            logger.info("Wrote %s", args.plot)
    except MontyHallError as e:
        print(f"montyhall: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
