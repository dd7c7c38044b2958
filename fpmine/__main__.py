#!/usr/bin/env python3
"""Mine frequent patterns from a transactional file.

Each line of the input file is one transaction; items are separated by
``--sep``. Patterns are printed as a summary and optionally written to
``--output``.
"""
import argparse
import logging
import sys

from .config import DEFAULT_SEPARATOR, LOG_FORMAT
from .file_read import READERS
from .fpgrowth import FPGrowth


def main(argv=None):
    parser = argparse.ArgumentParser(prog="fpmine", description="Mine frequent patterns with FP-Growth")
    parser.add_argument("file", help="Transactional input file")
    parser.add_argument("minSup", type=int, help="Minimum support count")
    parser.add_argument("--sep", default=DEFAULT_SEPARATOR,
                        help="Item separator (default: tab)")
    parser.add_argument("--reader", choices=sorted(READERS), default="python",
                        help="File reader implementation (default: python)")
    parser.add_argument("--output", help="Write patterns to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each mining step")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    try:
        transactions = READERS[args.reader](args.file, args.sep).read()
        alg = FPGrowth(transactions, args.minSup, args.sep)
        alg.mine()
    except (OSError, TypeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    alg.printResults()
    if args.output:
        alg.save_patterns(args.output, args.sep)
        print(f"Saved patterns to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
