#!/usr/bin/env python

"""
Main entry point for the sparsepoly calculator. Run with --help for options.

The input is a stream of whitespace-separated numbers, laid out however is
convenient:

    3  1 2  5 1  -1 0    <- first polynomial: term count, then coef/exp pairs
    2  2 1  1 0          <- second polynomial, same format
    1.5                  <- point at which to evaluate the first (optional)
    -2                   <- point at which to evaluate the second (optional)

The evaluation points can instead be given with --at, in which case both
polynomials are evaluated at every point and the rest of the input is ignored.
"""

import sys
import argparse

from sparsepoly import common
from sparsepoly import logging
from sparsepoly import opts
from sparsepoly.parse import read_term_list, ParseError

precision = opts.Option("precision", int, 6, description="Significant digits in evaluated values", metavar="N")

def format_value(x):
    return "{:.{}g}".format(x, precision.value)

def _parse_point(word):
    try:
        return float(word)
    except ValueError:
        raise ParseError("not a number: {}".format(repr(word)))

def calculate(text, points=None, out=sys.stdout):
    """Read two polynomials from `text` and write their sum, difference,
    product and values to `out`.

    Raises ParseError if the input is malformed.
    """
    with logging.task("reading polynomials"):
        p1, end = read_term_list(text)
        p2, end = read_term_list(text, end)
        logging.event("P1 has {} terms, P2 has {} terms".format(len(p1), len(p2)))

    print("P1: {}".format(p1), file=out)
    print("P2: {}".format(p2), file=out)

    with logging.task("arithmetic"):
        print("P1 + P2: {}".format(p1 + p2), file=out)
        print("P1 - P2: {}".format(p1 - p2), file=out)
        print("P1 * P2: {}".format(p1 * p2), file=out)

    if points is not None:
        evaluations = [(name, p, x) for x in points for name, p in (("P1", p1), ("P2", p2))]
    else:
        words = text[end:].split()
        evaluations = [(name, p, _parse_point(word)) for (name, p), word in zip((("P1", p1), ("P2", p2)), words)]

    with logging.task("evaluation", count=len(evaluations)):
        for name, p, x in evaluations:
            print("{}({}): {}".format(name, format_value(x), format_value(p.evaluate(x))), file=out)

def run(argv=None):
    """Entry point for the sparsepoly executable."""

    parser = argparse.ArgumentParser(description="Sparse polynomial calculator.")
    parser.add_argument("--at", metavar="X", type=float, action="append", default=None,
                        help="Evaluate both polynomials at X (may be repeated); " +
                             "by default the points are read from the input")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    parser.add_argument("file", nargs="?", default=None, help="Input file (omit to use stdin)")
    args = parser.parse_args(argv)
    opts.read(args)

    with logging.task("reading input", file=args.file or "stdin"):
        with common.open_maybe_stdin(args.file or "-") as f:
            text = f.read()

    try:
        calculate(text, args.at, sys.stdout)
    except ParseError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    if logging.verbose.value:
        logging.dump_profile(sys.stderr)

if __name__ == "__main__":
    run()
