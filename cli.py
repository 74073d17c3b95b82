# Tiny query-curve CLI: decode an encoded chain, query it, print or plot it.
# Usage:
#   python cli.py <chain> --query 0.3 0.5
#   python cli.py <chain> --decode
#   python cli.py <chain> --plot-data
#   python cli.py <chain> --plot --samples 50
#   python cli.py <chain> --check
#   python cli.py --values 1 1 0 0 0 0 0.5 0 0.5 1 1 1 --encode
#
# Notes:
# - Chains that start with "-" (negative first value) go after "--":
#     python cli.py --query 0 -- -fxSK--fxSK-0-0-0-0-fxSK-fxSK-0-0-fxSK-fxSK
# - Absent values print as None.
# - One chart per invocation (plot shows immediately).

import sys
import argparse
import logging

import curve_eval as ce
import data_print
from base62 import DecodeError
from decoder import decode_chain, encode_chain
from tools import check_chain

log = logging.getLogger(__name__)


def _build_parser():
    ap = argparse.ArgumentParser(description="Query cubic Bezier chain curves")
    ap.add_argument("chain", nargs="?", help="Encoded chain string")
    ap.add_argument("--values", nargs="+", type=float,
                    help="Numeric chain (scale_x scale_y offset_x offset_y x0 y0 ...) instead of an encoded one")
    ap.add_argument("--query", "-q", dest="query_xs", nargs="+", type=float,
                    help="External x values to evaluate")
    ap.add_argument("--decode", action="store_true", help="Print the decoded numbers")
    ap.add_argument("--plot-data", action="store_true", help="Print header and segment control points")
    ap.add_argument("--plot", action="store_true", help="Plot the curve with matplotlib")
    ap.add_argument("--samples", type=int, default=30, help="Samples per segment when plotting")
    ap.add_argument("--no-handles", action="store_true", help="Do not draw handles when plotting")
    ap.add_argument("--check", action="store_true", help="Check chain integrity (length, monotonic x, handles)")
    ap.add_argument("--encode", action="store_true", help="Print the encoded form of the chain")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return ap


def main(argv=None):
    ap = _build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.values is not None:
        chain = list(args.values)
    elif args.chain is not None:
        try:
            chain = decode_chain(args.chain)
        except DecodeError as ex:
            print(f"error: {ex}", file=sys.stderr)
            return 2
    else:
        ap.error("an encoded chain or --values is required")

    log.debug(f"Chain has {len(chain)} values")
    status = 0

    if args.encode:
        print(encode_chain(chain))

    if args.decode:
        data_print.print_decoded(chain)

    if args.plot_data:
        data_print.print_chain_data(chain)

    if args.check:
        problems = check_chain.check_chain(chain)
        if problems:
            for p in problems:
                print(f"check: {p}")
            status = 1
        else:
            print("check: OK")

    if args.query_xs:
        for x in args.query_xs:
            print(f"{x!r} -> {ce.query_curve(chain, x)!r}")

    if args.plot:
        import plot
        plot.plot_chain(chain, samples_per_segment=args.samples,
                        show_handles=not args.no_handles, query_xs=args.query_xs)

    return status


if __name__ == "__main__":
    sys.exit(main())
