#!/usr/bin/env python3
# ruff: noqa: T201
"""
ModsHunt - find differences (and identities) in two bio-sequences.

$ cat original.fasta
 >original sequence
 ATATATCAGAGddd
 AGCArrrGAGAGC
$ cat variant.fasta
 >modified sequence
 ATATATCAGAG
 AGCARRRGAGAGCiii
$ modshunt.py original.fasta variant.fasta
 ATATATCAGAG{12-ddd}AGCA{19^rrr/RRR}GAGAGC{28+iii}
"""
import argparse
import logging
import os
import sys
import time


# Add project root to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from seqhunt.fasta import cut_span, read_fasta
from seqhunt.render import DOUBLE_VIEW_WIDTH, RENDERERS, render_double
from seqhunt.segment import as_segment
from seqhunt.split3 import check_ranges, split3


logger = logging.getLogger("modshunt")

FORMATS = {
    's': "single view (default)",
    'd': "double view",
    't': "ranges in tab-separated text",
    'j': "ranges in json",
    'x': "ranges in tab-separated text, long strings shortened",
}


def _get_env_int(name: str, default: int) -> int:
    """Positive integer setting from the environment variable `name`."""
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer: '{text}'") from e
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def get_data(arg: str, debug: bool = False) -> str:
    """
    Sequence of a FASTA file given on the command line.
    While debugging, literal data can be given instead of a missing file.
    """
    if debug and not os.path.exists(arg):
        return arg
    return read_fasta(arg)


def setup_logging(debug: bool, trace: bool) -> None:
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
    if debug or trace:
        logging.getLogger("seqhunt").setLevel(logging.DEBUG)
        logging.getLogger("seqhunt.lcss").setLevel(logging.DEBUG if trace else logging.INFO)
        logger.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modshunt",
        description="Show differences between a reference and a target sequence.",
        epilog="Formats: " + ", ".join(f"-f{k}: {v}" for k, v in FORMATS.items()),
    )
    parser.add_argument("reference", help="Reference FASTA file")
    parser.add_argument("target", help="Target FASTA file")
    parser.add_argument("-f", "--format", default="s", choices=sorted(FORMATS), help="Output format")
    parser.add_argument("-d", "--debug", action="store_true",
        help="Log comparison steps; literal sequences are accepted in place of missing files")
    parser.add_argument("-t", "--trace", action="store_true", help="Like --debug, with substring search traces")
    parser.add_argument("--width", type=_positive_int,
        help=f"Line width of the double view (default: MODSHUNT_WIDTH or {DOUBLE_VIEW_WIDTH})")
    parser.add_argument("--workers", type=_positive_int,
        help="Threads used for the substring search (default: MODSHUNT_WORKERS or 1)")
    parser.add_argument("--span-src", help="Compare only this span of the reference, e.g. 10-200 or 10+50")
    parser.add_argument("--span-dst", help="Compare only this span of the target")
    parser.add_argument("--check", action="store_true", help="Verify the comparison result before output")
    parser.add_argument("-o", "--output", help="Write to this file instead of standard output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    debug = args.debug or args.trace
    setup_logging(args.debug, args.trace)

    try:
        width = args.width or _get_env_int("MODSHUNT_WIDTH", DOUBLE_VIEW_WIDTH)
        workers = args.workers or _get_env_int("MODSHUNT_WORKERS", 1)

        src = as_segment(get_data(args.reference, debug))
        dst = as_segment(get_data(args.target, debug))
        if args.span_src:
            src = cut_span(src.text, args.span_src)
        if args.span_dst:
            dst = cut_span(dst.text, args.span_dst)

        start_time = time.perf_counter()
        ranges = split3(src, dst, workers=workers)
        logger.info(f"Compared {src.length} and {dst.length} characters into {len(ranges)} ranges"
                    f" in {time.perf_counter() - start_time:.4f}s")

        if args.check:
            check_ranges(ranges, src, dst)

        if args.format == 'd':
            text = render_double(ranges, width)
        else:
            text = RENDERERS[args.format](ranges)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            with open(args.output, "w") as fh:
                fh.write(text)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
