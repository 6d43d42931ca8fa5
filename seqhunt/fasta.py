"""
FASTA input for the sequence tools.

A FASTA file is read as a single sequence: header lines (starting with '>')
are dropped and the remaining lines are joined without their line breaks.
"""

import gzip
import logging
import re
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from seqhunt.segment import Segment


logger = logging.getLogger(__name__)


@contextmanager
def open_fasta(filepath: str | Path, gzip_aware: bool = True) -> Iterator[TextIO]:
    """
    Open a FASTA file for reading, gzipped files (.gz) included.

    Args:
        filepath: Path to FASTA file
        gzip_aware: Automatically detect and handle gzipped files
    """
    filepath = Path(filepath)
    if gzip_aware and filepath.suffix == ".gz":
        fh = gzip.open(filepath, "rt")
    else:
        fh = open(filepath, "r")
    try:
        yield fh
    finally:
        fh.close()


def _join_sequence(lines: Iterator[str]) -> str:
    parts = []
    for line in lines:
        if line.startswith(">"):
            continue
        parts.append(line.rstrip("\r\n"))
    return "".join(parts)


def read_fasta(path: str | Path | None = None, gzip_aware: bool = True) -> str:
    """
    Read a FASTA file and return its sequence data as one line.

    Args:
        path: Path to FASTA file; standard input is read when empty or None
        gzip_aware: Automatically detect and handle gzipped files

    Returns:
        The sequence without header lines and line breaks. Several records
        in one file are joined into one sequence.

    Example:
        >>> read_fasta(Path("original.fasta"))
        'ATATATCAGAGdddAGCArrrGAGAGC'
    """
    if not path:
        return _join_sequence(sys.stdin)

    with open_fasta(path, gzip_aware) as fh:
        data = _join_sequence(fh)
    logger.debug(f"read_fasta: {path}: {len(data)} characters")
    return data


_SPAN_RE = re.compile(r"^(\d*)([-+]?)(\d*)$")


def cut_span(seq: str, span: str) -> Segment:
    """
    Return the segment of `seq` selected by a one-based span specification.

    For 'hello':
        from-to    1-5 -> 'hello', 2-4 -> 'ell'
        from+len   1+5 -> 'hello', 2+3 -> 'ell'
        from       1   -> 'hello', 2   -> 'ello'
        -to        -3  -> 'hel'
        +len       +3  -> 'hel'

    Positions beyond the sequence are clamped to it.
    """
    match = _SPAN_RE.match(span)
    if not match or not (match.group(1) or match.group(3)):
        raise ValueError(f"Invalid span: '{span}'")
    start, op, end = match.groups()

    size = len(seq)
    pos = min(max(int(start) - 1, 0), size) if start else 0
    length = size - pos
    if end:
        if op == "+":
            length = int(end)
        else:
            length = int(end) - pos
    length = max(0, min(length, size - pos))
    return Segment(seq, pos, length)
