"""
Split-into-three comparison of two sequences.

The longest common substring of the two inputs splits each of them into
three parts: the left side, the common part and the right side. The common
part is a SYNC range; the left and right sides are compared again the same
way until either side runs out (an INS or DEL range) or the two sides have
nothing in common (a DIFF range). The result has the longest identities and
the smallest differences this greedy strategy can find.
"""

import logging

from seqhunt.lcss import find_longest_match
from seqhunt.segment import Range, RangeType, Segment, as_segment


logger = logging.getLogger(__name__)


def _classify(src: Segment, dst: Segment) -> Range | None:
    """Range for a pair where at least one side is empty, None when both are."""
    if src.length == 0 and dst.length == 0:
        return None
    if dst.length == 0:
        return Range(RangeType.DEL, src, dst)
    if src.length == 0:
        return Range(RangeType.INS, src, dst)
    raise ValueError("both segments are non-empty")


def split3(src: str | Segment, dst: str | Segment, workers: int | None = None) -> list[Range]:
    """
    Compare two sequences (or segments of them) and return the list of ranges
    that covers both of them from start to end.

    Ranges are ordered by position. Joining the `src` segments of the result
    gives back the source, joining the `dst` segments gives back the target.

    `workers` is passed on to find_longest_match().
    """
    src = as_segment(src)
    dst = as_segment(dst)

    if src.length == 0 or dst.length == 0:
        edge = _classify(src, dst)
        return [edge] if edge else []

    # Recursion on the left and right sides is replaced by a stack of pending
    # pairs, long sequences would otherwise exceed the interpreter's recursion
    # limit. Ranges are collected in any order and sorted at the end; every
    # range is non-empty on at least one side, so (src.pos, dst.pos) is
    # strictly increasing along the result.
    stack = [(src, dst, 0)]
    ranges: list[Range] = []
    debug = logger.isEnabledFor(logging.DEBUG)

    while stack:
        s, d, depth = stack.pop()
        if debug:
            logger.debug(f"split3: entry({depth}) {s!r} < {d!r}")

        mid = find_longest_match(s.string(), d.string(), workers=workers)

        if mid.length == 0:
            diff = Range(RangeType.DIFF, s, d)
            if debug:
                logger.debug(f"split3: exit({depth}) total diff: {diff!r}")
            ranges.append(diff)
            continue

        sync = Range(RangeType.SYNC, s.sub(mid.spos, mid.length), d.sub(mid.dpos, mid.length))
        if debug:
            logger.debug(f"split3: mid sync: {sync!r}")
        ranges.append(sync)

        sides = (
            ('left', s.left_of(mid.spos), d.left_of(mid.dpos)),
            ('right', s.right_of(mid.spos + mid.length), d.right_of(mid.dpos + mid.length)),
        )
        for side, s_part, d_part in sides:
            if s_part.length and d_part.length:
                if debug:
                    logger.debug(f"split3: {side} split3: {s_part!r} < {d_part!r}")
                stack.append((s_part, d_part, depth + 1))
                continue
            rng = _classify(s_part, d_part)
            if debug:
                logger.debug(f"split3: {side} -> {repr(rng) if rng else 'none'}")
            if rng:
                ranges.append(rng)

    ranges.sort(key=lambda r: (r.src.pos, r.dst.pos))

    if debug:
        logger.debug("split3: exit:")
        for r in ranges:
            logger.debug(repr(r))
    return ranges


def check_ranges(ranges: list[Range], source: str | Segment, target: str | Segment) -> None:
    """
    Verify that `ranges` is a valid comparison result of `source` and `target`.

    Raises ValueError describing the first problem found: a gap or overlap on
    either side, a range whose kind does not fit its segments, or ranges that
    do not rebuild the two strings.
    """
    source = as_segment(source)
    target = as_segment(target)
    spos, dpos = source.pos, target.pos
    for i, r in enumerate(ranges):
        if r.src.pos != spos or r.dst.pos != dpos:
            raise ValueError(f"Range {i} ({r!r}) starts at {r.src.pos}/{r.dst.pos}, expected {spos}/{dpos}")
        slen, dlen = r.src.length, r.dst.length
        if r.kind is RangeType.SYNC:
            ok = slen > 0 and r.src.string() == r.dst.string()
        elif r.kind is RangeType.DIFF:
            ok = slen > 0 and dlen > 0 and r.src.string() != r.dst.string()
        elif r.kind is RangeType.DEL:
            ok = slen > 0 and dlen == 0
        else:
            ok = slen == 0 and dlen > 0
        if not ok:
            raise ValueError(f"Range {i} ({r!r}) does not fit its kind '{r.kind.label}'")
        spos += slen
        dpos += dlen

    if ''.join(r.src.string() for r in ranges) != source.string():
        raise ValueError("Source segments do not rebuild the source sequence")
    if ''.join(r.dst.string() for r in ranges) != target.string():
        raise ValueError("Target segments do not rebuild the target sequence")
