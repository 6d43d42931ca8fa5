"""
Output formats for a comparison result (a list of ranges).

Every renderer works from the ranges alone and returns the text to print;
positions are shown one-based.

- single view:     source text with differences in braces
- double view:     source and target in parallel lanes
- tab-separated:   one line per range
- json:            array of range objects
"""

import json
from collections.abc import Callable

from seqhunt.segment import Range, RangeType, Segment


DOUBLE_VIEW_WIDTH = 70

# single view delimiters
BGN_CHAR = '{'
MID_CHAR = '/'
END_CHAR = '}'

SHORT_MAX = 20
SHORT_KEEP = 8


def render_single(ranges: list[Range]) -> str:
    """
    Source sequence intermixed with the differences.

    {N-src}      deleted at N
    {N+dst}      inserted at N
    {N^src/dst}  replaced at N
    """
    out = []
    for r in ranges:
        if r.kind is RangeType.SYNC:
            out.append(r.src.string())
            continue
        out.append(f"{BGN_CHAR}{r.src.pos + 1}{r.kind.symbol}")
        if r.kind is RangeType.DEL:
            out.append(r.src.string())
        elif r.kind is RangeType.INS:
            out.append(r.dst.string())
        else:
            out.append(r.src.string() + MID_CHAR + r.dst.string())
        out.append(END_CHAR)
    out.append("\n")
    return "".join(out)


def shorter(s: str) -> str:
    """Abbreviate a long string to its head and tail."""
    if len(s) <= SHORT_MAX:
        return s
    return s[:SHORT_KEEP] + "..." + s[-SHORT_KEEP:]


def render_tsv(ranges: list[Range], short: bool = False) -> str:
    """
    One tab-separated line per range:

        type  spos+slen  dpos+dlen  "src"  "dst"

    With `short`, the type is spelled out and long strings are abbreviated.
    """
    lines = []
    for r in ranges:
        kind = r.kind.symbol
        src = r.src.string()
        dst = r.dst.string()
        if short:
            kind = r.kind.label
            src = shorter(src)
            dst = shorter(dst)
        lines.append(f"{kind}\t{r.src.pos + 1}+{r.src.length}\t{r.dst.pos + 1}+{r.dst.length}"
                     f"\t\"{src}\"\t\"{dst}\"\n")
    return "".join(lines)


def _segment_record(seg: Segment) -> dict:
    return {"str": seg.string(), "pos": seg.pos + 1, "len": seg.length}


def ranges_to_records(ranges: list[Range]) -> list[dict]:
    return [
        {"type": r.kind.symbol, "src": _segment_record(r.src), "dst": _segment_record(r.dst)}
        for r in ranges
    ]


def render_json(ranges: list[Range]) -> str:
    return json.dumps(ranges_to_records(ranges), indent=1) + "\n"


class LineBuffer:
    """Fixed-size, space-padded line with a write position."""

    def __init__(self, size: int = DOUBLE_VIEW_WIDTH) -> None:
        self.size = size
        self.clear()

    def clear(self) -> None:
        self.chars = [' '] * self.size
        self.pos = 0

    def capacity(self) -> int:
        """Room left between the write position and the end of the line."""
        return self.size - self.pos

    def put(self, at: int, s: str) -> None:
        self.chars[at:at + len(s)] = s

    def __str__(self) -> str:
        return "".join(self.chars).rstrip(' ')


class _Lane:
    def __init__(self, size: int) -> None:
        self.seq = LineBuffer(size)
        self.num = LineBuffer(size)


class DoubleView:
    """
    Source and target shown in parallel. An output line is made of four lanes:

        0   4   8   12  16           <- upper, num
        AAAABBBBCCCCddddEEEE         <- upper, seq
        ....rrrr....    ....iiii     <- lower, seq
                        12  16       <- lower, num
    """

    def __init__(self, width: int = DOUBLE_VIEW_WIDTH) -> None:
        if width <= 0:
            raise ValueError(f"Line width must be positive, got {width}")
        self.upper = _Lane(width)
        self.lower = _Lane(width)
        self.lines: list[str] = []

    def flush(self) -> None:
        """Emit all four lanes and start a new line."""
        for buf in (self.upper.num, self.upper.seq, self.lower.seq, self.lower.num):
            self.lines.append(str(buf))
            buf.clear()
        self.lines.append("")

    @staticmethod
    def _label(lane: _Lane, at: int, room: int, label: str) -> None:
        if len(label) < room:
            lane.num.put(at, label)

    def _segment(self, longer: _Lane, shorter: _Lane, seg1: Segment, seg2: Segment,
                 fill: str | None = None) -> None:
        """
        Lay out `seg1` on the `longer` lane and `seg2` under/over it.

        `fill` replaces the text of `seg2` with that character; a space
        leaves the shorter lane blank.
        """
        shorter.seq.pos = longer.seq.pos
        pos, pos2 = seg1.pos, seg2.pos
        rest, rest2 = seg1.length, seg2.length
        first = True
        while True:
            room = longer.seq.capacity()
            if room == 0:
                self.flush()
                room = longer.seq.capacity()
            n = min(room, rest)
            at = longer.seq.pos
            if first:
                self._label(longer, at, n, str(pos + 1))
                self._label(shorter, at, n, str(pos2 + 1))
                first = False
            longer.seq.put(at, seg1.text[pos:pos + n])
            pos += n
            rest -= n
            n2 = min(n, rest2)
            if fill is None:
                shorter.seq.put(at, seg2.text[pos2:pos2 + n2])
            elif fill != ' ':
                shorter.seq.put(at, fill * n2)
            pos2 += n2
            rest2 -= n2
            longer.seq.pos += n
            if rest <= 0:
                break
        shorter.seq.pos = longer.seq.pos

    def add(self, r: Range) -> None:
        if r.kind is RangeType.SYNC:
            self._segment(self.upper, self.lower, r.src, r.dst, '.')
        elif r.kind is RangeType.DIFF:
            # the longer side drives the layout
            if r.dst.length > r.src.length:
                self._segment(self.lower, self.upper, r.dst, r.src)
            else:
                self._segment(self.upper, self.lower, r.src, r.dst)
        elif r.kind is RangeType.INS:
            self._segment(self.lower, self.upper, r.dst, r.src, ' ')
        else:
            self._segment(self.upper, self.lower, r.src, r.dst, ' ')

    def render(self, ranges: list[Range]) -> str:
        for r in ranges:
            self.add(r)
        self.flush()
        return "\n".join(self.lines) + "\n"


def render_double(ranges: list[Range], width: int = DOUBLE_VIEW_WIDTH) -> str:
    return DoubleView(width).render(ranges)


RENDERERS: dict[str, Callable[[list[Range]], str]] = {
    's': render_single,
    'd': render_double,
    't': render_tsv,
    'j': render_json,
    'x': lambda ranges: render_tsv(ranges, short=True),
}
