from collections import namedtuple
from enum import Enum


class RangeType(str, Enum):
    """
    Kind of a range in a comparison result.

    The value is the one-character marker used in the single view and the
    tab-separated output; `label` is the long name.
    """

    SYNC = '='  # identical
    DIFF = '^'  # replacement
    INS = '+'   # target only (inserted)
    DEL = '-'   # source only (deleted)

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    RangeType.SYNC: 'sync',
    RangeType.DIFF: 'diff',
    RangeType.INS: 'ins',
    RangeType.DEL: 'del',
}


def range_name(symbol: str) -> str:
    """Long name of a range marker, '???' if the marker is unknown."""
    try:
        return RangeType(symbol).label
    except ValueError:
        return '???'


class Segment(namedtuple('Segment', 'text pos length')):
    """
    A portion of a string: the whole string, a 0-based start position and a length.

    The string data is never copied; segments of the same string share it.
    Segments are immutable, trimming one produces a new segment.
    """

    __slots__ = ()

    def __new__(cls, text: str, pos: int = 0, length: int | None = None) -> 'Segment':
        if length is None:
            length = len(text) - pos
        if pos < 0 or length < 0 or pos + length > len(text):
            raise ValueError(f"Segment out of bounds: pos={pos}, length={length}, string length={len(text)}")
        return super().__new__(cls, text, pos, length)

    @property
    def end(self) -> int:
        return self.pos + self.length

    def string(self) -> str:
        """Return the substring this segment covers."""
        if self.pos == 0 and self.length == len(self.text):
            return self.text
        return self.text[self.pos:self.end]

    def left_of(self, offset: int) -> 'Segment':
        """The part before the relative `offset`."""
        return Segment(self.text, self.pos, offset)

    def right_of(self, offset: int) -> 'Segment':
        """The part from the relative `offset` to the end."""
        return Segment(self.text, self.pos + offset, self.length - offset)

    def sub(self, offset: int, length: int) -> 'Segment':
        return Segment(self.text, self.pos + offset, length)

    def __repr__(self) -> str:
        if self.pos == 0 and self.length == len(self.text):
            return repr(self.text)
        return f"{self.string()!r}{self.pos}+{self.length}"


def segment(text: str, pos: int = 0, length: int | None = None) -> Segment:
    """Build a segment, defaulting to the whole string (or its rest from `pos`)."""
    return Segment(text, pos, length)


def as_segment(value: 'str | Segment') -> Segment:
    if isinstance(value, Segment):
        return value
    return Segment(value)


class Range(namedtuple('Range', 'kind src dst')):
    """
    A pair of corresponding source and target segments.

    kind  | src        | dst
    ------+------------+-----------------------------
    SYNC  | non-empty  | non-empty, same content
    DIFF  | non-empty  | non-empty, different content
    DEL   | non-empty  | empty
    INS   | empty      | non-empty
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{self.src!r} {self.kind.label} {self.dst!r}"
