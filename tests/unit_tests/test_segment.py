import pytest

from seqhunt.segment import Range, RangeType, Segment, as_segment, range_name, segment


def test_segment_defaults():
    assert segment("hello").string() == "hello"
    assert segment("hello", 1).string() == "ello"
    assert segment("hello", 1, 3).string() == "ell"

    seg = segment("hello", 1, 3)
    assert (seg.pos, seg.length, seg.end) == (1, 3, 4)

def test_segment_shares_the_string():
    text = "ACGTACGT"
    seg = segment(text, 2, 4)
    assert seg.text is text
    # whole-string view returns the string itself
    assert segment(text).string() is text

@pytest.mark.parametrize("pos, length", [(-1, 1), (2, 5), (4, None), (0, -1)])
def test_segment_out_of_bounds(pos, length):
    with pytest.raises(ValueError):
        Segment("abc", pos, length)

def test_segment_is_immutable():
    seg = segment("hello")
    with pytest.raises(AttributeError):
        seg.pos = 2

def test_left_and_right_parts():
    seg = segment("xxHELLOxx", 2, 5)
    assert seg.left_of(2).string() == "HE"
    assert seg.right_of(2).string() == "LLO"
    assert seg.right_of(2).pos == 4
    assert seg.sub(1, 3).string() == "ELL"
    assert seg.left_of(0).length == 0
    assert seg.right_of(5).length == 0

def test_as_segment():
    seg = segment("abc", 1)
    assert as_segment(seg) is seg
    assert as_segment("abc") == Segment("abc", 0, 3)

def test_range_types():
    assert RangeType('=') is RangeType.SYNC
    assert RangeType.DIFF.symbol == '^'
    assert [t.label for t in RangeType] == ['sync', 'diff', 'ins', 'del']

    assert range_name('+') == 'ins'
    assert range_name('-') == 'del'
    assert range_name('?') == '???'

def test_repr():
    r = Range(RangeType.DEL, segment("AAAAaaaa", 4, 4), segment("AAAA", 4, 0))
    assert repr(r) == "'aaaa'4+4 del ''4+0"
    assert repr(segment("hello")) == "'hello'"
