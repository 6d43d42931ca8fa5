import json

import pytest

from seqhunt.render import (
    RENDERERS,
    DoubleView,
    LineBuffer,
    ranges_to_records,
    render_double,
    render_json,
    render_single,
    render_tsv,
    shorter,
)
from seqhunt.split3 import split3


@pytest.fixture
def mods_ranges():
    # deletion, replacement and insertion, see test_split3.test_mods_example
    return split3("ATATATCAGAGdddAGCArrrGAGAGC", "ATATATCAGAGAGCARRRGAGAGCiii")

# --- Single view ---

def test_single_view(mods_ranges):
    assert render_single(mods_ranges) == "ATATATCAGAG{12-ddd}AGCA{19^rrr/RRR}GAGAGC{28+iii}\n"

def test_single_view_identical():
    assert render_single(split3("ACGT", "ACGT")) == "ACGT\n"

# --- Tab-separated ---

def test_tsv(mods_ranges):
    assert render_tsv(mods_ranges) == (
        '=\t1+11\t1+11\t"ATATATCAGAG"\t"ATATATCAGAG"\n'
        '-\t12+3\t12+0\t"ddd"\t""\n'
        '=\t15+4\t12+4\t"AGCA"\t"AGCA"\n'
        '^\t19+3\t16+3\t"rrr"\t"RRR"\n'
        '=\t22+6\t19+6\t"GAGAGC"\t"GAGAGC"\n'
        '+\t28+0\t25+3\t""\t"iii"\n'
    )

def test_tsv_short():
    ranges = split3("A" * 30, "C" * 30)
    assert render_tsv(ranges, short=True) == 'diff\t1+30\t1+30\t"AAAAAAAA...AAAAAAAA"\t"CCCCCCCC...CCCCCCCC"\n'

def test_shorter():
    assert shorter("ACGT") == "ACGT"
    assert shorter("A" * 20) == "A" * 20
    assert shorter("0123456789" * 3) == "01234567...23456789"

# --- JSON ---

def test_json(mods_ranges):
    records = json.loads(render_json(mods_ranges))
    assert records == ranges_to_records(mods_ranges)
    assert len(records) == 6
    assert records[1] == {
        "type": "-",
        "src": {"str": "ddd", "pos": 12, "len": 3},
        "dst": {"str": "", "pos": 12, "len": 0},
    }
    assert records[-1]["type"] == "+"
    assert records[-1]["dst"] == {"str": "iii", "pos": 25, "len": 3}

def test_json_empty():
    assert json.loads(render_json([])) == []

# --- Double view ---

def test_line_buffer():
    buf = LineBuffer(10)
    assert buf.capacity() == 10
    buf.put(2, "ACG")
    buf.pos = 5
    assert buf.capacity() == 5
    assert str(buf) == "  ACG"
    buf.clear()
    assert (str(buf), buf.pos) == ("", 0)

def test_double_view_deletion():
    text = render_double(split3("AAAAaaaaAAAA", "AAAAAAAA"))
    assert text == (
        "1   5   9\n"
        "AAAAaaaaAAAA\n"
        "....    ....\n"
        "1   5   5\n"
        "\n"
    )

def test_double_view_insertion():
    text = render_double(split3("ACGT", "ACxxGT"))
    assert text == (
        "1 3 3\n"
        "AC  GT\n"
        "..xx..\n"
        "1 3 5\n"
        "\n"
    )

def test_double_view_longer_target_drives_diff():
    text = render_double(split3("AC", "GGGG"))
    assert text == "1\nAC\nGGGG\n1\n\n"

def test_double_view_wraps_lines():
    seq = "ACGTACGTACGTAC"
    text = render_double(split3(seq, seq), width=10)
    assert text.split("\n") == [
        "1", "ACGTACGTAC", "..........", "1", "",
        "", "GTAC", "....", "", "",
        "",
    ]

def test_double_view_label_needs_room():
    # a one-column range has no room for a one-character label
    text = render_double(split3("AxA", "AyA"))
    lanes = text.split("\n")
    assert lanes[1] == "AxA"
    assert lanes[2] == ".y."
    assert lanes[0] == ""
    assert lanes[3] == ""

def test_double_view_invalid_width():
    with pytest.raises(ValueError):
        DoubleView(0)

def test_renderers_table(mods_ranges):
    assert sorted(RENDERERS) == ["d", "j", "s", "t", "x"]
    assert RENDERERS["s"](mods_ranges) == render_single(mods_ranges)
    assert RENDERERS["x"](mods_ranges) == render_tsv(mods_ranges, short=True)
