import difflib

import pytest
from rich.text import Text

from pathdiff.differ import diff
from pathdiff.edit_path import Edit
from pathdiff.render import (
    colorize_unified,
    format_edit,
    get_grouped_opcodes,
    render,
    render_rich,
    unified_diff,
)


def test_format_edit():
    assert format_edit(Edit.nil(0, "same")) == "  same"
    assert format_edit(Edit.deletion(0, "gone")) == "- gone"
    assert format_edit(Edit.insertion(0, "new")) == "+ new"
    # items are rendered with str()
    assert format_edit(Edit.insertion(0, 42)) == "+ 42"


def test_render_plain():
    script = diff(["a", "b", "c"], ["a", "x", "c"])
    assert render(script) == "  a\n- b\n+ x\n  c\n"
    assert render([]) == ""


def test_render_rich_styles():
    script = [Edit.nil(0, "a"), Edit.deletion(1, "b"), Edit.insertion(1, "x")]
    text = render_rich(script)

    assert isinstance(text, Text)
    assert text.plain == render(script)

    styles = {text.plain[span.start:span.end]: str(span.style) for span in text.spans}
    assert styles == {"- b\n": "red", "+ x\n": "green"}


def test_unified_diff_small():
    first = ["a", "b", "c"]
    second = ["a", "x", "c"]
    lines = list(unified_diff(first, second, diff(first, second), "old.txt", "new.txt"))

    assert lines == [
        "--- old.txt\n",
        "+++ new.txt\n",
        "@@ -1,3 +1,3 @@\n",
        " a\n",
        "-b\n",
        "+x\n",
        " c\n",
    ]


def test_unified_diff_dates_in_header():
    lines = list(unified_diff(["a"], ["b"], diff(["a"], ["b"]), "a", "b", "Mon", "Tue"))
    assert lines[:2] == ["--- a\tMon\n", "+++ b\tTue\n"]
    assert lines[2] == "@@ -1 +1 @@\n"


def test_unified_diff_no_changes():
    first = ["a", "b"]
    assert list(unified_diff(first, first, diff(first, first))) == []
    assert list(unified_diff([], [], [])) == []


def test_unified_diff_trims_context():
    first = [str(i) for i in range(20)]
    second = list(first)
    second[9] = "X"
    lines = list(unified_diff(first, second, diff(first, second)))

    assert lines[2] == "@@ -7,7 +7,7 @@\n"
    assert lines[3:] == [" 6\n", " 7\n", " 8\n", "-9\n", "+X\n", " 10\n", " 11\n", " 12\n"]


def test_unified_diff_empty_range():
    lines = list(unified_diff([], ["a"], diff([], ["a"])))
    assert lines[2] == "@@ -0,0 +1 @@\n"


def test_grouped_opcodes_split_distant_changes():
    opcodes = [
        ('replace', 0, 1, 0, 1),
        ('equal', 1, 20, 1, 20),
        ('delete', 20, 21, 20, 20),
    ]
    groups = get_grouped_opcodes(opcodes, context=2)
    assert groups == [
        [('replace', 0, 1, 0, 1), ('equal', 1, 3, 1, 3)],
        [('equal', 18, 20, 18, 20), ('delete', 20, 21, 20, 20)],
    ]


def test_colorize_unified():
    text = colorize_unified(["--- a\n", "+++ b\n", "@@ -1 +1 @@\n", "-x\n", "+y\n", " z\n"])
    styles = {text.plain[span.start:span.end]: str(span.style) for span in text.spans}

    assert styles["--- a\n"] == "bold"
    assert styles["+++ b\n"] == "bold"
    assert styles["@@ -1 +1 @@\n"] == "cyan"
    assert styles["-x\n"] == "red"
    assert styles["+y\n"] == "green"
    assert " z\n" not in styles


SHARED = [str(i) for i in range(1, 6)]


@pytest.mark.parametrize("first, second", [
    # 5-line shared prefix
    (SHARED + ["x"], SHARED + ["y"]),
    # 5-line shared suffix
    (["x"] + SHARED, ["y"] + SHARED),
    # change between two short equal runs
    (SHARED + ["x"] + SHARED, SHARED + ["y"] + SHARED),
    # changes far enough apart to split into two hunks
    (["x"] + SHARED + SHARED + ["p"], ["y"] + SHARED + SHARED + ["q"]),
])
def test_unified_diff_matches_difflib(first, second):
    lines = [line.rstrip("\n") for line in unified_diff(first, second, diff(first, second))]
    expected = list(difflib.unified_diff(first, second, fromfile="a", tofile="b", lineterm=""))
    assert lines == expected


def test_grouped_opcodes_trim_short_leading_equal():
    opcodes = [('equal', 0, 5, 0, 5), ('replace', 5, 6, 5, 6)]
    assert get_grouped_opcodes(opcodes, context=3) == [
        [('equal', 2, 5, 2, 5), ('replace', 5, 6, 5, 6)],
    ]
