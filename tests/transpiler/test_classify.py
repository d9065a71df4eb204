from __future__ import annotations

import pytest

from astra.transpiler.classify import LineKind, classify_line, leading_keyword, split_top_level


@pytest.mark.parametrize(
    "line, kind",
    [
        ("", LineKind.BLANK),
        ("   \t ", LineKind.BLANK),
        ("// a comment", LineKind.COMMENT),
        ("   ## another comment", LineKind.COMMENT),
        ("::++ {", LineKind.RAW_START),
        ("   ::++ {   ", LineKind.RAW_START),
        ("}", LineKind.CLOSE),
        ("  }  ", LineKind.CLOSE),
        ("x = 1", LineKind.CONTENT),
        ("};", LineKind.CONTENT),
        ("::++{", LineKind.CONTENT),
    ],
)
def test_classify_line(line: str, kind: LineKind) -> None:
    assert classify_line(line)[0] is kind


def test_classify_line_trims_text() -> None:
    assert classify_line("    print(x)  \n") == (LineKind.CONTENT, "print(x)")


def test_leading_keyword_stops_at_punctuation() -> None:
    assert leading_keyword("if(x > 1) {") == "if"
    assert leading_keyword("format(x)") == "format"
    assert leading_keyword("} else {") == ""


def test_split_top_level_respects_nesting() -> None:
    assert split_top_level("a: map<int, int>, b: function<void(int, int)>") == [
        "a: map<int, int>",
        " b: function<void(int, int)>",
    ]
    assert split_top_level("") == [""]
