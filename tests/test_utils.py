import pytest

from htmldom.utils import escape_html, to_lower, trim


@pytest.mark.parametrize("text", ["HTML", "Div", "already lower", "MiXeD-123_Case"])
def test_to_lower_matches_ascii_lower(text):
    assert to_lower(text) == text.lower()


def test_to_lower_leaves_non_ascii_alone():
    assert to_lower("ÉCOLE") == "École"[:0] + "É" + "cole"


def test_to_lower_is_idempotent():
    once = to_lower("SoMe TeXt")
    assert to_lower(once) == once


def test_trim_strips_html_whitespace():
    assert trim(" \t\n\r\fbody\f\r\n\t ") == "body"


def test_trim_keeps_inner_whitespace():
    assert trim("  a  b  ") == "a  b"


def test_trim_all_whitespace_gives_empty():
    assert trim(" \t\n ") == ""


def test_trim_does_not_strip_vertical_tab():
    assert trim("\vx\v") == "\vx\v"


@pytest.mark.parametrize(
    "char, escaped",
    [
        ("&", "&amp;"),
        ("<", "&lt;"),
        (">", "&gt;"),
        ('"', "&quot;"),
        ("'", "&#39;"),
    ],
)
def test_escape_html_single_characters(char, escaped):
    assert escape_html(char) == escaped


def test_escape_html_mixed_text():
    text = "Sample text with & special < characters >."
    assert escape_html(text) == (
        "Sample text with &amp; special &lt; characters &gt;."
    )


def test_escape_html_plain_text_unchanged():
    assert escape_html("Hello World") == "Hello World"


def test_escape_html_does_not_double_escape_twice_in_one_pass():
    assert escape_html("&amp;") == "&amp;" .replace("&", "&amp;", 1)