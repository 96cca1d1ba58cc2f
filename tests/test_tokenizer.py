import pytest

from htmldom.tokenizer import Token, TokenType, Tokenizer, tokenize


def _chars(tokens):
    return "".join(t.data for t in tokens if t.type is TokenType.CHARACTER)


def test_each_text_character_is_a_token():
    tokens = tokenize("Hello World")
    assert all(t.type is TokenType.CHARACTER for t in tokens)
    assert [t.data for t in tokens] == list("Hello World")


def test_start_and_end_tags():
    tokens = tokenize("<p>Hi</p>")
    assert tokens[0] == Token(TokenType.START_TAG, "p")
    assert tokens[-1] == Token(TokenType.END_TAG, "p")
    assert _chars(tokens) == "Hi"


def test_tag_name_case_is_preserved():
    tokens = tokenize("<DiV></DIV>")
    assert [t.data for t in tokens] == ["DiV", "DIV"]


def test_double_quoted_attributes():
    (token,) = tokenize('<div id="main" class="item highlight">')
    assert token.type is TokenType.START_TAG
    assert token.data == "div"
    assert token.attributes == {"id": "main", "class": "item highlight"}


def test_single_quoted_attribute():
    (token,) = tokenize("<a href='x.html'>")
    assert token.attributes == {"href": "x.html"}


def test_unquoted_attributes():
    (token,) = tokenize('<input type=text name=username>')
    assert token.attributes == {"type": "text", "name": "username"}


def test_unquoted_attribute_followed_by_space():
    (token,) = tokenize("<input type=text >")
    assert token.attributes == {"type": "text"}


def test_unquoted_value_drops_nul():
    (token,) = tokenize("<a b=x\0y>")
    assert token.attributes == {"b": "xy"}


def test_boolean_attribute_has_empty_value():
    (token,) = tokenize("<input disabled checked>")
    assert token.attributes == {"disabled": "", "checked": ""}


def test_self_closing_tag():
    (token,) = tokenize("<br/>")
    assert token.data == "br"
    assert token.self_closing is True


def test_self_closing_after_quoted_attribute():
    (token,) = tokenize('<img src="a.png" />')
    assert token.self_closing is True
    assert token.attributes == {"src": "a.png"}


def test_plain_tag_is_not_self_closing():
    (token,) = tokenize("<div>")
    assert token.self_closing is False


def test_less_than_not_followed_by_letter_is_text():
    tokens = tokenize("a < b")
    assert _chars(tokens) == "a < b"
    assert all(t.type is TokenType.CHARACTER for t in tokens)


def test_unfinished_tag_at_end_is_dropped():
    assert tokenize("<div") == []
    assert tokenize('<p class="x') == []


def test_end_tag_open_with_non_letter_swallows_character():
    tokens = tokenize("</ >")
    assert tokens == [Token(TokenType.CHARACTER, ">")]


def test_attribute_value_with_greater_than_inside_quotes():
    (token,) = tokenize('<p title="a > b">')
    assert token.attributes == {"title": "a > b"}


def test_tokenizer_can_run_twice():
    tokenizer = Tokenizer("<b>x</b>")
    first = tokenizer.tokenize()
    second = tokenizer.tokenize()
    assert first == second
    assert len(first) == 3


@pytest.mark.parametrize(
    "html",
    [
        "<html><body><p>Hello World</p></body></html>",
        '<div class="a b" id=c>text</div>',
        "plain text only",
    ],
)
def test_text_between_tags_is_preserved(html):
    import re

    expected = re.sub(r"<[^>]*>", "", html)
    assert _chars(tokenize(html)) == expected


def test_emitted_tags_are_distinct_objects():
    first, second = tokenize('<a x="1"><b y="2">')
    assert first.attributes == {"x": "1"}
    assert second.attributes == {"y": "2"}
    assert first is not second