from __future__ import annotations

import pytest

from icky import Error, Span, Token, TokenKind, lex, tokenize


def kinds(src: str) -> list[TokenKind]:
    return [tok.kind for tok in tokenize(src)]


def test_declaration_tokens() -> None:
    assert tokenize("a : Int\na = 0") == [
        Token(TokenKind.LOWER_NAME, Span(0, 1)),
        Token(TokenKind.COLON, Span(2, 1)),
        Token(TokenKind.UPPER_NAME, Span(4, 3)),
        Token(TokenKind.LINE_BREAK, Span(7, 1)),
        Token(TokenKind.LOWER_NAME, Span(8, 1)),
        Token(TokenKind.EQUALS, Span(10, 1)),
        Token(TokenKind.INTEGER_LITERAL, Span(12, 1), value=0),
    ]


def test_empty_input_has_no_tokens() -> None:
    assert tokenize("") == []
    assert tokenize("   \t ") == []


def test_punctuation_needs_no_spaces() -> None:
    assert kinds("a:Int;a=0") == [
        TokenKind.LOWER_NAME,
        TokenKind.COLON,
        TokenKind.UPPER_NAME,
        TokenKind.SEMICOLON,
        TokenKind.LOWER_NAME,
        TokenKind.EQUALS,
        TokenKind.INTEGER_LITERAL,
    ]


def test_name_spans_resolve_to_source_text() -> None:
    src = "value1 : MyType2\nvalue1 = 3"
    names = [tok for tok in tokenize(src) if tok.name() is not None]
    assert [tok.span.text(src) for tok in names] == ["value1", "MyType2", "value1"]
    assert [tok.kind for tok in names] == [
        TokenKind.LOWER_NAME,
        TokenKind.UPPER_NAME,
        TokenKind.LOWER_NAME,
    ]


def test_names_consume_mixed_case_and_digits() -> None:
    src = "fooBAR9x Zed0"
    toks = tokenize(src)
    assert [t.span for t in toks] == [Span(0, 8), Span(9, 4)]


def test_unicode_letters_classify_by_case() -> None:
    src = "café Über"
    toks = tokenize(src)
    assert [t.kind for t in toks] == [TokenKind.LOWER_NAME, TokenKind.UPPER_NAME]
    assert [t.span.text(src) for t in toks] == ["café", "Über"]


def test_whitespace_without_newline_is_dropped() -> None:
    assert kinds("a \t  b") == [TokenKind.LOWER_NAME, TokenKind.LOWER_NAME]


def test_whitespace_run_with_newlines_folds_to_one_line_break() -> None:
    src = "a \t\n  \n b"
    toks = tokenize(src)
    assert [t.kind for t in toks] == [
        TokenKind.LOWER_NAME,
        TokenKind.LINE_BREAK,
        TokenKind.LOWER_NAME,
    ]
    assert toks[1].span == Span(1, 7)


def test_crlf_is_a_line_break_but_bare_cr_is_not() -> None:
    assert kinds("a\r\nb") == [TokenKind.LOWER_NAME, TokenKind.LINE_BREAK, TokenKind.LOWER_NAME]
    assert kinds("a\rb") == [TokenKind.LOWER_NAME, TokenKind.LOWER_NAME]


def test_leading_and_trailing_newlines() -> None:
    assert kinds("\n\na\n") == [TokenKind.LINE_BREAK, TokenKind.LOWER_NAME, TokenKind.LINE_BREAK]


@pytest.mark.parametrize(
    ("src", "value"),
    [
        ("0", 0),
        ("1000", 1000),
        ("007", 7),
        ("0000", 0),
        ("9223372036854775807", 2**63 - 1),
    ],
)
def test_integer_literal_values(src: str, value: int) -> None:
    (tok,) = tokenize(src)
    assert tok.kind == TokenKind.INTEGER_LITERAL
    assert tok.integer_literal() == value
    assert tok.span == Span(0, len(src))


@pytest.mark.parametrize(
    ("src", "value"),
    [
        ("9223372036854775808", -(2**63)),
        ("18446744073709551615", -1),
        ("18446744073709551616", 0),
    ],
)
def test_integer_literal_wraps_like_int64(src: str, value: int) -> None:
    (tok,) = tokenize(src)
    assert tok.value == value


def test_integer_does_not_swallow_following_character() -> None:
    src = "12ab;"
    toks = tokenize(src)
    assert [t.kind for t in toks] == [
        TokenKind.INTEGER_LITERAL,
        TokenKind.LOWER_NAME,
        TokenKind.SEMICOLON,
    ]
    assert toks[0].value == 12
    assert toks[1].span.text(src) == "ab"


def test_token_helpers() -> None:
    name, colon, number = tokenize("x:5")
    assert name.name() == Span(0, 1)
    assert name.integer_literal() is None
    assert colon.name() is None
    assert number.integer_literal() == 5
    assert number.name() is None


def test_unexpected_character_is_error() -> None:
    with pytest.raises(Error) as e:
        tokenize("@")
    assert str(e.value) == "lexer: unexpected character '@' at 1:1"


def test_unexpected_character_reports_line_and_column() -> None:
    with pytest.raises(Error) as e:
        tokenize("a : Int\n  a = -1")
    assert "'-'" in str(e.value)
    assert "at 2:7" in str(e.value)


def test_non_ascii_digits_are_rejected() -> None:
    with pytest.raises(Error) as e:
        tokenize("a = ٣")
    assert str(e.value).startswith("lexer: unexpected character")


def test_lex_is_lazy_until_the_bad_character() -> None:
    it = lex("a @ b")
    first = next(it)
    assert first.kind == TokenKind.LOWER_NAME
    with pytest.raises(Error):
        next(it)


def test_lex_is_restartable_per_call() -> None:
    src = "a : Int; a = 42"
    assert list(lex(src)) == list(lex(src))
    assert tokenize(src) == tokenize(src)


@pytest.mark.parametrize("ch", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_information_separators_are_not_whitespace(ch: str) -> None:
    with pytest.raises(Error) as e:
        tokenize("a" + ch + "b")
    assert str(e.value) == f"lexer: unexpected character {ch!r} at 1:2"


def test_unicode_whitespace_separates_names() -> None:
    src = "a\u00a0b\u2028c"
    assert kinds(src) == [TokenKind.LOWER_NAME, TokenKind.LOWER_NAME, TokenKind.LOWER_NAME]
