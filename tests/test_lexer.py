"""Tests for the declaration tokenizer."""

from __future__ import annotations

from rustdocstring.lexer import (
    CHAR,
    IDENT,
    LIFETIME,
    PUNCT,
    STRING,
    bracket_depths,
    find_closing,
    skip_angle_group,
    strip_line_comment,
    tokenize,
)


def test_tokenize_function_header() -> None:
    tokens = tokenize('pub extern "C" fn run(x: &\'a str) -> u8 {')

    assert [token.value for token in tokens] == [
        "pub",
        "extern",
        '"C"',
        "fn",
        "run",
        "(",
        "x",
        ":",
        "&",
        "'a",
        "str",
        ")",
        "->",
        "u8",
        "{",
    ]
    assert tokens[2].kind == STRING
    assert tokens[9].kind == LIFETIME
    assert tokens[12].kind == PUNCT


def test_char_literals_and_raw_strings() -> None:
    tokens = tokenize("'{' r#\"a \"quoted\" }\"# b'x'")

    assert [token.kind for token in tokens] == [CHAR, STRING, CHAR]


def test_comments_are_skipped() -> None:
    tokens = tokenize("fn a() /* inline */ -> u8 // trailing")

    assert [token.value for token in tokens] == ["fn", "a", "(", ")", "->", "u8"]
    assert all(token.kind in (IDENT, PUNCT) for token in tokens)


def test_token_spans_index_source() -> None:
    text = "struct  Pair"
    name = tokenize(text)[1]

    assert text[name.start : name.end] == "Pair"


def test_unterminated_string_degrades_to_punctuation() -> None:
    tokens = tokenize('"open')

    assert tokens[0].value == '"'
    assert tokens[1].value == "open"


def test_strip_line_comment_ignores_slashes_in_strings() -> None:
    assert strip_line_comment('x: &str = "a//b", // note') == 'x: &str = "a//b", '
    assert strip_line_comment("no comment here") == "no comment here"
    assert strip_line_comment("/// doc") == ""


def test_bracket_depths_ignore_literals() -> None:
    assert bracket_depths(tokenize("struct A {")) == (1, 0)
    assert bracket_depths(tokenize("x: char = '}', (")) == (0, 1)


def test_find_closing_matches_nested_groups() -> None:
    tokens = tokenize("(a, (b, c), [d])")

    assert find_closing(tokens, 0) == len(tokens) - 1
    assert find_closing(tokenize("(a, b"), 0) == -1


def test_skip_angle_group() -> None:
    tokens = tokenize("<T: Fn(u8) -> u8, U>(")

    assert tokens[skip_angle_group(tokens, 0)].value == "("
    assert skip_angle_group(tokenize("(x)"), 0) == 0
    assert skip_angle_group(tokenize("<T {"), 0) == -1
