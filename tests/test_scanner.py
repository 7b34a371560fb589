from __future__ import annotations

import pytest

from stacklite.errors import LexicalError
from stacklite.scanner import scan
from stacklite.tokens import Location, TokenKind


def _kinds(src: str) -> list[tuple[TokenKind, str]]:
    return [(t.kind, t.text) for t in scan("<test>", src)]


def test_tokens_basic():
    assert _kinds("1 2 +\nprint") == [
        (TokenKind.INT_LITERAL, "1"),
        (TokenKind.INT_LITERAL, "2"),
        (TokenKind.PLUS, "+"),
        (TokenKind.WORD, "print"),
    ]


def test_all_operators():
    assert _kinds("+ - * /") == [
        (TokenKind.PLUS, "+"),
        (TokenKind.MINUS, "-"),
        (TokenKind.TIMES, "*"),
        (TokenKind.DIV, "/"),
    ]


def test_one_token_per_step_without_whitespace():
    # Adjacent tokens are split by rule, not merged into one step.
    assert _kinds("12+3print") == [
        (TokenKind.INT_LITERAL, "12"),
        (TokenKind.PLUS, "+"),
        (TokenKind.INT_LITERAL, "3"),
        (TokenKind.WORD, "print"),
    ]
    assert _kinds("1-") == [(TokenKind.INT_LITERAL, "1"), (TokenKind.MINUS, "-")]


def test_words_allow_digits_and_underscores():
    assert _kinds("_a1 foo_bar9") == [(TokenKind.WORD, "_a1"), (TokenKind.WORD, "foo_bar9")]


def test_digits_before_word_split():
    assert _kinds("9abc") == [(TokenKind.INT_LITERAL, "9"), (TokenKind.WORD, "abc")]


def test_text_is_verbatim():
    toks = list(scan("<test>", "007"))
    assert len(toks) == 1
    assert toks[0].text == "007"


def test_empty_and_whitespace_only():
    assert len(scan("<test>", "")) == 0
    assert len(scan("<test>", " \n\t  \n")) == 0


def test_locations():
    toks = list(scan("prog.sl", "1 2 +\n  print\n\n3"))
    assert [t.location for t in toks] == [
        Location("prog.sl", 1, 1),
        Location("prog.sl", 1, 3),
        Location("prog.sl", 1, 5),
        Location("prog.sl", 2, 3),
        Location("prog.sl", 4, 1),
    ]


def test_locations_are_monotonic():
    src = "1 22 +\n print\n\t 3 4 *   /\nx"
    locs = [(t.location.line, t.location.column) for t in scan("<test>", src)]
    assert locs == sorted(locs)
    assert locs[-1][0] == src.count("\n") + 1


@pytest.mark.parametrize("n", [0, 1, 9, 10, 42, 1234567890, 10**30])
def test_literal_text_parses_back(n: int):
    toks = list(scan("<test>", str(n)))
    assert [t.kind for t in toks] == [TokenKind.INT_LITERAL]
    assert int(toks[0].text) == n


def test_unknown_char_raises_with_location():
    with pytest.raises(LexicalError) as e:
        scan("<stdin>", "1 @ 2")
    assert e.value.location == Location("<stdin>", 1, 3)
    assert (e.value.line, e.value.col) == (1, 3)
    assert str(e.value) == "<stdin>:1:3: SYNTAX ERROR: Invalid character: `@`"


def test_unknown_char_on_later_line():
    with pytest.raises(LexicalError) as e:
        scan("f", "1\n  2 $")
    assert e.value.location == Location("f", 2, 5)


def test_token_display():
    tok = scan("<test>", "print")[0]
    assert str(tok) == "[Word:'print']"
    assert str(tok.location) == "<test>:1:1"


def test_non_ascii_digits_are_rejected():
    with pytest.raises(LexicalError) as e:
        scan("x", "1 ١٢")
    assert e.value.location == Location("x", 1, 3)
    assert "`١`" in e.value.message
