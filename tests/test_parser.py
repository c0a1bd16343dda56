# tests/test_parser.py
import pytest

from wildgram import (
    parse, Pattern, Literal, Star, AnyChar, CharClass, Members, Range,
    WildcardParseError, Incomplete, InvalidCharRange,
)


def test_empty_pattern():
    assert parse("") == Pattern(())


def test_literal_is_one_maximal_span():
    assert parse("hello.txt").tokens == (Literal("hello.txt"),)


def test_star_and_anychar_split_literals():
    assert parse("a*b?c").tokens == (
        Literal("a"), Star(), Literal("b"), AnyChar(), Literal("c"),
    )


def test_adjacent_stars_are_kept():
    assert parse("**").tokens == (Star(), Star())


def test_members_class():
    assert parse("[abc]").tokens == (CharClass((Members("abc"),)),)


def test_negated_class():
    assert parse("[!abc]").tokens == (CharClass((Members("abc"),), negated=True),)


def test_range_class():
    assert parse("[a-z]").tokens == (CharClass((Range("a", "z"),)),)


def test_members_before_and_after_range():
    assert parse("[xa-cy]").tokens == (
        CharClass((Members("x"), Range("a", "c"), Members("y"))),
    )


def test_ranges_back_to_back():
    assert parse("[0-9a-f]").tokens == (CharClass((Range("0", "9"), Range("a", "f"))),)


def test_chained_dash_uses_previous_high_as_low():
    assert parse("[a-c-e]").tokens == (CharClass((Range("a", "c"), Range("c", "e"))),)


@pytest.mark.parametrize("text, choices, negated", [
    ("[]a]", (Members("]a"),), False),
    ("[-a]", (Members("-a"),), False),
    ("[--a]", (Range("-", "a"),), False),
    ("[*?[]", (Members("*?["),), False),
])
def test_first_bracket_char_is_always_a_member(text, choices, negated):
    assert parse(text).tokens == (CharClass(choices, negated),)


@pytest.mark.parametrize("text, choices", [
    ("[!]]", (Members("]"),)),
    ("[!]a]", (Members("]a"),)),
    ("[!!]", (Members("!"),)),
    ("[!-a]", (Range("!", "a"),)),
    ("[!-ax]", (Range("!", "a"), Members("x"))),
])
def test_negated_bracket_body(text, choices):
    assert parse(text).tokens == (CharClass(choices, negated=True),)


def test_dash_after_negation_is_incomplete_without_high():
    with pytest.raises(Incomplete):
        parse("[!-")


def test_close_bracket_and_dash_outside_class_are_literal():
    assert parse("a]-!b").tokens == (Literal("a]-!b"),)


def test_example_from_demo():
    p = parse("blarg[!!xy0-9a-z.[]/*.JP?")
    assert p.tokens == (
        Literal("blarg"),
        CharClass((Members("!xy"), Range("0", "9"), Range("a", "z"), Members(".[")), negated=True),
        Literal("/"),
        Star(),
        Literal(".JP"),
        AnyChar(),
    )


def test_source_is_kept_but_not_compared():
    p = parse("a*")
    assert p.source == "a*"
    assert p == Pattern((Literal("a"), Star()), source="other")


def test_negation_does_not_leak_to_next_class():
    assert parse("[!a][b]").tokens == (
        CharClass((Members("a"),), negated=True),
        CharClass((Members("b"),)),
    )


@pytest.mark.parametrize("text", ["[", "[!", "[abc", "[]", "[!]", "x[a-", "[a-z", "ab[cd]ef[g"])
def test_incomplete(text):
    with pytest.raises(Incomplete) as ei:
        parse(text)
    assert ei.value.pos == len(text)
    assert ei.value.source == text


def test_invalid_char_range():
    with pytest.raises(InvalidCharRange) as ei:
        parse("[z-a]")
    e = ei.value
    assert (e.lo, e.hi) == ("z", "a")
    assert e.pos == 2
    assert "'z'-'a'" in str(e)


def test_range_against_closing_bracket_is_invalid():
    # "-" takes the next char whatever it is, "]" sorts before "a"
    with pytest.raises(InvalidCharRange) as ei:
        parse("[a-]")
    assert (ei.value.lo, ei.value.hi) == ("a", "]")


def test_first_error_wins():
    with pytest.raises(InvalidCharRange):
        parse("[z-a][")


def test_errors_are_syntax_errors():
    assert issubclass(Incomplete, WildcardParseError)
    assert issubclass(InvalidCharRange, WildcardParseError)
    assert issubclass(WildcardParseError, SyntaxError)


def test_error_message_has_caret():
    with pytest.raises(InvalidCharRange) as ei:
        parse("ab[z-a]")
    assert str(ei.value).endswith("ab[z-a]\n    ^")


def test_located_keeps_error_class():
    e = InvalidCharRange("z", "a", "[z-a]", 2).located("pats.txt:3")
    assert isinstance(e, InvalidCharRange)
    assert (e.lo, e.hi, e.where) == ("z", "a", "pats.txt:3")
    assert str(e).startswith("pats.txt:3: invalid character range")
