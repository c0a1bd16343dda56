# wildgram/pattern/parser.py
"""Wildcard pattern parser.

Grammar (one left-to-right scan, no escapes):
    pattern  := (literal | "*" | "?" | bracket)*
    bracket  := "[" first item* "]"
              | "[!" ("]" item* | item+) "]"   ("-" right after "[!" ranges from "!")
    first    := any char           (taken as a member even if "]" or "-")
    item     := char "-" char      (inclusive range, lo <= hi)
              | char               (member, anything except "]" and "-")
    literal  := maximal run of chars other than "*", "?", "["

The scan is a two-state machine (literal-accumulating / in-bracket) over raw
character offsets. Pending text is tracked as a capture start offset and cut
out of the source only when a delimiter is reached.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
from .ast import (
    Literal, Star, AnyChar, CharClass, Members, Range,
    Choice, Token, Pattern,
)

# ---------- error handling utils ----------
def _line_bounds(src: str, pos: int) -> Tuple[int, int]:
    """pos가 속한 라인의 [start, end) 범위를 반환."""
    start = src.rfind("\n", 0, pos)
    start = 0 if start < 0 else start + 1
    end = src.find("\n", pos)
    end = len(src) if end < 0 else end
    return start, end

def _caret_snippet(src: str, pos: int) -> str:
    """해당 절대 오프셋 pos에 캐럿(^)을 찍은 스니펫을 생성."""
    start, end = _line_bounds(src, pos)
    line = src[start:end]
    col = (pos - start) + 1
    caret = " " * (col - 1) + "^"
    return f"{line}\n{caret}"


class WildcardParseError(SyntaxError):
    """Base class of all pattern parse failures.

    `source` is the pattern text, `pos` the character offset the error is
    reported at. The message carries a caret snippet pointing at `pos`;
    `where` (a file location, say) is prefixed to it when given.
    """
    def __init__(self, message: str, source: str = "", pos: int = 0,
                 where: Optional[str] = None):
        self.reason = message
        self.source = source
        self.pos = pos
        self.where = where
        head = f"{where}: {message}" if where else message
        super().__init__(f"{head} at {pos}\n{_caret_snippet(source, pos)}")

    def located(self, where: str) -> "WildcardParseError":
        return type(self)(self.reason, self.source, self.pos, where=where)

class Incomplete(WildcardParseError):
    """Pattern text ends inside a bracket expression."""

class InvalidCharRange(WildcardParseError):
    """Bracket range whose low endpoint sorts after its high endpoint."""
    def __init__(self, lo: str, hi: str, source: str = "", pos: int = 0,
                 where: Optional[str] = None):
        self.lo = lo
        self.hi = hi
        super().__init__(f"invalid character range {lo!r}-{hi!r}", source, pos, where)

    def located(self, where: str) -> "InvalidCharRange":
        return InvalidCharRange(self.lo, self.hi, self.source, self.pos, where=where)


class _PatternParser:
    def __init__(self, src: str):
        self.s = src
        self.i = 0
        self.n = len(src)
        self.tokens: List[Token] = []
        # Where has the active capture started?
        self.start: Optional[int] = None
        # Should the bracket expression being read be negated?
        self.negate = False
        # Choices of the open bracket expression; None while outside one.
        self.choices: Optional[List[Choice]] = None
        self.bracket_pos = 0

    def _peek(self) -> Optional[str]:
        if self.i >= self.n:
            return None
        return self.s[self.i]

    def _bump(self, n: int = 1) -> None:
        self.i += n

    def _eof(self) -> bool:
        return self.i >= self.n

    def _incomplete(self) -> Incomplete:
        return Incomplete(
            f"incomplete bracket expression, '[' at {self.bracket_pos} is never closed",
            self.s, self.n,
        )

    def _capture(self, index: int) -> Optional[str]:
        """Cuts the active capture up to index if it is non-empty, and clears it."""
        start, self.start = self.start, None
        if start is not None and index > start:
            return self.s[start:index]
        return None

    def _flush_literal(self, index: int) -> None:
        text = self._capture(index)
        if text is not None:
            self.tokens.append(Literal(text))

    def _flush_members(self, index: int) -> None:
        text = self._capture(index)
        if text is not None:
            self.choices.append(Members(text))  # type: ignore[union-attr]

    # ---- states ----

    def run(self) -> Pattern:
        while not self._eof():
            if self.choices is None:
                self._step_literal()
            else:
                self._step_bracket()
        if self.choices is not None:
            raise self._incomplete()
        self._flush_literal(self.n)
        return Pattern(tuple(self.tokens), self.s)

    def _step_literal(self) -> None:
        c = self._peek()
        if c == "*":
            self._flush_literal(self.i)
            self.tokens.append(Star())
            self._bump()
        elif c == "?":
            self._flush_literal(self.i)
            self.tokens.append(AnyChar())
            self._bump()
        elif c == "[":
            self._open_bracket()
        else:
            if self.start is None:
                self.start = self.i
            self._bump()

    def _open_bracket(self) -> None:
        self._flush_literal(self.i)
        self.bracket_pos = self.i
        self.choices = []
        self._bump()
        if self._peek() == "!":
            self.negate = True
            self._bump()
            if self._eof():
                raise self._incomplete()
            # "]" right after "[!" is a member; "-" ranges from "!" itself
            if self._peek() == "]":
                self.start = self.i
                self._bump()
            return
        if self._eof():
            raise self._incomplete()
        # first char after "[" is always a member, "]" and "-" included
        self.start = self.i
        self._bump()

    def _step_bracket(self) -> None:
        c = self._peek()
        if c == "-":
            # capture excludes the char right before "-": it is the range's lo
            self._flush_members(self.i - 1)
            lo = self.s[self.i - 1]
            dash = self.i
            self._bump()
            hi = self._peek()
            if hi is None:
                raise self._incomplete()
            if hi < lo:
                raise InvalidCharRange(lo, hi, self.s, dash)
            self.choices.append(Range(lo, hi))  # type: ignore[union-attr]
            self._bump()
        elif c == "]":
            self._flush_members(self.i)
            self.tokens.append(CharClass(tuple(self.choices), self.negate))  # type: ignore[arg-type]
            self.negate = False
            self.choices = None
            self._bump()
        else:
            if self.start is None:
                self.start = self.i
            self._bump()


def parse_pattern(src: str) -> Pattern:
    """Parse wildcard text into a `Pattern`.

    Raises `Incomplete` for an unterminated bracket expression and
    `InvalidCharRange` for an inverted range; nothing is returned on error.
    """
    return _PatternParser(src).run()
