# wildgram/pattern/render.py
from __future__ import annotations
from typing import List
from .ast import (
    Literal, Star, AnyChar, CharClass, Members, Range,
    Choice, Token, Pattern,
)

# Canonical text: parse(render(p)) == p for every parser-produced p.
# Hand-built classes with "]" or "-" placed mid-member do not read back.

def _render_choice(c: Choice, out: List[str]) -> None:
    if isinstance(c, Members):
        out.append(c.text)
    elif isinstance(c, Range):
        out.append(f"{c.lo}-{c.hi}")
    else:
        raise AssertionError(f"unknown choice: {c!r}")

def _render_token(tok: Token, out: List[str]) -> None:
    if isinstance(tok, Literal):
        out.append(tok.text)
    elif isinstance(tok, Star):
        out.append("*")
    elif isinstance(tok, AnyChar):
        out.append("?")
    elif isinstance(tok, CharClass):
        out.append("[!" if tok.negated else "[")
        for c in tok.choices:
            _render_choice(c, out)
        out.append("]")
    else:
        raise AssertionError(f"unknown token: {tok!r}")


def render_pattern(pattern: Pattern) -> str:
    out: List[str] = []
    for tok in pattern.tokens:
        _render_token(tok, out)
    return "".join(out)
