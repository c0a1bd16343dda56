# wildgram/match/engine.py
from __future__ import annotations
from typing import Optional
from ..pattern.ast import (
    Literal, Star, AnyChar, CharClass, Token, Pattern,
)

# Two-cursor backtracking matcher:
# - pi walks the tokens, si walks the subject.
# - Every non-Star token consumes a fixed number of characters, so only the
#   most recent Star needs a checkpoint; reaching a new Star drops the old one.
# - A Star first matches nothing. On a later failure the checkpoint Star takes
#   one more character and matching resumes right after it.
# - Worst case O(len(subject) * len(tokens)).

def _step(tok: Token, subject: str, si: int) -> Optional[int]:
    """Match one fixed-width token at si; return the new si or None."""
    if isinstance(tok, Literal):
        if subject.startswith(tok.text, si):
            return si + len(tok.text)
        return None

    if isinstance(tok, AnyChar):
        if si < len(subject):
            return si + 1
        return None

    if isinstance(tok, CharClass):
        if si < len(subject) and tok.contains(subject[si]):
            return si + 1
        return None

    raise AssertionError(f"unknown token: {tok!r}")


def match_pattern(pattern: Pattern, subject: str) -> bool:
    tokens = pattern.tokens
    n_tok = len(tokens)
    n_sub = len(subject)
    if n_sub < pattern.min_length:
        return False

    pi = si = 0
    star_pi = -1   # -1: no checkpoint
    star_si = 0

    while True:
        if pi < n_tok:
            tok = tokens[pi]
            if isinstance(tok, Star):
                star_pi, star_si = pi, si
                pi += 1
                continue
            end = _step(tok, subject, si)
            if end is not None:
                pi += 1
                si = end
                continue
        elif si == n_sub:
            return True

        # backtrack: let the last Star swallow one more character
        if star_pi < 0 or star_si >= n_sub:
            return False
        star_si += 1
        pi = star_pi + 1
        si = star_si
