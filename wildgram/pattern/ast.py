# wildgram/pattern/ast.py
"""Wildcard AST

- Pattern   : 토큰(Token)의 순서열, 파싱 이후 불변
- Literal   : 그대로 일치해야 하는 문자열 구간(최대 길이로 합쳐짐)
- Star      : `*`, 빈 문자열을 포함한 임의의 문자열
- AnyChar   : `?`, 임의의 한 문자
- CharClass : `[...]` / `[!...]`, 집합에 대한 한 문자
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

# ---- Choice: bracket expression members ----

@dataclass(frozen=True)
class Members:
    text: str  # every character of text is a member

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Members: empty member text")

    def contains(self, ch: str) -> bool:
        return ch in self.text

@dataclass(frozen=True)
class Range:
    lo: str
    hi: str

    def __post_init__(self) -> None:
        if len(self.lo) != 1 or len(self.hi) != 1:
            raise ValueError(f"Range: endpoints must be single characters, got {self.lo!r}-{self.hi!r}")
        if self.lo > self.hi:
            raise ValueError(f"Range: inverted endpoints {self.lo!r}-{self.hi!r}")

    def contains(self, ch: str) -> bool:
        # inclusive, code point order
        return self.lo <= ch <= self.hi

Choice = Union[Members, Range]

# ---- Token: grammar productions ----

@dataclass(frozen=True)
class Literal:
    text: str

@dataclass(frozen=True)
class Star:
    pass

@dataclass(frozen=True)
class AnyChar:
    pass

@dataclass(frozen=True)
class CharClass:
    choices: Tuple[Choice, ...]
    negated: bool = False

    def __post_init__(self) -> None:
        if not self.choices:
            raise ValueError("CharClass: a bracket expression needs at least one choice")
        first = self.choices[0]
        lead = first.text[0] if isinstance(first, Members) else first.lo
        if lead == "!" and not self.negated:
            # "[!" always reads back as negation
            raise ValueError("CharClass: a non-negated class cannot start with '!'")

    def contains(self, ch: str) -> bool:
        ok = any(c.contains(ch) for c in self.choices)
        return (not ok) if self.negated else ok

Token = Union[Literal, Star, AnyChar, CharClass]


@dataclass(frozen=True)
class Pattern:
    """
    파싱된 와일드카드 패턴.
    - tokens : 왼쪽에서 오른쪽으로 읽는 토큰 순서열
    - source : 파싱 원문 사본(디버깅용, 동등성 비교에서 제외)
    """
    tokens: Tuple[Token, ...] = ()
    source: str = field(default="", compare=False)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __str__(self) -> str:
        from .render import render_pattern
        return render_pattern(self)

    @property
    def min_length(self) -> int:
        """Fewest subject characters any match has to consume."""
        n = 0
        for tok in self.tokens:
            if isinstance(tok, Literal):
                n += len(tok.text)
            elif isinstance(tok, (AnyChar, CharClass)):
                n += 1
        return n

    @property
    def has_star(self) -> bool:
        return any(isinstance(tok, Star) for tok in self.tokens)
