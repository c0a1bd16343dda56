# wildgram/match/runtime.py
from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, List, Union
from ..pattern.ast import Pattern
from ..pattern.parser import parse_pattern
from ..pattern.render import render_pattern
from .engine import match_pattern


@lru_cache(maxsize=1024)
def compile_pattern(src: str) -> Pattern:
    """`parse_pattern` with memoisation; Patterns are immutable so sharing is safe."""
    return parse_pattern(src)


def as_pattern(pattern: Union[Pattern, str]) -> Pattern:
    if isinstance(pattern, Pattern):
        return pattern
    return compile_pattern(pattern)


def fnmatch(subject: str, pattern: Union[Pattern, str]) -> bool:
    """Test one subject against pattern text (or an already parsed Pattern)."""
    return match_pattern(as_pattern(pattern), subject)


def filter_subjects(subjects: Iterable[str], pattern: Union[Pattern, str]) -> List[str]:
    """Return the subjects that match, in input order."""
    p = as_pattern(pattern)
    return [s for s in subjects if match_pattern(p, s)]


@dataclass(frozen=True)
class Wildcard:
    """Compiled wildcard: parse once, match many subjects."""
    pattern: Pattern

    @classmethod
    def parse(cls, src: str) -> "Wildcard":
        return cls(parse_pattern(src))

    def matches(self, subject: str) -> bool:
        return match_pattern(self.pattern, subject)

    def filter(self, subjects: Iterable[str]) -> List[str]:
        return filter_subjects(subjects, self.pattern)

    def __str__(self) -> str:
        return render_pattern(self.pattern)
