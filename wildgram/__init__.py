# wildgram/__init__.py
"""wildgram: shell-style wildcard grammar engine.

    >>> from wildgram import parse, matches, render
    >>> p = parse("a*b?c")
    >>> matches(p, "aXXXbYc")
    True
    >>> render(p)
    'a*b?c'
"""

from .pattern import (
    Literal, Star, AnyChar, CharClass, Members, Range,
    Choice, Token, Pattern,
    WildcardParseError, Incomplete, InvalidCharRange,
    load_patterns,
)
from .pattern.parser import parse_pattern as parse
from .pattern.render import render_pattern as render
from .match import Wildcard, compile_pattern, fnmatch, filter_subjects
from .match.engine import match_pattern as matches
