# wildgram/pattern/__init__.py
"""Wildcard pattern front end.

This package provides:
- AST nodes for wildcard patterns (`*`, `?`, `[abc]`, `[!abc]`, `[a-z]`)
- A single-pass state-machine parser producing those nodes
- A renderer turning the nodes back into canonical pattern text
- A loader for pattern-list files
"""

from .ast import (
    Literal, Star, AnyChar, CharClass, Members, Range,
    Choice, Token, Pattern,
)
from .parser import parse_pattern, WildcardParseError, Incomplete, InvalidCharRange
from .render import render_pattern
from .loader import load_pattern_text, load_patterns
