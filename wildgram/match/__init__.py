# wildgram/match/__init__.py
"""Matching of subject strings against parsed wildcard patterns."""

from .engine import match_pattern
from .runtime import Wildcard, as_pattern, compile_pattern, fnmatch, filter_subjects
