# wildgram/pattern/loader.py
"""패턴 목록 파일 로더

- 한 줄에 패턴 하나
- 빈 줄과 '#'으로 시작하는 줄은 무시
- 줄 끝 공백은 패턴의 일부로 보존(와일드카드에 이스케이프가 없으므로)
"""

from __future__ import annotations
from pathlib import Path
from typing import List
from .ast import Pattern
from .parser import parse_pattern, WildcardParseError


def load_pattern_text(path: str) -> str:
    """
    Load Pattern Text
    """
    text = Path(path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def load_patterns(path: str) -> List[Pattern]:
    patterns: List[Pattern] = []
    for lineno, line in enumerate(load_pattern_text(path).split("\n"), start=1):
        if not line or line.startswith("#"):
            continue
        try:
            patterns.append(parse_pattern(line))
        except WildcardParseError as e:
            # 같은 오류 클래스로 다시 던지되 파일 위치를 앞에 붙인다
            raise e.located(f"{path}:{lineno}") from e
    return patterns
