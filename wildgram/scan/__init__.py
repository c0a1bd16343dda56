# wildgram/scan/__init__.py
"""wildgram 단어 스캐너 — 입력 텍스트에서 패턴과 맞는 단어를 찾는다.

특징
----
- 단어 = 공백이 아닌 코드포인트의 최장 연속 구간
  (유니코드 `White_Space` 속성으로 판정, `regex` 사용)
- 각 단어에 1-based 행/열 위치를 붙여 돌려줌
- 매칭 자체는 `wildgram.match`에 위임(정규식으로 변환하지 않음)

API
---
- `ScanTok(text: str, line: int, col: int)` — 단어 단위
- `WordScanner(text).tokens()` — 모든 단어
- `scan_matches(pattern, text)` — 패턴과 맞는 단어만
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Union
import regex as re

from ..pattern.ast import Pattern
from ..match.runtime import as_pattern
from ..match.engine import match_pattern

_WORD_RE = re.compile(r"[^\p{White_Space}]+")

# --------- Public datatypes ---------

@dataclass(frozen=True)
class ScanTok:
    text: str   # 원문 단어
    line: int   # 1-based
    col: int    # 1-based

# --------- Core implementation ---------

class WordScanner:
    def __init__(self, text: str):
        self._text = text
        self._i = 0
        self._line = 1
        self._col = 1

    def _advance_text(self, consumed: str) -> None:
        """소비된 텍스트 길이만큼 내부 포인터/행렬을 갱신."""
        n = len(consumed)
        j = consumed.rfind("\n")
        if j == -1:
            self._col += n
        else:
            self._line += consumed.count("\n")
            self._col = n - j
        self._i += n

    def tokens(self) -> Iterator[ScanTok]:
        for m in _WORD_RE.finditer(self._text, self._i):
            self._advance_text(self._text[self._i:m.start()])
            yield ScanTok(text=m.group(0), line=self._line, col=self._col)
            self._advance_text(m.group(0))


def scan_matches(pattern: Union[Pattern, str], text: str) -> Iterator[ScanTok]:
    p = as_pattern(pattern)
    for tok in WordScanner(text).tokens():
        if match_pattern(p, tok.text):
            yield tok
