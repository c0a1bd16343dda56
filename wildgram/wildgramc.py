# wildgram/wildgramc.py
"""wildgramc – wildgram CLI

사용 예)
    $ python -m wildgram.wildgramc check "blarg[!!xy0-9a-z.[]/*.JP?" -D
    $ python -m wildgram.wildgramc match "a*b?c" abXc aXXXbYc abc
    $ python -m wildgram.wildgramc filter "*.py" --input files.txt
    $ python -m wildgram.wildgramc filter --patterns keep.txt --input files.txt
    $ python -m wildgram.wildgramc scan "[A-Z]*" --text "Hello wide World"

기능
----
- check  : 패턴을 파싱해 정규형(canonical) 텍스트를 출력
- match  : 주어진 문자열들이 패턴과 일치하는지 판정
- filter : 입력의 각 줄 중 패턴과 일치하는 줄만 출력
- scan   : 입력 텍스트의 단어 중 패턴과 일치하는 단어를 위치와 함께 출력

디버그 모드(-D/--debug)를 켜면 AST와 최소 길이 등 요약을 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .pattern.ast import Pattern
from .pattern.parser import parse_pattern
from .pattern.loader import load_pattern_text, load_patterns
from .match.engine import match_pattern
from .scan import scan_matches

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _print_pattern(p: Pattern) -> None:
    _eprint("\n[AST]\n" + repr(p))
    _eprint(f"Tokens: {len(p)}")
    _eprint(f"Min length: {p.min_length}")
    _eprint(f"Has star: {p.has_star}")


def _load(args) -> List[Pattern]:
    """패턴 인자 또는 --patterns 파일로부터 패턴 목록을 만든다."""
    pats: List[Pattern] = []
    if args.pattern is not None:
        pats.append(parse_pattern(args.pattern))
    if getattr(args, "patterns", None):
        pats.extend(load_patterns(args.patterns))
    if not pats:
        raise SyntaxError("no pattern given (use PATTERN or --patterns)")
    if args.debug:
        _eprint(f"[DEBUG] {len(pats)} pattern(s) ready")
        for p in pats:
            _print_pattern(p)
    return pats


def _read_input(args) -> str:
    if args.text is not None:
        return args.text
    return load_pattern_text(args.input)


def _run(func, args) -> int:
    """공통 오류 처리: 문법 오류/입출력 오류는 종료 코드 2."""
    try:
        return func(args)
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_check(args) -> int:
    (p,) = _load(args)
    print(str(p))
    return 0


def cmd_match(args) -> int:
    (p,) = _load(args)
    ok_all = True
    for subject in args.subjects:
        ok = match_pattern(p, subject)
        ok_all = ok_all and ok
        print(f"{'MATCH' if ok else 'NO MATCH':<8} {subject!r}")
    return 0 if ok_all else 1


def cmd_filter(args) -> int:
    pats = _load(args)
    text = _read_input(args)
    n = 0
    for line in text.splitlines():
        if any(match_pattern(p, line) for p in pats):
            print(line)
            n += 1
    if args.debug:
        _eprint(f"[DEBUG] {n} line(s) matched")
    return 0


def cmd_scan(args) -> int:
    (p,) = _load(args)
    text = _read_input(args)
    i = 0
    for tok in scan_matches(p, text):
        print(f"{i:03d}: {tok.text!r}  @{tok.line}:{tok.col}")
        i += 1
    if args.debug:
        _eprint(f"[DEBUG] {i} word(s) matched")
    return 0

# ------------------------------
# 엔트리포인트
# ------------------------------

def _add_input_group(p: argparse.ArgumentParser) -> None:
    src_group = p.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--text", help="직접 입력 텍스트")
    src_group.add_argument("--input", help="입력 텍스트 파일 경로")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="wildgramc", description="wildgram wildcard pattern CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="패턴을 검사하고 정규형 텍스트를 출력합니다")
    p_check.add_argument("pattern", help="와일드카드 패턴")
    p_check.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_check.set_defaults(func=cmd_check)

    p_match = sub.add_parser("match", help="문자열들이 패턴과 일치하는지 판정합니다")
    p_match.add_argument("pattern", help="와일드카드 패턴")
    p_match.add_argument("subjects", nargs="+", help="검사할 문자열")
    p_match.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_match.set_defaults(func=cmd_match)

    p_filter = sub.add_parser("filter", help="입력 줄 중 패턴과 일치하는 줄만 출력합니다")
    p_filter.add_argument("pattern", nargs="?", help="와일드카드 패턴")
    p_filter.add_argument("--patterns", help="패턴 목록 파일(한 줄에 하나, '#' 주석)")
    _add_input_group(p_filter)
    p_filter.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_filter.set_defaults(func=cmd_filter)

    p_scan = sub.add_parser("scan", help="입력 텍스트에서 패턴과 일치하는 단어를 찾습니다")
    p_scan.add_argument("pattern", help="와일드카드 패턴")
    _add_input_group(p_scan)
    p_scan.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_scan.set_defaults(func=cmd_scan)

    args = ap.parse_args(argv)
    return int(_run(args.func, args))

if __name__ == "__main__":
    sys.exit(main())
