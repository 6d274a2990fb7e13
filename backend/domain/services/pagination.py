from typing import Optional, Tuple

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# DB に渡せる整数の上限 (符号付き 64bit)
INT64_MAX = 2**63 - 1
INT64_MIN = -2**63
# DuckDB の LIMIT / OFFSET が受け付ける上限 (2^62 未満)
MAX_WINDOW = 2**62 - 1

def parse_int64(value: Optional[str]) -> Optional[int]:
    """符号付き 64bit に収まる整数文字列のみを変換し、それ以外は None"""
    if value is None:
        return None
    try:
        number = int(value.strip())
    except (TypeError, ValueError):
        return None
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return number

def parse_positive_int(value: Optional[str], default: int) -> int:
    """
    クエリ文字列を正の整数に変換する。
    数値でない値、64bit に収まらない値、0 以下の値はエラーにせず default にフォールバックする。
    大きすぎる値は MAX_WINDOW に丸める。
    """
    number = parse_int64(value)
    if number is None or number <= 0:
        return default
    return min(number, MAX_WINDOW)

def parse_page_params(page: Optional[str], limit: Optional[str]) -> Tuple[int, int]:
    return parse_positive_int(page, DEFAULT_PAGE), parse_positive_int(limit, DEFAULT_LIMIT)

def page_offset(page: int, limit: int) -> int:
    # page と limit が個別に範囲内でも積はあふれうるので上限で止める
    return min((page - 1) * limit, MAX_WINDOW)

def text_window(text: str, page: int, limit: int) -> str:
    """
    歌詞テキストを文字単位でページングする。
    [offset, min(offset + limit, len(text))) を返し、範囲外のページは空文字。
    """
    offset = page_offset(page, limit)
    if offset >= len(text):
        return ""
    end = min(offset + limit, len(text))
    return text[offset:end]
