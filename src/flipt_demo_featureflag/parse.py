"""フラグ値の厳密な真偽値パース"""

from __future__ import annotations

from .exceptions import InvalidFlagValue

TRUE_TOKENS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_TOKENS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_bool(flag_key: str, value: object) -> bool:
    """評価値を真偽値に変換する。正規の真偽値トークン以外は受け付けない。

    Raises:
        InvalidFlagValue: value が文字列でない、またはトークンに一致しない場合
    """
    if isinstance(value, str):
        if value in TRUE_TOKENS:
            return True
        if value in FALSE_TOKENS:
            return False
    raise InvalidFlagValue(flag_key, value)
