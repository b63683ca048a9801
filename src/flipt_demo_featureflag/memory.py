"""InMemoryFlagClient 実装"""

from __future__ import annotations

from .client import FlagClient
from .exceptions import EvaluationRejected, FlagClientError
from .identity import new_entity_id


class InMemoryFlagClient(FlagClient):
    """テスト用インメモリフィーチャーフラグクライアント。"""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}
        self._errors: dict[str, FlagClientError] = {}
        self.evaluations: list[tuple[str, str]] = []

    def set_value(self, flag_key: str, value: str | bool) -> None:
        """フラグの評価値を設定する。bool は "true"/"false" に変換する。"""
        if isinstance(value, bool):
            value = "true" if value else "false"
        self._errors.pop(flag_key, None)
        self._values[flag_key] = value

    def set_error(self, flag_key: str, error: FlagClientError) -> None:
        """フラグ評価時に送出するエラーを設定する。"""
        self._values.pop(flag_key, None)
        self._errors[flag_key] = error

    async def evaluate(self, flag_key: str) -> str:
        self.evaluations.append((flag_key, new_entity_id()))
        error = self._errors.get(flag_key)
        if error is not None:
            raise error
        value = self._values.get(flag_key)
        if value is None:
            raise EvaluationRejected(f"flag not found: {flag_key}", status_code=404)
        return value
