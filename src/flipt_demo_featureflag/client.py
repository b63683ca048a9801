"""FlagClient 抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .parse import parse_bool


class FlagClient(ABC):
    """フィーチャーフラグ評価クライアント抽象基底クラス。

    1 回の呼び出しにつき評価サービスへのラウンドトリップは 1 回のみ。
    キャッシュ・リトライ・バッチ化は行わない。
    """

    @abstractmethod
    async def evaluate(self, flag_key: str) -> str:
        """フラグを評価し、解決された値をそのまま返す。

        Raises:
            EvaluationUnavailable: 通信失敗またはサーバー側エラー
            EvaluationRejected: 評価サービスがリクエストを拒否した場合
        """
        ...

    async def is_enabled(self, flag_key: str) -> bool:
        """フラグを評価し、真偽値として解釈する。

        Raises:
            InvalidFlagValue: 値が真偽値トークンでない場合
        """
        value = await self.evaluate(flag_key)
        return parse_bool(flag_key, value)
