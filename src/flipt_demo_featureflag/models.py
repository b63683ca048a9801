"""featureflag データモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FlagClientConfig:
    """Flipt 評価クライアント設定。"""

    base_url: str
    api_key: str = ""
    namespace: str = ""
    timeout_seconds: float = 5.0


@dataclass
class EvaluationRequest:
    """フラグ評価リクエスト。"""

    flag_key: str
    entity_id: str
    context: dict[str, str] = field(default_factory=dict)
    namespace: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Flipt REST API のリクエストボディに変換する。"""
        body: dict[str, Any] = {
            "flagKey": self.flag_key,
            "entityId": self.entity_id,
            "context": dict(self.context),
        }
        if self.namespace:
            body["namespaceKey"] = self.namespace
        return body


@dataclass
class EvaluationResponse:
    """フラグ評価レスポンス。"""

    flag_key: str
    entity_id: str
    value: str
    match: bool = False
    segment_key: str = ""
    reason: str = ""
    request_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EvaluationResponse:
        """API レスポンス辞書から EvaluationResponse を生成する。

        Raises:
            KeyError: value が含まれない場合
            ValueError: value が文字列でない場合
        """
        value = data["value"]
        if not isinstance(value, str):
            raise ValueError(f"value must be a string, got {type(value).__name__}")
        return cls(
            flag_key=data.get("flagKey", ""),
            entity_id=data.get("entityId", ""),
            value=value,
            match=data.get("match", False),
            segment_key=data.get("segmentKey", ""),
            reason=data.get("reason", ""),
            request_id=data.get("requestId", ""),
        )
