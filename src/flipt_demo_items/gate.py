"""フラグゲートの評価ポリシー"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar

import structlog

from flipt_demo_featureflag import FlagClient, FlagClientError

from .exceptions import AccessGateDenied, GateEvaluationFailed

logger = structlog.get_logger(__name__)

T = TypeVar("T")

CREATION_ENABLED = "creationenabled"
UPPERCASE_ITEM_NAME = "uppercaseitemname"


class GateOnError(StrEnum):
    """フラグ評価が失敗した場合のゲートの振る舞い。"""

    DENY = "deny"
    ALLOW = "allow"
    PROPAGATE = "propagate"


@dataclass(frozen=True)
class GateSettings:
    """呼び出し箇所ごとのフラグキーとエラー時ポリシー。"""

    creation_flag: str = CREATION_ENABLED
    uppercase_flag: str = UPPERCASE_ITEM_NAME
    access_on_error: GateOnError = GateOnError.PROPAGATE
    advisory_on_error: GateOnError = GateOnError.DENY
    transform_on_error: GateOnError = GateOnError.DENY


async def resolve_gate(flags: FlagClient, flag_key: str, on_error: GateOnError) -> bool:
    """フラグを真偽値として評価し、失敗時は on_error に従って解決する。

    Raises:
        FlagClientError: on_error が PROPAGATE で評価に失敗した場合
    """
    try:
        return await flags.is_enabled(flag_key)
    except FlagClientError as e:
        if on_error is GateOnError.PROPAGATE:
            raise
        logger.warning(
            "flag_evaluation_failed",
            flag_key=flag_key,
            code=e.code,
            policy=str(on_error),
            error=str(e),
        )
        return on_error is GateOnError.ALLOW


async def require_enabled(flags: FlagClient, flag_key: str, on_error: GateOnError) -> None:
    """アクセスゲート。フラグが有効でなければ操作を拒否する。

    Raises:
        GateEvaluationFailed: on_error が PROPAGATE で評価に失敗した場合
        AccessGateDenied: フラグが false に解決された場合
    """
    try:
        enabled = await resolve_gate(flags, flag_key, on_error)
    except FlagClientError as e:
        raise GateEvaluationFailed(flag_key, e) from e
    if not enabled:
        logger.info("access_gate_denied", flag_key=flag_key)
        raise AccessGateDenied(flag_key)


def transform_field(entities: Iterable[T], field_name: str, fn: Callable[[str], str]) -> list[T]:
    """各エンティティのコピーに対して指定テキストフィールドを変換する。

    入力エンティティは変更しない。
    """
    return [
        dataclasses.replace(e, **{field_name: fn(getattr(e, field_name))})
        for e in entities
    ]
