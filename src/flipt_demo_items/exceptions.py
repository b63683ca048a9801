"""items ライブラリの例外型定義"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flipt_demo_featureflag import EvaluationUnavailable, FlagClientError

if TYPE_CHECKING:
    from .models import ValidationErrors


class ItemsError(Exception):
    """items ライブラリのエラー基底クラス。"""

    status: int = 500

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ItemsErrorCodes:
    """ItemsError のエラーコード定数。"""

    ACCESS_GATE_DENIED: str = "ACCESS_GATE_DENIED"
    GATE_EVALUATION_FAILED: str = "GATE_EVALUATION_FAILED"
    VALIDATION_FAILED: str = "VALIDATION_FAILED"
    NOT_FOUND: str = "NOT_FOUND"
    UNSUPPORTED_REPRESENTATION: str = "UNSUPPORTED_REPRESENTATION"


class AccessGateError(ItemsError):
    """アクセスゲートによって操作が実行されなかった。"""


class AccessGateDenied(AccessGateError):
    """フラグが false に解決されたため操作が拒否された。"""

    status = 403

    def __init__(self, flag_key: str) -> None:
        super().__init__(
            ItemsErrorCodes.ACCESS_GATE_DENIED,
            f"feature {flag_key!r} is disabled",
        )
        self.flag_key = flag_key


class GateEvaluationFailed(AccessGateError):
    """アクセスゲートのフラグ評価自体が失敗した。"""

    def __init__(self, flag_key: str, cause: FlagClientError) -> None:
        super().__init__(
            ItemsErrorCodes.GATE_EVALUATION_FAILED,
            f"could not evaluate feature {flag_key!r}: {cause}",
            cause=cause,
        )
        self.flag_key = flag_key
        self.status = 503 if isinstance(cause, EvaluationUnavailable) else 500


class ValidationFailed(ItemsError):
    """永続化層のバリデーションに失敗した。"""

    status = 422

    def __init__(self, errors: ValidationErrors) -> None:
        super().__init__(
            ItemsErrorCodes.VALIDATION_FAILED,
            f"validation failed: {errors}",
        )
        self.errors = errors


class NotFound(ItemsError):
    """指定 ID のエンティティが存在しない。"""

    status = 404

    def __init__(self, resource: str, resource_id: object) -> None:
        super().__init__(
            ItemsErrorCodes.NOT_FOUND,
            f"{resource} not found: {resource_id}",
        )
        self.resource_id = resource_id


class UnsupportedRepresentation(ItemsError):
    """要求された表現形式に対応するレスポンダーがない。"""

    status = 406

    def __init__(self, accept: str) -> None:
        super().__init__(
            ItemsErrorCodes.UNSUPPORTED_REPRESENTATION,
            f"could not find a responder for {accept!r}",
        )
        self.accept = accept


def status_for(exc: BaseException) -> int:
    """例外を HTTP 相当のステータスコードに変換する。"""
    if isinstance(exc, ItemsError):
        return exc.status
    if isinstance(exc, EvaluationUnavailable):
        return 503
    return 500
