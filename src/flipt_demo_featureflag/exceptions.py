"""featureflag ライブラリの例外型定義"""

from __future__ import annotations


class FlagClientError(Exception):
    """featureflag ライブラリのエラー基底クラス。"""

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


class FlagClientErrorCodes:
    """FlagClientError のエラーコード定数。"""

    EVALUATION_UNAVAILABLE: str = "EVALUATION_UNAVAILABLE"
    EVALUATION_REJECTED: str = "EVALUATION_REJECTED"
    INVALID_FLAG_VALUE: str = "INVALID_FLAG_VALUE"


class EvaluationUnavailable(FlagClientError):
    """評価サービスに到達できない、またはサーバー側で失敗した。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(FlagClientErrorCodes.EVALUATION_UNAVAILABLE, message, cause)


class EvaluationRejected(FlagClientError):
    """評価サービスがリクエストを明示的に拒否した。"""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(FlagClientErrorCodes.EVALUATION_REJECTED, message)
        self.status_code = status_code


class InvalidFlagValue(FlagClientError):
    """評価値が真偽値トークンとして解釈できない。"""

    def __init__(self, flag_key: str, value: object) -> None:
        super().__init__(
            FlagClientErrorCodes.INVALID_FLAG_VALUE,
            f"flag {flag_key!r} resolved to non-boolean value {value!r}",
        )
        self.flag_key = flag_key
        self.value = value
