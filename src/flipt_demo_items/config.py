"""設定ファイル読み込み (YAML + pydantic)"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .gate import CREATION_ENABLED, UPPERCASE_ITEM_NAME, GateOnError, GateSettings
from .pagination import DEFAULT_PER_PAGE, MAX_PER_PAGE, MIN_PER_PAGE


class ConfigError(Exception):
    """設定読み込みエラー。"""

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


class ConfigErrorCodes:
    """ConfigError のエラーコード定数。"""

    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class AppSection(BaseModel):
    """アプリケーション基本設定。"""

    name: str = "flipt-demo"
    environment: str = "development"


class FliptSection(BaseModel):
    """Flipt 評価サービス接続設定。"""

    base_url: str = "http://localhost:8080"
    api_key: str = ""
    namespace: str = ""
    timeout_seconds: float = Field(default=5.0, gt=0)


class FlagsSection(BaseModel):
    """参照するフラグキー。"""

    creation: str = Field(default=CREATION_ENABLED, min_length=1)
    uppercase: str = Field(default=UPPERCASE_ITEM_NAME, min_length=1)


class GatesSection(BaseModel):
    """呼び出し箇所ごとの評価失敗時ポリシー。"""

    access_on_error: GateOnError = GateOnError.PROPAGATE
    advisory_on_error: GateOnError = GateOnError.DENY
    transform_on_error: GateOnError = GateOnError.DENY


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class PaginationSection(BaseModel):
    """ページング設定。"""

    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=MIN_PER_PAGE, le=MAX_PER_PAGE)


class AppConfig(BaseModel):
    """アプリケーション設定のルートモデル。"""

    app: AppSection = Field(default_factory=AppSection)
    flipt: FliptSection = Field(default_factory=FliptSection)
    flags: FlagsSection = Field(default_factory=FlagsSection)
    gates: GatesSection = Field(default_factory=GatesSection)
    log: LogSection = Field(default_factory=LogSection)
    pagination: PaginationSection = Field(default_factory=PaginationSection)

    def gate_settings(self) -> GateSettings:
        """GateSettings に変換する。"""
        return GateSettings(
            creation_flag=self.flags.creation,
            uppercase_flag=self.flags.uppercase,
            access_on_error=self.gates.access_on_error,
            advisory_on_error=self.gates.advisory_on_error,
            transform_on_error=self.gates.transform_on_error,
        )


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """base と override をディープマージして新しい辞書を返す。

    override の値が優先される。リストは置換（マージしない）。
    """
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            code=ConfigErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    return data


def load(base_path: Path, env_path: Path | None = None) -> AppConfig:
    """設定ファイルを読み込んで AppConfig を返す。

    base_path: ベース設定ファイルパス（必須）
    env_path: 環境別設定ファイルパス（オプション）。存在する場合はベースにマージ。
    """
    data = _read_yaml(base_path)
    if env_path is not None and env_path.exists():
        data = deep_merge(data, _read_yaml(env_path))
    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            code=ConfigErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
