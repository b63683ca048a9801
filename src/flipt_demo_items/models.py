"""Item データモデル"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Item:
    """ToDo アイテム。"""

    title: str = ""
    done: bool = False
    id: uuid.UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


_CHECKED = frozenset({"true", "on", "1"})


def bind_item(item: Item, params: Mapping[str, str]) -> Item:
    """フォームパラメータを Item に反映する。

    Args:
        item: 反映先の Item
        params: フォームパラメータ ("title", "done")

    Returns:
        反映後の Item (同一インスタンス)
    """
    if "title" in params:
        item.title = params["title"]
    if "done" in params:
        item.done = params["done"].strip().lower() in _CHECKED
    return item


@dataclass
class FieldError:
    """フィールド単位のバリデーションエラー。"""

    field: str
    message: str
    code: str = ""

    def __post_init__(self) -> None:
        if not self.code:
            self.code = f"INVALID_{self.field.upper()}"


@dataclass
class ValidationErrors:
    """FieldError の集合。"""

    errors: list[FieldError] = field(default_factory=list)

    def add(self, field_name: str, message: str, *, code: str = "") -> None:
        """エラーを追加する。"""
        self.errors.append(FieldError(field_name, message, code))

    def has_any(self) -> bool:
        """エラーが 1 件以上あれば True。"""
        return len(self.errors) > 0

    def get(self, field_name: str) -> list[str]:
        """指定フィールドのエラーメッセージを返す。"""
        return [e.message for e in self.errors if e.field == field_name]

    def __str__(self) -> str:
        return "; ".join(f"{e.field}: {e.message}" for e in self.errors)
