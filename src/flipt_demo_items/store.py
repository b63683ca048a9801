"""ItemStore 抽象基底クラスとインメモリ実装"""

from __future__ import annotations

import dataclasses
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from .models import Item, ValidationErrors
from .pagination import PageRequest, PageResponse

DEFAULT_ORDER = "created_at desc"


class ItemStore(ABC):
    """Item 永続化コラボレーター抽象基底クラス。"""

    @abstractmethod
    async def find(self, item_id: uuid.UUID | str) -> Item | None:
        """ID で Item を取得する。存在しなければ None。"""
        ...

    @abstractmethod
    async def list(
        self, page: PageRequest, order: str = DEFAULT_ORDER
    ) -> PageResponse[Item]:
        """ページ単位で Item 一覧を取得する。"""
        ...

    @abstractmethod
    async def validate_and_create(self, item: Item) -> ValidationErrors:
        """検証に成功すれば Item を作成し、ID を割り当てる。"""
        ...

    @abstractmethod
    async def validate_and_update(self, item: Item) -> ValidationErrors:
        """検証に成功すれば Item を更新する。"""
        ...

    @abstractmethod
    async def destroy(self, item: Item) -> None:
        """Item を削除する。"""
        ...


def validate_item(item: Item) -> ValidationErrors:
    """Item の入力値を検証する。"""
    errors = ValidationErrors()
    if not item.title.strip():
        errors.add("title", "Title can not be blank.", code="BLANK_TITLE")
    return errors


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_id(item_id: uuid.UUID | str) -> uuid.UUID | None:
    if isinstance(item_id, uuid.UUID):
        return item_id
    try:
        return uuid.UUID(item_id)
    except ValueError:
        return None


class InMemoryItemStore(ItemStore):
    """テスト・デモ用インメモリ Item ストア。

    保存・取得のたびにコピーを返すため、呼び出し側で変更しても
    保存済みデータには反映されない。作成時に created_at が指定済みなら
    その値を保持する。
    """

    def __init__(self) -> None:
        self._items: dict[uuid.UUID, Item] = {}

    async def find(self, item_id: uuid.UUID | str) -> Item | None:
        key = _parse_id(item_id)
        if key is None:
            return None
        item = self._items.get(key)
        return dataclasses.replace(item) if item is not None else None

    async def list(
        self, page: PageRequest, order: str = DEFAULT_ORDER
    ) -> PageResponse[Item]:
        column, _, direction = order.partition(" ")
        rows = sorted(
            self._items.values(),
            key=lambda i: getattr(i, column),
            reverse=direction.strip().lower() == "desc",
        )
        window = rows[page.offset : page.offset + page.per_page]
        return PageResponse.create(
            [dataclasses.replace(i) for i in window], len(rows), page
        )

    async def validate_and_create(self, item: Item) -> ValidationErrors:
        errors = validate_item(item)
        if errors.has_any():
            return errors
        now = _now()
        item.id = uuid.uuid4()
        if item.created_at is None:
            item.created_at = now
        item.updated_at = now
        self._items[item.id] = dataclasses.replace(item)
        return errors

    async def validate_and_update(self, item: Item) -> ValidationErrors:
        errors = validate_item(item)
        if errors.has_any():
            return errors
        if item.id is None or item.id not in self._items:
            errors.add("id", f"Item not found: {item.id}", code="UNKNOWN_ID")
            return errors
        item.updated_at = _now()
        self._items[item.id] = dataclasses.replace(item)
        return errors

    async def destroy(self, item: Item) -> None:
        if item.id is not None:
            self._items.pop(item.id, None)
