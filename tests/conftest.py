"""items テスト共通フィクスチャ"""

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone

import pytest
import structlog
from flipt_demo_featureflag import InMemoryFlagClient
from flipt_demo_items import (
    CREATION_ENABLED,
    UPPERCASE_ITEM_NAME,
    InMemoryItemStore,
    Item,
    ItemsResource,
    Renderer,
    ValidationErrors,
)


class SpyItemStore(InMemoryItemStore):
    """書き込み回数を記録するインメモリストア。"""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[str] = []

    async def validate_and_create(self, item: Item) -> ValidationErrors:
        self.writes.append("create")
        return await super().validate_and_create(item)

    async def validate_and_update(self, item: Item) -> ValidationErrors:
        self.writes.append("update")
        return await super().validate_and_update(item)

    async def destroy(self, item: Item) -> None:
        self.writes.append("destroy")
        await super().destroy(item)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """configure_logging による structlog のグローバル設定をテスト間で持ち越さない。"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def flags() -> InMemoryFlagClient:
    client = InMemoryFlagClient()
    client.set_value(CREATION_ENABLED, True)
    client.set_value(UPPERCASE_ITEM_NAME, False)
    return client


@pytest.fixture
def store() -> SpyItemStore:
    return SpyItemStore()


@pytest.fixture
def renderer() -> Renderer:
    return Renderer()


@pytest.fixture
def resource(flags: InMemoryFlagClient) -> ItemsResource:
    return ItemsResource(flags)


async def seed(store: InMemoryItemStore, *titles: str) -> list[Item]:
    """タイトルごとに 1 分間隔の作成日時で Item を作成して返す。"""
    items = []
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for n, title in enumerate(titles):
        item = Item(title=title, created_at=start + timedelta(minutes=n))
        errors = await InMemoryItemStore.validate_and_create(store, item)
        assert not errors.has_any()
        items.append(item)
    return items
