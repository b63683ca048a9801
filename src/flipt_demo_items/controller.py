"""ItemsResource — フラグで振る舞いが切り替わる Item CRUD コントローラー"""

from __future__ import annotations

import uuid
from collections.abc import Awaitable, Callable, Mapping

import structlog

from flipt_demo_featureflag import FlagClient

from .exceptions import NotFound, ValidationFailed
from .gate import GateSettings, require_enabled, resolve_gate, transform_field
from .models import Item, ValidationErrors, bind_item
from .pagination import DEFAULT_PER_PAGE, PageRequest
from .render import HTML, JAVASCRIPT, Renderer, Responder, Response
from .store import DEFAULT_ORDER, ItemStore

logger = structlog.get_logger(__name__)


class ItemsResource:
    """Item リソースのコントローラー。

    各操作の前にフラグを評価し、その結果に応じて処理を分岐する。
    永続化ハンドル (ItemStore) とレスポンス先 (Renderer) は呼び出しごとに
    引数で受け取り、リクエスト間で状態を共有しない。
    """

    def __init__(
        self,
        flags: FlagClient,
        settings: GateSettings | None = None,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> None:
        self._flags = flags
        self._settings = settings or GateSettings()
        self._per_page = per_page

    async def _creation_enabled(self) -> bool:
        """作成可否をビュー表示用に評価する (ブロックしない)。"""
        return await resolve_gate(
            self._flags, self._settings.creation_flag, self._settings.advisory_on_error
        )

    async def _require_creation(self) -> bool:
        await require_enabled(
            self._flags, self._settings.creation_flag, self._settings.access_on_error
        )
        return True

    async def _uppercasing(self) -> bool:
        return await resolve_gate(
            self._flags, self._settings.uppercase_flag, self._settings.transform_on_error
        )

    async def _find(self, store: ItemStore, item_id: uuid.UUID | str) -> Item:
        item = await store.find(item_id)
        if item is None:
            raise NotFound("item", item_id)
        return item

    async def list(
        self, store: ItemStore, renderer: Renderer, params: Mapping[str, str] | None = None
    ) -> Response:
        """GET /items"""
        creation_enabled = await self._creation_enabled()
        uppercasing = await self._uppercasing()

        page = PageRequest.from_params(params or {}, per_page=self._per_page)
        result = await store.list(page, order=DEFAULT_ORDER)
        items = result.items
        if uppercasing:
            items = transform_field(items, "title", str.upper)

        return renderer.render(
            200,
            "items/index.html",
            {"items": items, "pagination": result, "creation_enabled": creation_enabled},
        )

    async def show(
        self, store: ItemStore, renderer: Renderer, item_id: uuid.UUID | str
    ) -> Response:
        """GET /items/{item_id}"""
        creation_enabled = await self._creation_enabled()
        item = await self._find(store, item_id)

        if await self._uppercasing():
            item = transform_field([item], "title", str.upper)[0]

        return renderer.render(
            200, "items/show.html", {"item": item, "creation_enabled": creation_enabled}
        )

    async def new(self, renderer: Renderer) -> Response:
        """GET /items/new"""
        creation_enabled = await self._require_creation()
        return renderer.render(
            200, "items/new.html", {"item": Item(), "creation_enabled": creation_enabled}
        )

    async def create(
        self, store: ItemStore, renderer: Renderer, form: Mapping[str, str]
    ) -> Response:
        """POST /items"""
        creation_enabled = await self._require_creation()
        item = bind_item(Item(), form)

        try:
            await self._persist(store.validate_and_create, item)
        except ValidationFailed as e:
            return renderer.render(
                422,
                "items/new.html",
                {"item": item, "errors": e.errors, "creation_enabled": creation_enabled},
            )

        logger.info("item_created", item_id=str(item.id))
        return renderer.redirect(
            f"/items/{item.id}", flash={"success": ["Item was created successfully"]}
        )

    async def edit(
        self, store: ItemStore, renderer: Renderer, item_id: uuid.UUID | str
    ) -> Response:
        """GET /items/{item_id}/edit"""
        creation_enabled = await self._creation_enabled()
        item = await self._find(store, item_id)
        return renderer.render(
            200, "items/edit.html", {"item": item, "creation_enabled": creation_enabled}
        )

    async def update(
        self,
        store: ItemStore,
        renderer: Renderer,
        item_id: uuid.UUID | str,
        form: Mapping[str, str],
        accept: str = HTML,
    ) -> Response:
        """PUT /items/{item_id}"""
        creation_enabled = await self._creation_enabled()
        item = bind_item(await self._find(store, item_id), form)
        data = {"item": item, "creation_enabled": creation_enabled}

        try:
            await self._persist(store.validate_and_update, item)
        except ValidationFailed as e:
            data["errors"] = e.errors

            async def invalid_js() -> Response:
                return renderer.render(422, "items/edit.js", data)

            async def invalid_html() -> Response:
                return renderer.render(422, "items/edit.html", data)

            return await (
                Responder().wants(JAVASCRIPT, invalid_js).wants(HTML, invalid_html).respond(accept)
            )

        async def updated_js() -> Response:
            return renderer.render(200, "items/edit.js", data)

        async def updated_html() -> Response:
            return renderer.redirect(
                f"/items/{item.id}", flash={"success": ["Item was updated successfully"]}
            )

        return await (
            Responder().wants(JAVASCRIPT, updated_js).wants(HTML, updated_html).respond(accept)
        )

    async def destroy(
        self,
        store: ItemStore,
        renderer: Renderer,
        item_id: uuid.UUID | str,
        accept: str = HTML,
    ) -> Response:
        """DELETE /items/{item_id}"""
        creation_enabled = await self._creation_enabled()
        item = await self._find(store, item_id)
        await store.destroy(item)
        logger.info("item_destroyed", item_id=str(item.id))

        async def destroyed_js() -> Response:
            return renderer.render(
                200, "items/destroy.js", {"item": item, "creation_enabled": creation_enabled}
            )

        async def destroyed_html() -> Response:
            return renderer.redirect(
                "/items", flash={"success": ["Item was destroyed successfully"]}
            )

        return await (
            Responder().wants(JAVASCRIPT, destroyed_js).wants(HTML, destroyed_html).respond(accept)
        )

    @staticmethod
    async def _persist(
        write: Callable[[Item], Awaitable[ValidationErrors]], item: Item
    ) -> None:
        errors = await write(item)
        if errors.has_any():
            raise ValidationFailed(errors)
