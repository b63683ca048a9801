"""レンダリング協調オブジェクトとコンテンツネゴシエーション"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from .exceptions import UnsupportedRepresentation

HTML = "html"
JAVASCRIPT = "javascript"


@dataclass
class Response:
    """Web 層に返すレンダリング結果。"""

    status: int
    view: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
    location: str | None = None
    flash: dict[str, list[str]] = field(default_factory=dict)


class Renderer:
    """リクエスト単位のレスポンス生成先。

    テンプレートエンジンは render をオーバーライドして差し込む。
    この基底クラスは Response を組み立て、生成したものをすべて記録する。
    """

    def __init__(self) -> None:
        self.rendered: list[Response] = []

    def render(self, status: int, view: str, data: dict[str, Any]) -> Response:
        response = Response(status=status, view=view, data=dict(data))
        self.rendered.append(response)
        return response

    def redirect(
        self, location: str, flash: dict[str, list[str]] | None = None, status: int = 302
    ) -> Response:
        response = Response(status=status, location=location, flash=dict(flash or {}))
        self.rendered.append(response)
        return response


Handler = Callable[[], Awaitable[Response]]


class Responder:
    """受理シグナル中で最初に見つかった登録済み表現へディスパッチする。"""

    def __init__(self, default: str = HTML) -> None:
        self._wants: dict[str, Handler] = {}
        self._default = default

    def wants(self, kind: str, handler: Handler) -> Responder:
        self._wants[kind] = handler
        return self

    async def respond(self, accept: str) -> Response:
        for kind, handler in self._wants.items():
            if kind in accept:
                return await handler()
        handler = self._wants.get(self._default)
        if handler is None:
            raise UnsupportedRepresentation(accept)
        return await handler()
