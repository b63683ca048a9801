"""Renderer / Responder のユニットテスト"""

import pytest
from flipt_demo_items import HTML, JAVASCRIPT, Renderer, Responder, Response, UnsupportedRepresentation


def make_responder(renderer: Renderer) -> Responder:
    async def js() -> Response:
        return renderer.render(200, "items/edit.js", {})

    async def html() -> Response:
        return renderer.render(200, "items/edit.html", {})

    return Responder().wants(JAVASCRIPT, js).wants(HTML, html)


@pytest.mark.parametrize(
    ("accept", "view"),
    [
        ("text/javascript", "items/edit.js"),
        ("application/javascript, text/html", "items/edit.js"),
        ("text/html", "items/edit.html"),
        ("", "items/edit.html"),
        ("*/*", "items/edit.html"),
    ],
)
async def test_respond_dispatches_by_accept(accept: str, view: str) -> None:
    renderer = Renderer()
    response = await make_responder(renderer).respond(accept)
    assert response.view == view
    assert renderer.rendered == [response]


async def test_respond_without_default_raises() -> None:
    async def js() -> Response:
        return Response(status=200)

    with pytest.raises(UnsupportedRepresentation) as exc_info:
        await Responder().wants(JAVASCRIPT, js).respond("application/xml")
    assert exc_info.value.status == 406


def test_redirect_records_flash() -> None:
    renderer = Renderer()
    response = renderer.redirect("/items", flash={"success": ["done"]})
    assert response.status == 302
    assert response.location == "/items"
    assert response.flash == {"success": ["done"]}
    assert response.view is None
