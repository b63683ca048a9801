"""ゲートポリシーのユニットテスト"""

from dataclasses import dataclass

import pytest
from structlog.testing import capture_logs
from flipt_demo_featureflag import (
    EvaluationUnavailable,
    InMemoryFlagClient,
    InvalidFlagValue,
)
from flipt_demo_items import (
    AccessGateDenied,
    GateEvaluationFailed,
    GateOnError,
    Item,
    require_enabled,
    resolve_gate,
    transform_field,
)

FLAG = "someflag"


@pytest.fixture
def down() -> InMemoryFlagClient:
    client = InMemoryFlagClient()
    client.set_error(FLAG, EvaluationUnavailable("connection refused"))
    return client


@pytest.mark.parametrize("policy", list(GateOnError))
async def test_resolve_gate_success_ignores_policy(policy: GateOnError) -> None:
    """評価成功時はポリシーに関係なく評価値を返すこと。"""
    client = InMemoryFlagClient()
    client.set_value(FLAG, True)
    assert await resolve_gate(client, FLAG, policy) is True
    client.set_value(FLAG, False)
    assert await resolve_gate(client, FLAG, policy) is False


async def test_resolve_gate_deny_on_error(down: InMemoryFlagClient) -> None:
    assert await resolve_gate(down, FLAG, GateOnError.DENY) is False


async def test_resolve_gate_allow_on_error(down: InMemoryFlagClient) -> None:
    assert await resolve_gate(down, FLAG, GateOnError.ALLOW) is True


async def test_resolve_gate_propagate_on_error(down: InMemoryFlagClient) -> None:
    with pytest.raises(EvaluationUnavailable):
        await resolve_gate(down, FLAG, GateOnError.PROPAGATE)


async def test_resolve_gate_logs_fallback(down: InMemoryFlagClient) -> None:
    """フォールバックした評価失敗がログに残ること。"""
    with capture_logs() as logs:
        await resolve_gate(down, FLAG, GateOnError.DENY)
    assert logs[0]["event"] == "flag_evaluation_failed"
    assert logs[0]["log_level"] == "warning"
    assert logs[0]["flag_key"] == FLAG
    assert logs[0]["code"] == "EVALUATION_UNAVAILABLE"
    assert logs[0]["policy"] == "deny"


async def test_resolve_gate_invalid_value_uses_policy() -> None:
    client = InMemoryFlagClient()
    client.set_value(FLAG, "yes")
    assert await resolve_gate(client, FLAG, GateOnError.DENY) is False
    with pytest.raises(InvalidFlagValue):
        await resolve_gate(client, FLAG, GateOnError.PROPAGATE)


async def test_require_enabled_passes_when_true() -> None:
    client = InMemoryFlagClient()
    client.set_value(FLAG, "1")
    await require_enabled(client, FLAG, GateOnError.PROPAGATE)


async def test_require_enabled_denies_when_false() -> None:
    client = InMemoryFlagClient()
    client.set_value(FLAG, "0")
    with pytest.raises(AccessGateDenied):
        await require_enabled(client, FLAG, GateOnError.PROPAGATE)


async def test_require_enabled_wraps_propagated_error(down: InMemoryFlagClient) -> None:
    with pytest.raises(GateEvaluationFailed) as exc_info:
        await require_enabled(down, FLAG, GateOnError.PROPAGATE)
    assert exc_info.value.flag_key == FLAG
    assert exc_info.value.status == 503


def test_transform_field_is_pure_and_idempotent() -> None:
    """変換は入力を変更せず、2 回適用しても 1 回と同じ結果になること。"""
    items = [Item(title="widget"), Item(title="Gadget"), Item(title="")]
    once = transform_field(items, "title", str.upper)
    twice = transform_field(once, "title", str.upper)
    assert [i.title for i in once] == ["WIDGET", "GADGET", ""]
    assert once == twice
    assert [i.title for i in items] == ["widget", "Gadget", ""]
    assert all(a is not b for a, b in zip(items, once))


def test_transform_field_other_dataclass() -> None:
    @dataclass
    class Note:
        body: str
        tag: str

    (note,) = transform_field([Note(body="hello", tag="x")], "body", str.upper)
    assert note == Note(body="HELLO", tag="x")
