"""ロギング設定のユニットテスト"""

import json
import logging

import pytest
import structlog
from flipt_demo_featureflag import InMemoryFlagClient
from flipt_demo_items import AppConfig, build_items_resource, configure_logging
from flipt_demo_items.config import LogSection


def rendered(caplog: pytest.LogCaptureFixture, name: str) -> list[str]:
    return [record.getMessage() for record in caplog.records if record.name == name]


def test_json_output_carries_logger_and_service_fields(caplog: pytest.LogCaptureFixture) -> None:
    """JSON 出力に logger 名・レベル・app / environment が含まれること。"""
    configure_logging(LogSection(format="json"), app="flipt-demo", environment="test")
    caplog.set_level(logging.INFO)

    structlog.stdlib.get_logger("flipt_demo_items.gate").warning(
        "flag_evaluation_failed", flag_key="uppercaseitemname", policy="deny"
    )

    [message] = rendered(caplog, "flipt_demo_items.gate")
    event = json.loads(message)
    assert event["event"] == "flag_evaluation_failed"
    assert event["flag_key"] == "uppercaseitemname"
    assert event["logger"] == "flipt_demo_items.gate"
    assert event["level"] == "warning"
    assert event["app"] == "flipt-demo"
    assert event["environment"] == "test"
    assert "timestamp" in event


def test_explicit_field_is_not_overwritten(caplog: pytest.LogCaptureFixture) -> None:
    configure_logging(LogSection(format="json"), app="flipt-demo", environment="test")
    caplog.set_level(logging.INFO)

    structlog.stdlib.get_logger("flipt_demo_items.controller").info(
        "item_created", environment="override"
    )

    [message] = rendered(caplog, "flipt_demo_items.controller")
    assert json.loads(message)["environment"] == "override"


def test_text_format_is_not_json(caplog: pytest.LogCaptureFixture) -> None:
    """text フォーマットではコンソール向けの出力になること。"""
    configure_logging(LogSection(format="text"), app="flipt-demo", environment="test")
    caplog.set_level(logging.INFO)

    structlog.stdlib.get_logger("flipt_demo_items.gate").info(
        "access_gate_denied", flag_key="creationenabled"
    )

    [message] = rendered(caplog, "flipt_demo_items.gate")
    assert "access_gate_denied" in message
    assert "creationenabled" in message
    with pytest.raises(json.JSONDecodeError):
        json.loads(message)


def test_build_items_resource_logs_ready_with_app_context(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """build_items_resource が app / environment 付きで起動ログを出すこと。"""
    caplog.set_level(logging.INFO)
    config = AppConfig.model_validate(
        {
            "app": {"name": "items-demo", "environment": "staging"},
            "flipt": {"base_url": "http://flipt:8080"},
            "log": {"format": "json"},
        }
    )

    build_items_resource(config, flags=InMemoryFlagClient())

    [message] = rendered(caplog, "flipt_demo_items")
    event = json.loads(message)
    assert event["event"] == "items_resource_ready"
    assert event["app"] == "items-demo"
    assert event["environment"] == "staging"
    assert event["flipt"] == "http://flipt:8080"
