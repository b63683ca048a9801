"""structlog のプロセス全体設定"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

from .config import LogSection


def _service_fields(app: str, environment: str) -> structlog.types.Processor:
    """全ログイベントにアプリ名と環境名を付与するプロセッサー。"""

    def processor(
        logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        event_dict.setdefault("app", app)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def configure_logging(
    log: LogSection, app: str, environment: str
) -> structlog.stdlib.BoundLogger:
    """log セクションに従って structlog を設定する。

    gate / controller のモジュールロガーもこの設定で出力され、
    各イベントには logger 名と app / environment が含まれる。

    Args:
        log: ログ設定 (level, format)
        app: アプリケーション名
        environment: 実行環境名

    Returns:
        "flipt_demo_items" という名前の BoundLogger
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log.level.upper(), logging.INFO),
    )

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        _service_fields(app, environment),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log.format == "json":
        processors += [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.stdlib.get_logger("flipt_demo_items")
