"""設定から ItemsResource を組み立てる"""

from __future__ import annotations

from flipt_demo_featureflag import FlagClient, FlagClientConfig, HttpFlagClient

from .config import AppConfig
from .controller import ItemsResource
from .logger import configure_logging


def build_flag_client(config: AppConfig) -> FlagClient:
    """flipt セクションの接続設定から HttpFlagClient を生成する。"""
    return HttpFlagClient(
        FlagClientConfig(
            base_url=config.flipt.base_url,
            api_key=config.flipt.api_key,
            namespace=config.flipt.namespace,
            timeout_seconds=config.flipt.timeout_seconds,
        )
    )


def build_items_resource(config: AppConfig, flags: FlagClient | None = None) -> ItemsResource:
    """ロギングを設定し、設定済みの ItemsResource を返す。

    flags を省略した場合は build_flag_client で評価サービスのクライアントを作る。
    """
    log = configure_logging(
        config.log,
        app=config.app.name,
        environment=config.app.environment,
    )
    resource = ItemsResource(
        flags or build_flag_client(config),
        settings=config.gate_settings(),
        per_page=config.pagination.per_page,
    )
    log.info("items_resource_ready", flipt=config.flipt.base_url)
    return resource
