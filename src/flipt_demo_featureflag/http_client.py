"""Flipt HTTP 評価クライアント実装"""

from __future__ import annotations

from typing import Any

import httpx

from .client import FlagClient
from .exceptions import EvaluationRejected, EvaluationUnavailable, FlagClientError
from .identity import new_entity_id
from .models import EvaluationRequest, EvaluationResponse, FlagClientConfig

EVALUATE_PATH = "/api/v1/evaluate"


class HttpFlagClient(FlagClient):
    """httpx を使った Flipt 評価クライアント。"""

    def __init__(self, config: FlagClientConfig) -> None:
        self._config = config
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if config.api_key:
            headers["Authorization"] = f"Bearer {config.api_key}"
        self._headers = headers

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.base_url,
            headers=self._headers,
            timeout=self._config.timeout_seconds,
        )

    def _handle_error(self, resp: httpx.Response, context: str) -> None:
        if resp.status_code >= 500:
            raise EvaluationUnavailable(
                f"{context}: HTTP {resp.status_code}: {resp.text}",
            )
        if resp.status_code >= 400:
            raise EvaluationRejected(
                f"{context}: HTTP {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
            )

    async def evaluate(self, flag_key: str) -> str:
        if not flag_key:
            raise EvaluationRejected("flag key must not be empty")
        request = EvaluationRequest(
            flag_key=flag_key,
            entity_id=new_entity_id(),
            namespace=self._config.namespace,
        )
        try:
            async with self._make_client() as client:
                resp = await client.post(EVALUATE_PATH, json=request.to_dict())
            self._handle_error(resp, f"evaluate({flag_key})")
            data: dict[str, Any] = resp.json()
            return EvaluationResponse.from_dict(data).value
        except FlagClientError:
            raise
        except Exception as e:
            raise EvaluationUnavailable(
                f"Failed to evaluate flag {flag_key}: {e}",
                cause=e,
            ) from e
