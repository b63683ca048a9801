"""評価用エンティティ ID 生成"""

from __future__ import annotations

import uuid


def new_entity_id() -> str:
    """評価ごとに使い捨てのランダムなエンティティ ID を生成する。"""
    return str(uuid.uuid4())
