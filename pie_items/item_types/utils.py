# utils.py - ディスクリプタ共通のヘルパー
#
# payload は編集中に任意の形になりうるので、読み出しは必ずここを通す。

from typing import Any

from ..core import MenuItem


# 組み込み種類のアイコンテーマ
DEFAULT_ICON_THEME = "material-symbols-rounded"


def payload_text(item: MenuItem, key: str) -> str:
    """payload[key] を文字列として取得。

    payload が dict でない、キーがない、値が文字列でない場合は "" を返す。
    """
    payload: Any = getattr(item, "payload", None)
    if not isinstance(payload, dict):
        return ""
    value = payload.get(key)
    if not isinstance(value, str):
        return ""
    return value.strip()
