# infra/ - 基盤層
#
# core と item_types を組み合わせて外部に提供する。
# - アイテムタイプのレジストリ・ファクトリ
# - 構造化ロギング

from .logger import get_logger, get_session, init_logger, profile_scope, shutdown_logger
from .registry import ItemTypeRegistry, get_registry, reset_registry


__all__ = [
    "ItemTypeRegistry",
    "get_logger",
    "get_registry",
    "get_session",
    "init_logger",
    "profile_scope",
    "reset_registry",
    "shutdown_logger",
]
