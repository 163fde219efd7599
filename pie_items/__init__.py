# pie_items - パイメニューのアイテムタイプ・システム
#
# 設計原則:
#   1. Core は他の層に依存しない
#   2. Protocol による緩い契約
#   3. dataclass によるスキーマ定義
#   4. 継承より合成
#
# レイヤ順序: core (0) → item_types (1) → infra (2) → api (3)

from .core import (
    DuplicateItemTypeError,
    ItemType,
    ItemTypeError,
    MenuItem,
    UnknownItemTypeError,
)
from .infra import ItemTypeRegistry, get_registry


__version__ = "0.1.0"

__all__ = [
    "DuplicateItemTypeError",
    "ItemType",
    "ItemTypeError",
    "ItemTypeRegistry",
    "MenuItem",
    "UnknownItemTypeError",
    "get_registry",
]
