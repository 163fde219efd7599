# core/ - 依存なしのコア層
#
# このパッケージは item_types / infra をインポートしない。
# テスト可能で、型安全な設計の土台。

from .errors import DuplicateItemTypeError, ItemTypeError, UnknownItemTypeError
from .protocols import ItemType
from .schemas import MenuItem


__all__ = [
    "DuplicateItemTypeError",
    "ItemType",
    "ItemTypeError",
    "MenuItem",
    "UnknownItemTypeError",
]
