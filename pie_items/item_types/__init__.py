# item_types/ - アイテムタイプの実装
#
# 各種類（command, hotkey, submenu, uri）の
# ItemType Protocol を満たす具体的な実装を配置する。
#
# 種類を追加する手順:
#   1. このパッケージにディスクリプタのモジュールを追加
#   2. BUILTIN_ITEM_TYPES に 1 行追加
# レジストリ側の変更は不要。

from .command import CommandItemType
from .hotkey import HotkeyItemType
from .submenu import SubmenuItemType
from .uri import URIItemType


# 登録順 = 選択 UI での表示順
BUILTIN_ITEM_TYPES = (
    ("command", CommandItemType),
    ("hotkey", HotkeyItemType),
    ("submenu", SubmenuItemType),
    ("uri", URIItemType),
)


__all__ = [
    "BUILTIN_ITEM_TYPES",
    "CommandItemType",
    "HotkeyItemType",
    "SubmenuItemType",
    "URIItemType",
]
