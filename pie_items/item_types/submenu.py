# submenu.py - 子アイテムを持つサブメニュー
#
# 組み込み種類の中で唯一のコンテナ。
# 子の描画（サブパイの表示）は UI 側の責務。

from typing import Any

from ..core import MenuItem
from .utils import DEFAULT_ICON_THEME


class SubmenuItemType:
    """サブメニュー。payload は使わない（空の dict）。"""

    @property
    def is_container(self) -> bool:
        return True

    @property
    def default_display_name(self) -> str:
        return "Submenu"

    @property
    def default_icon(self) -> str:
        return "apps"

    @property
    def default_icon_theme(self) -> str:
        return DEFAULT_ICON_THEME

    @property
    def default_payload(self) -> Any:
        return {}

    @property
    def generic_description(self) -> str:
        return "Contains other menu items."

    def describe_instance(self, item: MenuItem) -> str:
        children = getattr(item, "children", None)
        count = len(children) if isinstance(children, list) else 0
        return "1 item" if count == 1 else f"{count} items"
