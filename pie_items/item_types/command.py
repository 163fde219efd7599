# command.py - シェルコマンドを実行するアイテム
#
# ItemType Protocol を満たす具体的な実装。
# 実際のコマンド実行は実行エンジン側の責務。

from typing import Any

from ..core import MenuItem
from .utils import DEFAULT_ICON_THEME, payload_text


class CommandItemType:
    """コマンド実行アイテム。

    payload: {"command": str, "delayed": bool}
      - delayed: メニューが閉じてから実行するか
    """

    @property
    def is_container(self) -> bool:
        return False

    @property
    def default_display_name(self) -> str:
        return "Launch Application"

    @property
    def default_icon(self) -> str:
        return "terminal"

    @property
    def default_icon_theme(self) -> str:
        return DEFAULT_ICON_THEME

    @property
    def default_payload(self) -> Any:
        return {"command": "", "delayed": False}

    @property
    def generic_description(self) -> str:
        return "Runs any command."

    def describe_instance(self, item: MenuItem) -> str:
        return payload_text(item, "command") or "Not defined."
