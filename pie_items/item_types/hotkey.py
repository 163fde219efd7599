# hotkey.py - ショートカットキーを送るアイテム

from typing import Any

from ..core import MenuItem
from .utils import DEFAULT_ICON_THEME, payload_text


class HotkeyItemType:
    """ホットキー送信アイテム。

    payload: {"hotkey": str, "delayed": bool}
      - hotkey: "Control+Alt+T" のような文字列
    """

    @property
    def is_container(self) -> bool:
        return False

    @property
    def default_display_name(self) -> str:
        return "Simulate Hotkey"

    @property
    def default_icon(self) -> str:
        return "keyboard"

    @property
    def default_icon_theme(self) -> str:
        return DEFAULT_ICON_THEME

    @property
    def default_payload(self) -> Any:
        return {"hotkey": "", "delayed": False}

    @property
    def generic_description(self) -> str:
        return "Simulates a keyboard shortcut."

    def describe_instance(self, item: MenuItem) -> str:
        return payload_text(item, "hotkey") or "Not bound."
