# uri.py - ファイルや Web サイトを開くアイテム

from typing import Any

from ..core import MenuItem
from .utils import DEFAULT_ICON_THEME, payload_text


class URIItemType:
    """URI を開くアイテム。

    payload: {"uri": str}
      - "https://..." や "file:///..." など
    """

    @property
    def is_container(self) -> bool:
        return False

    @property
    def default_display_name(self) -> str:
        return "Open URI"

    @property
    def default_icon(self) -> str:
        return "public"

    @property
    def default_icon_theme(self) -> str:
        return DEFAULT_ICON_THEME

    @property
    def default_payload(self) -> Any:
        return {"uri": ""}

    @property
    def generic_description(self) -> str:
        return "Opens files or websites."

    def describe_instance(self, item: MenuItem) -> str:
        return payload_text(item, "uri") or "Not defined."
