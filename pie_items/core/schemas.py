# schemas.py - データ構造の定義
#
# dataclass を使ったメニューアイテムのスキーマ。
# ファクトリが生成し、生成後の所有権は呼び出し側に移る。

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any


@dataclass
class MenuItem:
    """メニューアイテムのスキーマ。

    kind はレジストリのキー。payload の中身は kind ごとに異なり、
    このクラスは解釈しない。

    children は「コンテナ種類のときだけ存在する」。
    None は「空」ではなく「存在しない」を意味するので、
    使う前にディスクリプタの is_container を確認すること。
    """

    kind: str
    payload: Any = None
    display_name: str = ""
    icon: str = ""
    icon_theme: str = ""
    children: list[MenuItem] | None = None

    def to_dict(self) -> dict[str, Any]:
        """辞書形式にエクスポート。

        children キーは children が存在するときだけ出力する。
        payload はコピーするので、返り値を変更してもアイテムには影響しない。
        """
        data: dict[str, Any] = {
            "type": self.kind,
            "data": copy.deepcopy(self.payload),
            "name": self.display_name,
            "icon": self.icon,
            "iconTheme": self.icon_theme,
        }
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MenuItem:
        """辞書形式からインポート（形の変換のみ、検証はしない）。

        payload はコピーするので、同じ dict から作ったアイテム同士は独立。
        """
        children = data.get("children")
        return cls(
            kind=data["type"],
            payload=copy.deepcopy(data.get("data")),
            display_name=data.get("name", ""),
            icon=data.get("icon", ""),
            icon_theme=data.get("iconTheme", ""),
            children=None if children is None else [cls.from_dict(c) for c in children],
        )


# -----------------------------------------------------------------------------
# 使用例（テスト用）
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    # 2 階層のツリー
    root = MenuItem(kind="submenu", payload={}, display_name="Root", children=[])
    root.children.append(
        MenuItem(kind="uri", payload={"uri": "https://example.com"}, display_name="Web"),
    )

    data = root.to_dict()
    print("Serialized:", data)

    restored = MenuItem.from_dict(data)
    print("Restored:", restored.display_name, restored.children[0].payload)

    # 復元したツリーは元のツリーと payload を共有しない
    restored.children[0].payload["uri"] = "https://example.org"
    print("Original:", root.children[0].payload)
