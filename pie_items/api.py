# api.py - 外部向けファサード API
#
# エディタ UI・永続化・実行エンジンからの公式エントリポイント。
# 内部実装を隠蔽し、安定した API を提供する。
#
# 使用例:
#   from pie_items import api
#   for handle in api.list_item_types():
#       print(handle.name, handle.description)
#   item = api.create_item("command")
#
# 設計方針:
#   - デフォルトはプロセス共有のレジストリ
#   - registry= で別のレジストリを注入できる（テスト・複数構成用）

from __future__ import annotations

from dataclasses import dataclass

from .core import ItemType, MenuItem
from .infra.registry import ItemTypeRegistry, get_registry


# =============================================================================
# Item Type API (Stable)
# =============================================================================


@dataclass(frozen=True)
class ItemTypeHandle:
    """アイテムタイプの読み取り専用ハンドル。

    ディスクリプタを直接公開せず、選択 UI に必要な情報のみ提供する。

    Stability: Stable
    """

    name: str
    is_container: bool
    display_name: str
    icon: str
    icon_theme: str
    description: str

    @classmethod
    def from_descriptor(cls, name: str, descriptor: ItemType) -> ItemTypeHandle:
        return cls(
            name=name,
            is_container=descriptor.is_container,
            display_name=descriptor.default_display_name,
            icon=descriptor.default_icon,
            icon_theme=descriptor.default_icon_theme,
            description=descriptor.generic_description,
        )


def list_item_types(*, registry: ItemTypeRegistry | None = None) -> list[ItemTypeHandle]:
    """全アイテムタイプを登録順で取得する。

    Example:
        for handle in api.list_item_types():
            print(f"{handle.display_name}: {handle.description}")

    Stability: Stable
    """
    if registry is None:
        registry = get_registry()
    return [ItemTypeHandle.from_descriptor(name, d) for name, d in registry.list_all()]


def find_item_type(name: str, *, registry: ItemTypeRegistry | None = None) -> ItemTypeHandle | None:
    """種類名でアイテムタイプを検索する。

    Returns:
        ItemTypeHandle または None（見つからない場合）

    Stability: Stable
    """
    if registry is None:
        registry = get_registry()
    descriptor = registry.get(name)
    if descriptor is None:
        return None
    return ItemTypeHandle.from_descriptor(name, descriptor)


def create_item(name: str, *, registry: ItemTypeRegistry | None = None) -> MenuItem:
    """デフォルト値で新しいメニューアイテムを作る。

    Raises:
        UnknownItemTypeError: 未登録の種類名

    Example:
        submenu = api.create_item("submenu")
        submenu.children.append(api.create_item("command"))

    Stability: Stable
    """
    if registry is None:
        registry = get_registry()
    return registry.create(name)


def describe_item(item: MenuItem, *, registry: ItemTypeRegistry | None = None) -> str:
    """アイテムの 1 行説明を取得する（ゴミ箱・ストック一覧用）。

    Raises:
        UnknownItemTypeError: item.kind が未登録

    Stability: Stable
    """
    if registry is None:
        registry = get_registry()
    return registry.describe(item)
