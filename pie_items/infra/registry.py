# registry.py - アイテムタイプ登録・アイテム生成
#
# 種類名 -> ディスクリプタの対応表と、新規アイテムのファクトリ。
# 種類ごとの分岐はここには書かない（すべてディスクリプタ側）。
#
# ライフサイクル:
#   - 登録はコンストラクタ内でのみ行う（起動時に一度だけ）
#   - 構築後は読み取り専用。ロック不要
#   - プロセス共有のインスタンスは get_registry() で遅延生成

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from typing import Any

from ..core import DuplicateItemTypeError, ItemType, MenuItem, UnknownItemTypeError
from ..item_types import BUILTIN_ITEM_TYPES
from .logger import get_logger, profile_scope


class ItemTypeRegistry:
    """アイテムタイプのレジストリ兼ファクトリ。

    エディタ・永続化・実行エンジンに明示的に渡して使う。
    テストでは独立したインスタンスをいくつでも作れる。
    """

    def __init__(self, item_types: Iterable[tuple[str, Any]] | None = None):
        """レジストリを構築する。

        Args:
            item_types: (種類名, ディスクリプタ) の列。
                ディスクリプタはインスタンスでもクラスでもよい（クラスなら生成する）。
                None なら組み込みの 4 種類。

        Raises:
            DuplicateItemTypeError: 同じ種類名が二度現れた
            TypeError: ItemType Protocol を満たさないディスクリプタ
        """
        self._types: dict[str, ItemType] = {}
        self._log = get_logger("registry")

        if item_types is None:
            item_types = BUILTIN_ITEM_TYPES

        with profile_scope("build_item_type_registry"):
            for type_name, descriptor in item_types:
                self._register(type_name, descriptor)

        self._log.info("Registry built", action="build", count=len(self._types))

    def _register(self, type_name: str, descriptor: Any) -> None:
        """種類を 1 つ登録（構築中のみ）"""
        if isinstance(descriptor, type):
            descriptor = descriptor()

        if not isinstance(descriptor, ItemType):
            self._log.error("Invalid item type descriptor", action="register", item_type=type_name)
            raise TypeError(
                f"Descriptor for {type_name!r} does not satisfy ItemType: "
                f"{type(descriptor).__name__}"
            )

        if type_name in self._types:
            self._log.error("Duplicate item type", action="register", item_type=type_name)
            raise DuplicateItemTypeError(type_name)

        self._types[type_name] = descriptor
        self._log.debug("Item type registered", action="register", item_type=type_name)

    # -------------------------------------------------------------------------
    # 参照
    # -------------------------------------------------------------------------

    def get(self, type_name: str) -> ItemType | None:
        """ディスクリプタを取得。未登録なら None（例外は投げない）"""
        return self._types.get(type_name)

    def list_all(self) -> list[tuple[str, ItemType]]:
        """全種類を登録順で返す。

        返り値は毎回新しいリスト。変更してもレジストリには影響しない。
        """
        return list(self._types.items())

    def type_names(self) -> list[str]:
        """種類名のリスト（登録順）"""
        return list(self._types)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._types))

    def _require(self, type_name: str) -> ItemType:
        descriptor = self._types.get(type_name)
        if descriptor is None:
            self._log.error("Unknown item type", action="lookup", item_type=str(type_name))
            raise UnknownItemTypeError(type_name, self._types)
        return descriptor

    # -------------------------------------------------------------------------
    # 生成・説明
    # -------------------------------------------------------------------------

    def create(self, type_name: str) -> MenuItem:
        """新しいメニューアイテムを生成。

        payload はディスクリプタのデフォルトを deepcopy する。
        同じ種類から作った 2 つのアイテムが状態を共有することはない。
        children はコンテナ種類のときだけ空リスト、それ以外は None。

        Raises:
            UnknownItemTypeError: 未登録の種類名
        """
        descriptor = self._require(type_name)

        item = MenuItem(
            kind=type_name,
            payload=copy.deepcopy(descriptor.default_payload),
            display_name=descriptor.default_display_name,
            icon=descriptor.default_icon,
            icon_theme=descriptor.default_icon_theme,
        )

        if descriptor.is_container:
            item.children = []

        self._log.debug("Item created", action="create", item_type=type_name)
        return item

    def describe(self, item: MenuItem) -> str:
        """アイテムの 1 行説明を、その種類のディスクリプタに任せて取得。

        Raises:
            UnknownItemTypeError: item.kind が未登録
        """
        return self._require(item.kind).describe_instance(item)


# =============================================================================
# プロセス共有インスタンス
# =============================================================================

_shared_registry: ItemTypeRegistry | None = None


def get_registry() -> ItemTypeRegistry:
    """プロセス共有のレジストリを取得。

    初回アクセス時に組み込み種類で構築し、以後は作り直さない。
    """
    global _shared_registry

    if _shared_registry is None:
        _shared_registry = ItemTypeRegistry()
    return _shared_registry


def reset_registry() -> None:
    """Internal: 共有インスタンスを破棄（テスト用）"""
    global _shared_registry

    _shared_registry = None
