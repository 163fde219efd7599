# protocols.py - インターフェース定義
#
# アイテムタイプの「緩い契約」。
# 継承なしで、必要なプロパティとメソッドさえ持てば契約を満たす。
#
# 参考: PEP 544 - Protocols: Structural subtyping

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .schemas import MenuItem


@runtime_checkable
class ItemType(Protocol):
    """メニューアイテムの種類（kind）ごとのメタ情報。

    責務:
      - コンテナかどうかの宣言
      - 新規アイテムのデフォルト値
      - 人が読める説明文

    これは「種類の知識」を表す。レジストリや他の種類のことは知らない。
    状態を持たず、構築時に決まった値だけを返す。
    """

    @property
    def is_container(self) -> bool:
        """子アイテムを持てる種類か (submenu = True)"""
        ...

    @property
    def default_display_name(self) -> str:
        """新規アイテムのデフォルト名"""
        ...

    @property
    def default_icon(self) -> str:
        """新規アイテムのデフォルトアイコン"""
        ...

    @property
    def default_icon_theme(self) -> str:
        """新規アイテムのデフォルトアイコンテーマ"""
        ...

    @property
    def default_payload(self) -> Any:
        """新規アイテムのデフォルトデータ。

        中身は種類ごとに自由。レジストリは解釈しない。
        """
        ...

    @property
    def generic_description(self) -> str:
        """種類そのものの説明 (アイテム追加の選択 UI で表示)"""
        ...

    def describe_instance(self, item: MenuItem) -> str:
        """個々のアイテムの説明 (ゴミ箱・ストック一覧で名前の下に表示)。

        副作用なし。payload が壊れていても例外を投げない。
        """
        ...
