# errors.py - 例外の定義
#
# 実行時に起きうるのは「未登録の種類名」だけ。
# 重複登録は起動時（レジストリ構築時）にしか起きない。

from __future__ import annotations

from collections.abc import Iterable


class ItemTypeError(Exception):
    """pie_items の例外の基底クラス"""


class UnknownItemTypeError(ItemTypeError, ValueError):
    """登録されていない種類名が指定された。

    呼び出し側のプログラミングエラーとして扱う。リトライしない。
    """

    def __init__(self, type_name: str, known: Iterable[str] = ()):
        self.type_name = type_name
        self.known = tuple(known)
        message = f"Unknown menu item type: {type_name!r}"
        if self.known:
            message += f" (known types: {', '.join(self.known)})"
        super().__init__(message)


class DuplicateItemTypeError(ItemTypeError, ValueError):
    """同じ種類名が二度登録されようとした"""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Menu item type already registered: {type_name!r}")
