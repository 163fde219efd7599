# infra/logger.py - セッションベース構造化ロガー
#
# 1 プロセス = 1 セッション = 1 NDJSON ファイル。
# カテゴリごとにスキーマを持ち、フィールドの型がずれたエントリには印を付ける。
#
# 設定（init_logger() 時に環境変数から読む）:
#   PIE_ITEMS_LOG_DIR   - 出力先ディレクトリ。未設定ならファイル出力しない
#   PIE_ITEMS_LOG_LEVEL - ロガーのしきい値 (debug/info/error)

from __future__ import annotations

import json
import os
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any


ENV_LOG_DIR = "PIE_ITEMS_LOG_DIR"
ENV_LOG_LEVEL = "PIE_ITEMS_LOG_LEVEL"

MAX_SESSIONS = 10
LEVELS = ("debug", "info", "error")


@dataclass(frozen=True)
class LogSchema:
    """カテゴリが持つべきフィールドと型"""

    category: str
    fields: dict[str, type] = field(default_factory=dict)

    def validate(self, data: dict[str, Any]) -> bool:
        return all(
            isinstance(data[name], expected)
            for name, expected in self.fields.items()
            if name in data
        )


SCHEMAS = {
    schema.category: schema
    for schema in (
        LogSchema("registry", {"action": str, "item_type": str, "count": int}),
        LogSchema("profile", {"scope": str, "duration_ms": float}),
        LogSchema("general"),
    )
}


@dataclass
class LogSession:
    """現在のセッション。log_path が None ならファイル出力なし。"""

    session_id: str
    level: str = "debug"
    log_path: Path | None = None

    def write(self, entry: dict[str, Any]) -> None:
        if self.log_path is None:
            return
        try:
            with self.log_path.open("a", encoding="utf-8") as fp:
                fp.write(json.dumps(entry, ensure_ascii=False, default=str) + "\n")
        except OSError:
            # ログ出力失敗で呼び出し側を止めない
            pass


_session: LogSession | None = None
_loggers: dict[str, StructuredLogger] = {}


class StructuredLogger:
    """カテゴリ別の構造化ロガー。

    level と enabled はインスタンスごとに書き換えられる。
    """

    def __init__(self, schema: LogSchema, level: str):
        self.schema = schema
        self.level = level
        self.enabled = True

    def _emit(self, level: str, message: str, data: dict[str, Any]) -> None:
        if not self.enabled or LEVELS.index(level) < LEVELS.index(self.level):
            return

        session = get_session()
        entry = {
            "session_id": session.session_id,
            "timestamp": int(time.time() * 1000),
            "level": level,
            "category": self.schema.category,
            "message": message,
            **data,
        }
        if not self.schema.validate(data):
            entry["schema_mismatch"] = True
        session.write(entry)

    def debug(self, message: str, **data: Any) -> None:
        self._emit("debug", message, data)

    def info(self, message: str, **data: Any) -> None:
        self._emit("info", message, data)

    def error(self, message: str, **data: Any) -> None:
        self._emit("error", message, data)


# ===========================================================================
# セッション管理
# ===========================================================================


def _open_log_file(log_dir: Path, now: datetime) -> Path | None:
    """セッションファイルを作成し、古いものを MAX_SESSIONS 件まで削る"""
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{now.strftime('%Y-%m-%d_%H-%M-%S')}.ndjson"
        log_path.touch()
    except OSError:
        return None

    older = sorted(
        (f for f in log_dir.glob("*.ndjson") if f != log_path),
        key=lambda f: f.stat().st_mtime,
        reverse=True,
    )
    for stale in older[MAX_SESSIONS - 1:]:
        try:
            stale.unlink()
        except OSError:
            pass
    return log_path


def init_logger() -> LogSession:
    """セッションを開始（初期化済みなら何もしない）"""
    global _session

    if _session is not None:
        return _session

    now = datetime.now()
    level = os.environ.get(ENV_LOG_LEVEL, "debug").lower()
    log_dir = os.environ.get(ENV_LOG_DIR)

    _session = LogSession(
        session_id=f"s_{now.strftime('%Y%m%d_%H%M%S')}",
        level=level if level in LEVELS else "debug",
        log_path=_open_log_file(Path(log_dir).expanduser(), now) if log_dir else None,
    )
    get_logger("general").info(
        "Logger initialized",
        log_path=str(_session.log_path) if _session.log_path else None,
    )
    return _session


def get_session() -> LogSession:
    return init_logger()


def shutdown_logger() -> None:
    """セッションを閉じる。次の get_logger() で新しいセッションが始まる。"""
    global _session

    _session = None
    _loggers.clear()


def get_logger(category: str) -> StructuredLogger:
    """カテゴリ別ロガーを取得。未知のカテゴリはフィールド制約なし。"""
    session = get_session()
    if category not in _loggers:
        schema = SCHEMAS.get(category, LogSchema(category))
        _loggers[category] = StructuredLogger(schema, session.level)
    return _loggers[category]


@contextmanager
def profile_scope(scope: str):
    """ブロックの所要時間を profile カテゴリに記録する。

    使用例:
        with profile_scope("build_registry"):
            registry = ItemTypeRegistry()
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        get_logger("profile").debug(f"Completed: {scope}", scope=scope, duration_ms=duration_ms)
