"""Core configuration for Daily Logger."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# 日本語: ルート直下の secrets.env を起動時に読み込む / English: Load root-level secrets.env on startup
load_dotenv("secrets.env")

# 日本語: プロジェクトルート基準パス / English: Project root directory
BASE_DIR = Path(__file__).resolve().parents[2]

# 日本語: 端末ローカルの SQLite を既定の保存先とする / English: Local SQLite file is the default store
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite:///{BASE_DIR / 'instance' / 'daily-logger.db'}",
)

# 日本語: 出力レポートの保存先ディレクトリ / English: Durable directory for exported reports
EXPORT_DIR = os.getenv("DAILY_LOGGER_EXPORT_DIR", str(BASE_DIR / "exports"))

LOG_LEVEL = os.getenv("DAILY_LOGGER_LOG_LEVEL", "INFO")

# 日本語: テンプレート色の既定値(グレー) / English: Fallback template colour (gray)
DEFAULT_TEMPLATE_COLOR = "#8E8E93"

# 日本語: テンプレートに選択可能な色 / English: Colours offered for templates
COLOR_OPTIONS = {
    "#4CAF50": "Green",
    "#007AFF": "Blue",
    "#FF9500": "Orange",
    "#FF3B30": "Red",
    "#AF52DE": "Purple",
    "#FF2D92": "Pink",
    "#5AC8FA": "Teal",
    "#8E8E93": "Gray",
}


def get_export_dir() -> Path:
    """Directory where rendered reports are written."""
    # 日本語: 実行時の環境変数を優先 / English: Prefer runtime environment override
    return Path(os.getenv("DAILY_LOGGER_EXPORT_DIR", EXPORT_DIR)).expanduser()


def get_log_level() -> int:
    """Numeric logging level, falling back to INFO for unknown names."""
    raw_value = os.getenv("DAILY_LOGGER_LOG_LEVEL", LOG_LEVEL)
    level = logging.getLevelName(str(raw_value).strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO
