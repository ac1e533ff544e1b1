"""ASGI entrypoint for the Daily Logger package."""

import logging

from daily_logger.core.config import get_log_level

from .application import app, create_app

# 日本語: 環境変数のログレベルで初期化 / English: Configure logging from the environment log level
logging.basicConfig(level=get_log_level())

__all__ = ["app", "create_app"]
