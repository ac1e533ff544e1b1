"""Router exports."""

# 日本語: 各機能ルーターを集約して application.py から一括 import 可能にする / English: Re-export feature routers for centralized app wiring
from .day_router import router as day_router
from .dev_router import router as dev_router
from .report_router import router as report_router
from .template_router import router as template_router
from .user_router import router as user_router

__all__ = [
    "day_router",
    "template_router",
    "user_router",
    "report_router",
    "dev_router",
]
