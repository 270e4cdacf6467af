"""Core module - Configuration and logging"""

from skin_profit.core.config import settings
from skin_profit.core.logger import get_logger

__all__ = ["settings", "get_logger"]
