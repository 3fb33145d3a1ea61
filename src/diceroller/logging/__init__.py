"""日志模块"""
from .config import setup_logging, get_logger
from .handlers import log_parse

__all__ = ["setup_logging", "get_logger", "log_parse"]
