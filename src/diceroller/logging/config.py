"""日志配置模块

diceroller 作为库使用时默认关闭自身日志 (见包的 __init__)，调用 setup_logging
后才会输出。库内产生的日志有三类:

    PARSE / PARSE_OK / PARSE_ERR   表达式解析，见 handlers.log_parse
    ROLL                          LogTracer 记录的每次求值
    TRACE_ERR                     追踪器自身抛出的异常，不会中断求值

级别和日志目录默认取自 Settings (DICE_ROLLER_LOG_LEVEL / DICE_ROLLER_LOG_PATH)。
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from ..config import settings

# 控制台日志格式 - 包含时间戳、级别、模块名和消息
DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level:<8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# 文件日志格式 - 纯文本
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level:<8} | "
    "{name}:{function}:{line} | "
    "{message}"
)

LIBRARY_NAME = "diceroller"


def setup_logging(
    level: Optional[str] = None,
    log_path: Optional[Path] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    console_format: Optional[str] = None,
    file_format: Optional[str] = None,
    enable_console: bool = True,
    enable_file: bool = True,
) -> None:
    """配置日志系统并启用 diceroller 的日志输出

    Args:
        level: 控制台日志级别，为空时使用 settings.log_level
        log_path: 日志文件目录，为空时使用 settings.log_path，两者都为空则不写文件
        rotation: 日志轮转策略 (如 "10 MB", "1 day", "00:00")
        retention: 日志保留策略 (如 "7 days", "1 week")
        console_format: 控制台日志格式
        file_format: 文件日志格式
        enable_console: 是否启用控制台输出
        enable_file: 是否启用文件输出
    """
    logger.remove()

    # 显式参数优先，其次是配置
    console_level = (level or settings.log_level).upper()
    log_path = log_path or settings.log_path

    if enable_console:
        logger.add(
            sys.stderr,
            level=console_level,
            format=console_format or DEFAULT_FORMAT,
            colorize=True,
            backtrace=True,
            diagnose=False,
        )

    if enable_file and log_path:
        log_path = Path(log_path)
        log_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path / "dice_{time:YYYY-MM-DD}.log",
            level="DEBUG",
            format=file_format or FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            compression="zip",
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
        )

    logger.enable(LIBRARY_NAME)


def get_logger(name: str = None):
    """获取绑定了 name 的日志记录器，格式中可通过 {extra[name]} 引用

    Args:
        name: 模块名称，用于日志标识

    Returns:
        绑定了名称的 logger 实例
    """
    if name:
        return logger.bind(name=name)
    return logger
