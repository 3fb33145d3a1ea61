"""日志装饰器

记录表达式解析的输入、耗时和失败原因。
"""
import time
from functools import wraps
from typing import Any, Callable

from loguru import logger


def log_parse(func: Callable) -> Callable:
    """表达式解析日志装饰器

    用于装饰 ExpressionParser.parse 方法。

    日志格式:
    - 开始: PARSE | notation=xxx
    - 成功: PARSE_OK | notation=xxx | tree=xxx | duration=xxxms
    - 失败: PARSE_ERR | notation=xxx | error=xxx
    """
    @wraps(func)
    def wrapper(self, notation: str, *args, **kwargs) -> Any:
        start_time = time.perf_counter()
        logger.debug(f"PARSE | notation={notation!r}")

        try:
            result = func(self, notation, *args, **kwargs)
        except Exception as e:
            duration = (time.perf_counter() - start_time) * 1000
            # 表达式错误属于调用方输入问题，不打印堆栈
            logger.info(
                f"PARSE_ERR | notation={notation!r} | "
                f"duration={duration:.2f}ms | error={type(e).__name__}: {e}"
            )
            raise

        duration = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"PARSE_OK | notation={notation!r} | tree={result.notation()} | "
            f"duration={duration:.2f}ms"
        )
        return result

    return wrapper
