"""掷骰追踪器

追踪器只接收每次求值产生的 Outcome，不会改变任何计算结果。
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, List, Optional

from loguru import logger

from ..config import settings

if TYPE_CHECKING:
    from .rollable import Outcome


class Tracer(ABC):
    """追踪器基类"""

    @abstractmethod
    def append(self, outcome: "Outcome") -> None:
        """接收一条求值记录"""
        pass


class NullTracer(Tracer):
    """丢弃所有记录的追踪器，节点默认使用"""

    def append(self, outcome: "Outcome") -> None:
        pass


class MemoryTracer(Tracer):
    """将记录保存在内存中的追踪器"""

    def __init__(self):
        self._records: List["Outcome"] = []

    def append(self, outcome: "Outcome") -> None:
        self._records.append(outcome)

    def records(self, method: Optional[str] = None) -> List["Outcome"]:
        """返回已记录的结果，可按方法名过滤"""
        if method is None:
            return list(self._records)
        return [r for r in self._records if r.method == method]

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator["Outcome"]:
        return iter(list(self._records))


class LogTracer(Tracer):
    """通过 loguru 输出记录的追踪器

    日志格式: ROLL | method=roll | node=3D6 | operation=1 + 4 + 2 | value=7
    """

    def __init__(self, level: Optional[str] = None, name: str = "tracer"):
        self.level = (level or settings.trace_level).upper()
        self._logger = logger.bind(name=name)

    def append(self, outcome: "Outcome") -> None:
        record = outcome.as_dict()
        self._logger.log(
            self.level,
            f"ROLL | method={record['method']} | node={record['source']} | "
            f"operation={record['operation']} | value={record['value']}",
        )
