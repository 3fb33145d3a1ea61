"""可掷骰对象基类

骰子、骰池和修饰器都继承 Rollable。子类只需实现 notation 和三个
带下划线的求值方法，记录最近一次结果和通知追踪器由基类统一处理。

同一棵表达式树不应被多个线程同时求值：最近一次结果保存在节点上，
需要并发时请为每个线程单独解析一棵树。
"""
import copy
import json
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from loguru import logger

from .tracer import NullTracer, Tracer

# 无上限的最大值用 MAX_INT 表示
MAX_INT = sys.maxsize


@dataclass(frozen=True)
class Outcome:
    """一次求值的结果"""

    value: int
    operation: str  # 结果的推导过程，如 "3 + 2 + (-1)"
    source: "Rollable"
    method: str  # roll / minimum / maximum

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        if self.operation == str(self.value):
            return self.operation
        return f"{self.operation} = {self.value}"

    def as_dict(self) -> dict:
        """转换为追踪记录"""
        return {
            "source": self.source.notation(),
            "value": self.value,
            "operation": self.operation,
            "method": self.method,
        }


def bounded_sum(values: Iterable[int]) -> int:
    """求和，任一项无上限时结果也无上限"""
    values = list(values)
    if any(v >= MAX_INT for v in values):
        return MAX_INT
    return sum(values)


def wrap_trace(trace: str) -> str:
    """含有 + 的推导过程加上括号"""
    if "+" in trace:
        return f"({trace})"
    return trace


class Rollable(ABC):
    """可掷骰对象"""

    def __init__(self):
        self._tracer: Tracer = NullTracer()
        self._last_outcome: Optional[Outcome] = None

    @abstractmethod
    def notation(self) -> str:
        """返回规范的骰点表达式"""
        pass

    @abstractmethod
    def _minimum(self) -> Tuple[int, str]:
        pass

    @abstractmethod
    def _maximum(self) -> Tuple[int, str]:
        pass

    @abstractmethod
    def _roll(self) -> Tuple[int, str]:
        pass

    @property
    def tracer(self) -> Tracer:
        return self._tracer

    @tracer.setter
    def tracer(self, tracer: Optional[Tracer]) -> None:
        self._tracer = tracer if tracer is not None else NullTracer()

    def set_tracer(self, tracer: Optional[Tracer]) -> None:
        self.tracer = tracer

    @property
    def last_outcome(self) -> Optional[Outcome]:
        """最近一次求值的结果"""
        return self._last_outcome

    @property
    def last_trace(self) -> str:
        """最近一次求值的推导过程"""
        if self._last_outcome is None:
            return ""
        return self._last_outcome.operation

    def roll(self) -> Outcome:
        self._last_outcome = None
        value, operation = self._roll()
        return self._record(value, operation, "roll")

    def minimum_outcome(self) -> Outcome:
        self._last_outcome = None
        value, operation = self._minimum()
        return self._record(value, operation, "minimum")

    def maximum_outcome(self) -> Outcome:
        self._last_outcome = None
        value, operation = self._maximum()
        return self._record(value, operation, "maximum")

    def minimum(self) -> int:
        return self.minimum_outcome().value

    def maximum(self) -> int:
        return self.maximum_outcome().value

    def nearest_to_zero(self) -> int:
        """可能出现的结果中绝对值最小的一个

        默认只依据上下界：范围跨越 0 时按 0 处理。
        """
        low, high = self.minimum(), self.maximum()
        if low >= 0:
            return low
        if high <= 0:
            return high
        return 0

    def _record(self, value: int, operation: str, method: str) -> Outcome:
        outcome = Outcome(value=value, operation=operation, source=self, method=method)
        self._last_outcome = outcome
        try:
            self._tracer.append(outcome)
        except Exception as e:
            # 追踪器异常不能中断求值
            logger.opt(exception=True).warning(
                f"TRACE_ERR | node={self.notation()} | method={method} | "
                f"error={type(e).__name__}: {e}"
            )
        return outcome

    def children(self) -> Tuple["Rollable", ...]:
        """直接子节点"""
        return ()

    def walk(self) -> Iterator["Rollable"]:
        """深度优先遍历自身及所有子孙节点"""
        yield self
        for child in self.children():
            yield from child.walk()

    def clone(self) -> "Rollable":
        """复制整棵子树，各节点的随机数来源和追踪器仍然共享"""
        memo = {}
        for node in self.walk():
            memo[id(node.tracer)] = node.tracer
            randomizer = getattr(node, "randomizer", None)
            if randomizer is not None:
                memo[id(randomizer)] = randomizer
        return copy.deepcopy(self, memo)

    def to_json(self) -> str:
        return json.dumps(self.notation())

    def __str__(self) -> str:
        return self.notation()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.notation()}>"
