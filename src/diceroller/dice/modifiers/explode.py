"""爆骰修饰器"""
from enum import Enum
from typing import List, Optional, Tuple, Union

from ...errors import InfiniteLoop, InvalidPool, UnknownComparator
from ..rollable import MAX_INT, Rollable, wrap_trace
from .base import PoolModifier


class Comparator(Enum):
    """爆骰触发条件"""
    EQUALS = "="
    GREATER_THAN = ">"
    LESSER_THAN = "<"

    @classmethod
    def from_symbol(cls, symbol: Union[str, "Comparator"]) -> "Comparator":
        if isinstance(symbol, cls):
            return symbol
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownComparator(str(symbol)) from None

    def matches(self, value: int, threshold: int) -> bool:
        if self is Comparator.EQUALS:
            return value == threshold
        if self is Comparator.GREATER_THAN:
            return value > threshold
        return value < threshold

    def always_matches(self, minimum: int, maximum: int, threshold: int) -> bool:
        """判断在 [minimum, maximum] 范围内是否每次掷骰都会再次触发"""
        if self is Comparator.GREATER_THAN:
            return threshold <= minimum
        if self is Comparator.LESSER_THAN:
            return threshold >= maximum
        return threshold == maximum == minimum


class Explode(PoolModifier):
    """满足条件时重骰并累加，如 D6!、4D6!>3

    未指定阈值时使用各成员自身的最大值。
    """

    def __init__(
        self,
        rollable: Rollable,
        comparator: Union[str, Comparator] = Comparator.EQUALS,
        threshold: Optional[int] = None,
    ):
        super().__init__(rollable)
        self.comparator = Comparator.from_symbol(comparator)
        self.threshold = threshold
        if self.pool.is_empty():
            raise InvalidPool.empty("爆骰")
        self._validate()

    def _validate(self) -> None:
        minimum, maximum = self.pool.minimum(), self.pool.maximum()
        threshold = self.threshold if self.threshold is not None else maximum
        if self.comparator.always_matches(minimum, maximum, threshold):
            raise InfiniteLoop(self.notation())

        # 掷骰时逐个成员判断，所以每个成员也必须能终止
        for item in self.pool:
            minimum, maximum = item.minimum(), item.maximum()
            threshold = self.threshold if self.threshold is not None else maximum
            if self.comparator.always_matches(minimum, maximum, threshold):
                raise InfiniteLoop(self.notation())

    def notation(self) -> str:
        suffix = "!"
        if self.comparator is not Comparator.EQUALS or self.threshold is not None:
            suffix += self.comparator.value
        if self.threshold is not None:
            suffix += str(self.threshold)
        return f"{self._pool_notation()}{suffix}"

    def _explode(self, item: Rollable) -> Tuple[int, str]:
        threshold = self.threshold if self.threshold is not None else item.maximum()
        total = 0
        traces: List[str] = []
        while True:
            outcome = item.roll()
            total += outcome.value
            traces.append(wrap_trace(outcome.operation))
            if not self.comparator.matches(outcome.value, threshold):
                break
        return total, " + ".join(traces)

    def _roll(self) -> Tuple[int, str]:
        total = 0
        traces: List[str] = []
        for item in self.pool:
            value, trace = self._explode(item)
            total += value
            traces.append(trace)
        return total, " + ".join(traces)

    def _minimum(self) -> Tuple[int, str]:
        outcome = self.pool.minimum_outcome()
        return outcome.value, outcome.operation

    def _maximum(self) -> Tuple[int, str]:
        return MAX_INT, str(MAX_INT)
