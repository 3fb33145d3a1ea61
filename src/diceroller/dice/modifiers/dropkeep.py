"""取舍修饰器"""
from enum import Enum
from typing import List, Tuple, Union

from ...errors import InvalidPool, TooManyDropped, UnknownAlgorithm
from ..rollable import Outcome, Rollable, bounded_sum
from .base import PoolModifier


class Algorithm(Enum):
    """取舍算法"""
    DROP_HIGHEST = "DH"
    DROP_LOWEST = "DL"
    KEEP_HIGHEST = "KH"
    KEEP_LOWEST = "KL"

    @classmethod
    def from_code(cls, code: Union[str, "Algorithm"]) -> "Algorithm":
        if isinstance(code, cls):
            return code
        try:
            return cls(str(code).upper())
        except ValueError:
            raise UnknownAlgorithm(str(code)) from None

    def select(self, values: List[int], threshold: int) -> List[int]:
        """按升序稳定排序后返回保留的值"""
        ordered = sorted(values)
        size = len(ordered)
        if self is Algorithm.DROP_HIGHEST:
            return ordered[:size - threshold]
        if self is Algorithm.DROP_LOWEST:
            return ordered[threshold:]
        if self is Algorithm.KEEP_HIGHEST:
            return ordered[size - threshold:]
        return ordered[:threshold]


class DropKeep(PoolModifier):
    """按大小舍弃或保留骰池中的部分结果，如 4D6DH1、2D20KH1"""

    def __init__(self, rollable: Rollable, algorithm: Union[str, Algorithm], threshold: int):
        super().__init__(rollable)
        if self.pool.is_empty():
            raise InvalidPool.empty("取舍")
        if threshold < 0 or threshold > len(self.pool):
            raise TooManyDropped(threshold, len(self.pool))
        self.algorithm = Algorithm.from_code(algorithm)
        self.threshold = threshold

    def notation(self) -> str:
        return f"{self._pool_notation()}{self.algorithm.value}{self.threshold}"

    def _decorate(self, outcomes: List[Outcome]) -> Tuple[List[int], str]:
        kept = self.algorithm.select([o.value for o in outcomes], self.threshold)
        operation = " + ".join(f"({v})" if v < 0 else str(v) for v in kept)
        return kept, operation or "0"

    def _roll(self) -> Tuple[int, str]:
        kept, operation = self._decorate([item.roll() for item in self.pool])
        return sum(kept), operation

    def _minimum(self) -> Tuple[int, str]:
        kept, operation = self._decorate([item.minimum_outcome() for item in self.pool])
        return sum(kept), operation

    def _maximum(self) -> Tuple[int, str]:
        kept, operation = self._decorate([item.maximum_outcome() for item in self.pool])
        return bounded_sum(kept), operation
