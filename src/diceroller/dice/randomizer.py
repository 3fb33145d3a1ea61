"""随机数来源"""
import random
from abc import ABC, abstractmethod
from itertools import cycle
from typing import Iterable, Optional


class Randomizer(ABC):
    """随机数来源基类"""

    @abstractmethod
    def next(self, minimum: int, maximum: int) -> int:
        """返回 [minimum, maximum] 闭区间内均匀分布的整数"""
        pass


class SystemRandomizer(Randomizer):
    """使用 random 模块全局状态"""

    def next(self, minimum: int, maximum: int) -> int:
        return random.randint(minimum, maximum)


class SeededRandomizer(Randomizer):
    """使用独立种子的随机数来源，相同种子产生相同序列"""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def next(self, minimum: int, maximum: int) -> int:
        return self._random.randint(minimum, maximum)


class SequenceRandomizer(Randomizer):
    """按给定序列循环返回数值，用于复现掷骰过程

    超出请求区间的数值会被截断到区间边界。
    """

    def __init__(self, values: Iterable[int]):
        values = list(values)
        if not values:
            raise ValueError("序列不能为空")
        self._values = cycle(values)

    def next(self, minimum: int, maximum: int) -> int:
        return max(minimum, min(next(self._values), maximum))


default_randomizer = SystemRandomizer()
