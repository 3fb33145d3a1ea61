"""修饰器基类"""
from abc import abstractmethod
from typing import Tuple

from ..pool import Pool
from ..rollable import Rollable


class Modifier(Rollable):
    """包装一个内部对象并改变其结果的修饰器"""

    @property
    @abstractmethod
    def inner(self) -> Rollable:
        """被包装的原始对象"""
        pass

    def children(self) -> Tuple[Rollable, ...]:
        return (self.inner,)


class PoolModifier(Modifier):
    """逐个处理骰池成员的修饰器，单个对象会被自动包装为单元素骰池"""

    def __init__(self, rollable: Rollable):
        super().__init__()
        self._is_wrapped = not isinstance(rollable, Pool)
        self.pool: Pool = Pool(rollable) if self._is_wrapped else rollable

    @property
    def inner(self) -> Rollable:
        if self._is_wrapped:
            return self.pool[0]
        return self.pool

    def _pool_notation(self) -> str:
        notation = self.pool.notation()
        if "+" in notation:
            return f"({notation})"
        return notation
