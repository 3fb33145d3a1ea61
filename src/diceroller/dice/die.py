"""骰子"""
from abc import abstractmethod
from typing import Optional, Sequence, Tuple

from ..errors import InvalidDie
from .randomizer import Randomizer, default_randomizer
from .rollable import Rollable


class Die(Rollable):
    """骰子基类，表达式树的叶子节点"""

    def __init__(self, randomizer: Optional[Randomizer] = None):
        super().__init__()
        self.randomizer = randomizer or default_randomizer

    def _minimum(self) -> Tuple[int, str]:
        value = self.lowest()
        return value, str(value)

    def _maximum(self) -> Tuple[int, str]:
        value = self.highest()
        return value, str(value)

    def _roll(self) -> Tuple[int, str]:
        value = self.draw()
        return value, str(value)

    @abstractmethod
    def lowest(self) -> int:
        """最小面值"""
        pass

    @abstractmethod
    def highest(self) -> int:
        """最大面值"""
        pass

    @abstractmethod
    def draw(self) -> int:
        """通过随机数来源抽取一个面值"""
        pass


class SidedDie(Die):
    """N 面骰，点数为 1..N"""

    def __init__(self, sides: int, randomizer: Optional[Randomizer] = None):
        if sides < 2:
            raise InvalidDie.too_few_sides(sides)
        super().__init__(randomizer)
        self.sides = sides

    def notation(self) -> str:
        return f"D{self.sides}"

    def lowest(self) -> int:
        return 1

    def highest(self) -> int:
        return self.sides

    def draw(self) -> int:
        return self.randomizer.next(1, self.sides)


class PercentileDie(SidedDie):
    """百分骰"""

    def __init__(self, randomizer: Optional[Randomizer] = None):
        super().__init__(100, randomizer)

    def notation(self) -> str:
        return "D%"


class CustomDie(Die):
    """自定义面骰，面值可以重复或为负数"""

    def __init__(self, *faces: int, randomizer: Optional[Randomizer] = None):
        if not faces:
            raise InvalidDie.no_faces()
        super().__init__(randomizer)
        self.faces: Tuple[int, ...] = tuple(int(f) for f in faces)

    @classmethod
    def from_faces(cls, faces: Sequence[int], randomizer: Optional[Randomizer] = None) -> "CustomDie":
        return cls(*faces, randomizer=randomizer)

    def notation(self) -> str:
        return "D[" + ",".join(str(f) for f in self.faces) + "]"

    def lowest(self) -> int:
        return min(self.faces)

    def highest(self) -> int:
        return max(self.faces)

    def nearest_to_zero(self) -> int:
        return min(self.faces, key=abs)

    def draw(self) -> int:
        # 按位置均匀抽取，重复的面值概率相应增加
        index = self.randomizer.next(0, len(self.faces) - 1)
        return self.faces[index]


class FudgeDie(CustomDie):
    """命运骰，面值为 -1, 0, 1"""

    def __init__(self, randomizer: Optional[Randomizer] = None):
        super().__init__(-1, 0, 1, randomizer=randomizer)

    def notation(self) -> str:
        return "DF"
