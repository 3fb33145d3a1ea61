"""骰点异常定义

所有异常只会在构造节点或解析表达式时抛出，
构造成功的表达式树在 roll/minimum/maximum 时不会再抛出异常。
"""
from typing import Optional


class DiceError(ValueError):
    """骰点相关异常基类"""


class CanNotBeRolled(DiceError):
    """节点参数非法，无法构造出可掷骰的对象"""


class InvalidDie(CanNotBeRolled):
    """骰子面数小于 2，或自定义骰子没有任何面"""

    @classmethod
    def too_few_sides(cls, sides: int) -> "InvalidDie":
        return cls(f"骰子面数必须不小于 2，当前为 {sides}")

    @classmethod
    def no_faces(cls) -> "InvalidDie":
        return cls("自定义骰子至少需要一个面")


class InvalidPool(CanNotBeRolled):
    """骰池数量非法，或对空骰池执行了需要非空输入的操作"""

    @classmethod
    def invalid_count(cls, count: int) -> "InvalidPool":
        return cls(f"骰子数量必须不小于 1，当前为 {count}")

    @classmethod
    def empty(cls, modifier: str) -> "InvalidPool":
        return cls(f"{modifier} 不能作用于空骰池")


class UnknownOperator(CanNotBeRolled):
    """未知的算术运算符"""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"未知的运算符: {operator!r}")


class InvalidOperand(CanNotBeRolled):
    """算术运算的操作数非法"""


class UnknownAlgorithm(CanNotBeRolled):
    """未知的取舍算法"""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(f"未知的取舍算法: {algorithm!r}")


class TooManyDropped(CanNotBeRolled):
    """取舍数量超出骰池大小"""

    def __init__(self, threshold: int, size: int):
        self.threshold = threshold
        self.size = size
        super().__init__(f"取舍数量 {threshold} 超出范围，骰池中只有 {size} 个对象")


class UnknownComparator(CanNotBeRolled):
    """未知的爆骰比较符"""

    def __init__(self, comparator: str):
        self.comparator = comparator
        super().__init__(f"未知的比较符: {comparator!r}")


class InfiniteLoop(CanNotBeRolled):
    """爆骰条件恒成立，会导致无限重骰"""

    def __init__(self, notation: str):
        self.notation = notation
        super().__init__(f"表达式 {notation} 会导致无限爆骰")


class DiceSyntaxError(DiceError):
    """骰点表达式不符合语法"""

    def __init__(self, message: str, fragment: Optional[str] = None):
        self.fragment = fragment
        if fragment is not None:
            message = f"{message}: {fragment!r}"
        super().__init__(message)
