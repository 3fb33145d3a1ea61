"""算术修饰器"""
from enum import Enum
from typing import Callable, List, Tuple, Union

from ...errors import InvalidOperand, UnknownOperator
from ..rollable import MAX_INT, Rollable
from .base import Modifier


class Operator(Enum):
    """算术运算符"""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"

    @classmethod
    def from_symbol(cls, symbol: Union[str, "Operator"]) -> "Operator":
        if isinstance(symbol, cls):
            return symbol
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperator(str(symbol)) from None

    def apply(self, lhs: int, rhs: int) -> int:
        if self is Operator.ADD:
            return lhs + rhs
        if self is Operator.SUBTRACT:
            return lhs - rhs
        if self is Operator.MULTIPLY:
            return lhs * rhs
        if self is Operator.DIVIDE:
            # 向零取整
            quotient = abs(lhs) // rhs
            return -quotient if lhs < 0 else quotient
        return lhs ** rhs


class Arithmetic(Modifier):
    """对内部对象的结果做一次整数运算"""

    def __init__(self, rollable: Rollable, operator: Union[str, Operator], operand: int):
        super().__init__()
        self.operator = Operator.from_symbol(operator)
        if isinstance(operand, bool) or not isinstance(operand, int):
            raise InvalidOperand(f"操作数必须为整数，当前为 {operand!r}")
        if operand < 0:
            raise InvalidOperand(f"操作数不能为负数，当前为 {operand}")
        if self.operator is Operator.DIVIDE and operand == 0:
            raise InvalidOperand("除数不能为 0")
        self.rollable = rollable
        self.operand = operand

    @property
    def inner(self) -> Rollable:
        return self.rollable

    def notation(self) -> str:
        inner = self.rollable.notation()
        if "+" in inner and not self._is_left_fold():
            inner = f"({inner})"
        return f"{inner}{self.operator.value}{self.operand}"

    def _is_left_fold(self) -> bool:
        """内部是否为解析器从左到右折叠出的算术链，如 D4!>3/4^3"""
        node = self.rollable
        while isinstance(node, Arithmetic):
            node = node.rollable
        return "+" not in node.notation()

    def _format(self, inner_trace: str) -> str:
        if " " in inner_trace or inner_trace.startswith("-"):
            inner_trace = f"({inner_trace})"
        return f"{inner_trace} {self.operator.value} {self.operand}"

    def _roll(self) -> Tuple[int, str]:
        inner = self.rollable.roll()
        return self.operator.apply(inner.value, self.operand), self._format(inner.operation)

    def _minimum(self) -> Tuple[int, str]:
        return self._bound(min)

    def _maximum(self) -> Tuple[int, str]:
        return self._bound(max)

    def _bound(self, select: Callable) -> Tuple[int, str]:
        """在内部上下界 (以及跨越 0 时最接近 0 的结果) 上求运算结果的极值"""
        low = self.rollable.minimum_outcome()
        high = self.rollable.maximum_outcome()
        unbounded = high.value >= MAX_INT
        is_constant = self.operand == 0 and self.operator in (Operator.MULTIPLY, Operator.POWER)
        if unbounded and select is max and not is_constant:
            return MAX_INT, self._format(high.operation)

        points: List[Tuple[int, str]] = [(low.value, low.operation)]
        if not unbounded:
            points.append((high.value, high.operation))
        if self.operator is Operator.POWER and low.value < 0 < high.value:
            nearest = self.rollable.nearest_to_zero()
            points.append((nearest, str(nearest)))

        value, operation = select(
            ((self.operator.apply(v, self.operand), op) for v, op in points),
            key=lambda p: p[0],
        )
        return value, self._format(operation)
