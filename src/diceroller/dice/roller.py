"""骰点执行器"""
from dataclasses import dataclass
from typing import List, Optional

from .parser import ExpressionParser
from .randomizer import Randomizer
from .rollable import Outcome
from .tracer import Tracer


@dataclass
class RollReport:
    """骰点结果"""

    expression: str  # 规范化后的表达式
    outcome: Outcome

    @property
    def total(self) -> int:
        return self.outcome.value

    def __str__(self) -> str:
        detail = self.outcome.operation
        if detail == str(self.total):
            return f"{self.expression} = {self.total}"
        return f"{self.expression} = {detail} = {self.total}"


class DiceRoller:
    """解析并执行骰点表达式"""

    def __init__(
        self,
        parser: Optional[ExpressionParser] = None,
        randomizer: Optional[Randomizer] = None,
        tracer: Optional[Tracer] = None,
    ):
        self.parser = parser or ExpressionParser(randomizer=randomizer, tracer=tracer)

    def roll(self, notation: str) -> RollReport:
        """执行一次骰点"""
        rollable = self.parser.parse(notation)
        return RollReport(expression=rollable.notation(), outcome=rollable.roll())

    def roll_many(self, notation: str, times: int) -> List[RollReport]:
        """对同一表达式重复骰点，只解析一次"""
        if times < 1:
            raise ValueError(f"重复次数必须不小于 1，当前为 {times}")
        rollable = self.parser.parse(notation)
        expression = rollable.notation()
        return [RollReport(expression=expression, outcome=rollable.roll()) for _ in range(times)]
