"""骰点表达式解析器

支持的表达式 (不区分大小写，忽略空白):
    2D6, D20, 4DF, D%, 4D[-1,0,1]        骰子组
    4D6DH1, 2D20KH, 3D6KL2               取舍 (DH/DL/KH/KL，默认 1)
    D6!, 4D6!>5, D10!=3, D6!<2           爆骰
    3D20+4, D4!>3/4^3                    算术修饰，每项最多两个
    3D20+4+D4!>3/4^3                     多项相加

"+" 后面紧跟纯整数时视为前一项的算术修饰，紧跟骰子组时开始新的一项。
"""
import re
from typing import List, Optional

from ..config import settings
from ..errors import DiceError, DiceSyntaxError
from ..logging import log_parse
from .die import CustomDie, Die, FudgeDie, PercentileDie, SidedDie
from .modifiers import Arithmetic, DropKeep, Explode
from .pool import Pool
from .randomizer import Randomizer
from .rollable import Rollable
from .tracer import Tracer

# 每一项最多允许的算术修饰数量
MAX_ARITHMETIC_MODIFIERS = 2


class ExpressionParser:
    """将骰点表达式解析为可掷骰对象"""

    WHITESPACE = re.compile(r"\s+")

    # 单项: 骰子组 + 可选取舍 + 可选爆骰 + 任意个算术修饰
    TERM_PATTERN = re.compile(
        r"(?P<count>\d+)?D(?P<sides>\d+|F|%|\[[^\]]*\])"
        r"(?:(?P<algorithm>DH|DL|KH|KL)(?P<keep>\d+)?)?"
        r"(?P<explode>!(?:(?P<comparator>[=<>])(?P<threshold>-?\d+)?|(?P<bare>\d+))?)?"
        r"(?P<arithmetic>(?:[-+*/^]\d+(?![\d\[DF%]))*)",
        re.IGNORECASE,
    )
    ARITHMETIC_PATTERN = re.compile(r"([-+*/^])(\d+)")
    FACE_PATTERN = re.compile(r"-?\d+")

    def __init__(
        self,
        randomizer: Optional[Randomizer] = None,
        tracer: Optional[Tracer] = None,
        max_dice_count: Optional[int] = None,
        max_sides: Optional[int] = None,
        max_operand: Optional[int] = None,
        max_exponent: Optional[int] = None,
    ):
        self.randomizer = randomizer
        self.tracer = tracer
        self.max_dice_count = max_dice_count or settings.max_dice_count
        self.max_sides = max_sides or settings.max_sides
        self.max_operand = max_operand or settings.max_operand
        self.max_exponent = max_exponent or settings.max_exponent

    @log_parse
    def parse(self, notation: str) -> Rollable:
        """解析骰点表达式

        Raises:
            DiceSyntaxError: 表达式不符合语法或数值超出范围
            CanNotBeRolled: 节点参数非法 (如取舍数量过多、无限爆骰)
        """
        if not isinstance(notation, str):
            raise DiceSyntaxError("表达式必须为字符串", repr(notation))
        expression = self.WHITESPACE.sub("", notation)
        if not expression:
            raise DiceSyntaxError("表达式不能为空")

        terms: List[Rollable] = []
        position = 0
        while True:
            match = self.TERM_PATTERN.match(expression, position)
            if not match:
                raise DiceSyntaxError("无法解析的表达式片段", expression[position:])
            terms.append(self._build_term(match))
            position = match.end()
            if position == len(expression):
                break
            if expression[position] != "+":
                raise DiceSyntaxError("无法解析的表达式片段", expression[position:])
            position += 1

        if len(terms) == 1:
            return terms[0]
        return self._track(Pool(*terms))

    def is_valid(self, notation: str) -> bool:
        """检查表达式是否有效"""
        try:
            self.parse(notation)
        except DiceError:
            return False
        return True

    def _track(self, rollable: Rollable) -> Rollable:
        if self.tracer is not None:
            rollable.tracer = self.tracer
        return rollable

    def _build_term(self, match: re.Match) -> Rollable:
        fragment = match.group(0)

        count = int(match.group("count")) if match.group("count") else 1
        if count < 1 or count > self.max_dice_count:
            raise DiceSyntaxError(f"骰子数量必须在 1 至 {self.max_dice_count} 之间", fragment)

        die = self._build_die(match.group("sides"), fragment)
        rollable: Rollable = die
        if count > 1:
            rollable = self._track(Pool.from_rollable(die, count))

        if match.group("algorithm"):
            keep = int(match.group("keep")) if match.group("keep") else 1
            rollable = self._track(DropKeep(rollable, match.group("algorithm"), keep))

        if match.group("explode"):
            comparator = match.group("comparator") or "="
            threshold = match.group("threshold") or match.group("bare")
            rollable = self._track(
                Explode(rollable, comparator, int(threshold) if threshold else None)
            )

        operations = self.ARITHMETIC_PATTERN.findall(match.group("arithmetic"))
        if len(operations) > MAX_ARITHMETIC_MODIFIERS:
            raise DiceSyntaxError(
                f"每一项最多只能有 {MAX_ARITHMETIC_MODIFIERS} 个算术修饰", fragment
            )
        for operator, operand in operations:
            value = int(operand)
            limit = self.max_exponent if operator == "^" else self.max_operand
            if value > limit:
                raise DiceSyntaxError(f"{operator} 的操作数不能超过 {limit}", fragment)
            rollable = self._track(Arithmetic(rollable, operator, value))

        return rollable

    def _build_die(self, sides: str, fragment: str) -> Die:
        if sides.upper() == "F":
            return self._track(FudgeDie(randomizer=self.randomizer))
        if sides == "%":
            return self._track(PercentileDie(randomizer=self.randomizer))
        if sides.startswith("["):
            faces = sides[1:-1].split(",")
            if not all(self.FACE_PATTERN.fullmatch(face) for face in faces):
                raise DiceSyntaxError("自定义骰子面值必须为逗号分隔的整数", fragment)
            return self._track(CustomDie(*(int(face) for face in faces), randomizer=self.randomizer))

        value = int(sides)
        if value < 2 or value > self.max_sides:
            raise DiceSyntaxError(f"骰子面数必须在 2 至 {self.max_sides} 之间", fragment)
        return self._track(SidedDie(value, randomizer=self.randomizer))
