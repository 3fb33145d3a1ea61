"""diceroller - 骰点表达式解析与求值引擎"""
from loguru import logger

from .dice import (
    MAX_INT, Outcome, Rollable,
    Randomizer, SystemRandomizer, SeededRandomizer, SequenceRandomizer,
    Tracer, NullTracer, MemoryTracer, LogTracer,
    Die, SidedDie, CustomDie, FudgeDie, PercentileDie,
    Pool,
    Arithmetic, Operator, DropKeep, Algorithm, Explode, Comparator,
    ExpressionParser,
    DiceRoller, RollReport,
)
from .errors import (
    DiceError, CanNotBeRolled, InvalidDie, InvalidPool,
    UnknownOperator, InvalidOperand, UnknownAlgorithm, TooManyDropped,
    UnknownComparator, InfiniteLoop, DiceSyntaxError,
)

# 作为库使用时默认不输出日志，调用 diceroller.logging.setup_logging 后启用
logger.disable("diceroller")

__version__ = "0.1.0"


def parse(notation: str) -> Rollable:
    """使用默认配置解析骰点表达式"""
    return ExpressionParser().parse(notation)


def roll(notation: str) -> RollReport:
    """使用默认配置执行一次骰点"""
    return DiceRoller().roll(notation)


__all__ = [
    "MAX_INT", "Outcome", "Rollable",
    "Randomizer", "SystemRandomizer", "SeededRandomizer", "SequenceRandomizer",
    "Tracer", "NullTracer", "MemoryTracer", "LogTracer",
    "Die", "SidedDie", "CustomDie", "FudgeDie", "PercentileDie",
    "Pool",
    "Arithmetic", "Operator", "DropKeep", "Algorithm", "Explode", "Comparator",
    "ExpressionParser",
    "DiceRoller", "RollReport",
    "DiceError", "CanNotBeRolled", "InvalidDie", "InvalidPool",
    "UnknownOperator", "InvalidOperand", "UnknownAlgorithm", "TooManyDropped",
    "UnknownComparator", "InfiniteLoop", "DiceSyntaxError",
    "parse", "roll",
]
