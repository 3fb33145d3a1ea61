"""骰点模块"""
from .rollable import MAX_INT, Outcome, Rollable
from .randomizer import Randomizer, SystemRandomizer, SeededRandomizer, SequenceRandomizer
from .tracer import Tracer, NullTracer, MemoryTracer, LogTracer
from .die import Die, SidedDie, CustomDie, FudgeDie, PercentileDie
from .pool import Pool
from .modifiers import Arithmetic, Operator, DropKeep, Algorithm, Explode, Comparator
from .parser import ExpressionParser
from .roller import DiceRoller, RollReport

__all__ = [
    "MAX_INT", "Outcome", "Rollable",
    "Randomizer", "SystemRandomizer", "SeededRandomizer", "SequenceRandomizer",
    "Tracer", "NullTracer", "MemoryTracer", "LogTracer",
    "Die", "SidedDie", "CustomDie", "FudgeDie", "PercentileDie",
    "Pool",
    "Arithmetic", "Operator", "DropKeep", "Algorithm", "Explode", "Comparator",
    "ExpressionParser",
    "DiceRoller", "RollReport",
]
