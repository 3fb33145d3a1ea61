"""骰点修饰器"""
from .base import Modifier, PoolModifier
from .arithmetic import Arithmetic, Operator
from .dropkeep import Algorithm, DropKeep
from .explode import Comparator, Explode

__all__ = [
    "Modifier", "PoolModifier",
    "Arithmetic", "Operator",
    "DropKeep", "Algorithm",
    "Explode", "Comparator",
]
