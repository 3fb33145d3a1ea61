"""骰池"""
from typing import Iterator, List, Tuple

from ..errors import InvalidPool
from .die import Die
from .rollable import Outcome, Rollable, bounded_sum, wrap_trace


class Pool(Rollable):
    """有序的可掷骰对象集合，结果为各对象结果之和

    空骰池本身是合法对象，最小值、最大值和掷骰结果都为 0，
    但爆骰和取舍修饰器会拒绝空骰池。
    """

    def __init__(self, *rollables: Rollable):
        super().__init__()
        self._items: List[Rollable] = list(rollables)

    @classmethod
    def from_rollable(cls, rollable: Rollable, count: int = 1) -> "Pool":
        """将同一个对象复制 count 份组成骰池"""
        if count < 1:
            raise InvalidPool.invalid_count(count)
        items = [rollable] + [rollable.clone() for _ in range(count - 1)]
        return cls(*items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Rollable]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Rollable:
        return self._items[index]

    def children(self) -> Tuple[Rollable, ...]:
        return tuple(self._items)

    def nearest_to_zero(self) -> int:
        if len(self._items) == 1:
            return self._items[0].nearest_to_zero()
        return super().nearest_to_zero()

    def notation(self) -> str:
        # 连续的相同骰子合并为 {数量}D{面数}
        parts: List[str] = []
        run_notation, run_count = None, 0
        for item in self._items:
            item_notation = item.notation()
            if isinstance(item, Die) and item_notation == run_notation:
                run_count += 1
                continue
            if run_notation is not None:
                parts.append(self._format_run(run_notation, run_count))
            if isinstance(item, Die):
                run_notation, run_count = item_notation, 1
            else:
                run_notation, run_count = None, 0
                parts.append(item_notation)
        if run_notation is not None:
            parts.append(self._format_run(run_notation, run_count))
        return "+".join(parts)

    @staticmethod
    def _format_run(notation: str, count: int) -> str:
        return notation if count == 1 else f"{count}{notation}"

    def _combine(self, outcomes: List[Outcome]) -> Tuple[int, str]:
        if not outcomes:
            return 0, "0"
        value = sum(o.value for o in outcomes)
        operation = " + ".join(wrap_trace(o.operation) for o in outcomes)
        return value, operation

    def _minimum(self) -> Tuple[int, str]:
        return self._combine([item.minimum_outcome() for item in self._items])

    def _maximum(self) -> Tuple[int, str]:
        outcomes = [item.maximum_outcome() for item in self._items]
        value, operation = self._combine(outcomes)
        return bounded_sum(o.value for o in outcomes), operation

    def _roll(self) -> Tuple[int, str]:
        return self._combine([item.roll() for item in self._items])
