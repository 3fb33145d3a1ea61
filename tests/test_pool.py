"""骰池单元测试"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from diceroller.dice import (
    MAX_INT, CustomDie, Explode, FudgeDie, MemoryTracer, Pool, SidedDie, SequenceRandomizer,
)
from diceroller.errors import InvalidPool


class TestPoolConstruction:
    """测试骰池构造"""

    def test_from_rollable(self):
        """测试复制构造"""
        pool = Pool.from_rollable(SidedDie(6), 4)
        assert len(pool) == 4
        assert all(isinstance(item, SidedDie) for item in pool)

    def test_from_rollable_copies_are_distinct(self):
        """测试每个位置拥有独立的对象"""
        pool = Pool.from_rollable(SidedDie(6), 3)
        assert len({id(item) for item in pool}) == 3

    def test_from_rollable_nested_copies_are_distinct(self):
        """测试复制嵌套骰池时子节点也被复制"""
        pool = Pool.from_rollable(Pool(SidedDie(6), SidedDie(4)), 2)
        assert pool[0] is not pool[1]
        assert pool[0][0] is not pool[1][0]
        assert pool[0][1] is not pool[1][1]
        assert pool.notation() == "D6+D4+D6+D4"

    def test_from_rollable_shares_randomizer_and_tracer(self):
        """测试复制后仍共享随机数来源和追踪器"""
        randomizer = SequenceRandomizer([1, 2, 3, 4])
        tracer = MemoryTracer()
        inner = Pool(SidedDie(6, randomizer=randomizer))
        inner.tracer = tracer
        inner[0].tracer = tracer
        pool = Pool.from_rollable(inner, 2)
        assert pool[1][0].randomizer is randomizer
        assert pool[1].tracer is tracer
        assert pool.roll().value == 3
        # 孙节点互不覆盖最近结果
        assert pool[0][0].last_outcome.value == 1
        assert pool[1][0].last_outcome.value == 2
        assert len(tracer.records("roll")) == 4

    @pytest.mark.parametrize("count", [0, -1])
    def test_invalid_count(self, count):
        """测试数量小于 1"""
        with pytest.raises(InvalidPool):
            Pool.from_rollable(SidedDie(6), count)

    def test_empty_pool(self):
        """测试空骰池本身合法"""
        pool = Pool()
        assert pool.is_empty()
        assert pool.minimum() == 0
        assert pool.maximum() == 0
        assert pool.roll().value == 0
        assert pool.notation() == ""


class TestPoolBounds:
    """测试骰池上下界"""

    def test_sum_of_children(self):
        """测试上下界为各成员之和"""
        children = [SidedDie(6), SidedDie(4), CustomDie(-3, 2)]
        pool = Pool(*children)
        assert pool.minimum() == sum(c.minimum() for c in children)
        assert pool.maximum() == sum(c.maximum() for c in children)

    def test_unbounded_child(self):
        """测试含爆骰成员时上界无限"""
        pool = Pool(SidedDie(6), Explode(SidedDie(6)))
        assert pool.minimum() == 2
        assert pool.maximum() == MAX_INT


class TestPoolRoll:
    """测试骰池掷骰"""

    def test_roll_sums_children(self):
        """测试掷骰结果与推导过程"""
        randomizer = SequenceRandomizer([3, 2, 5])
        pool = Pool.from_rollable(SidedDie(6, randomizer=randomizer), 3)
        outcome = pool.roll()
        assert outcome.value == 10
        assert outcome.operation == "3 + 2 + 5"

    def test_nested_trace_parenthesized(self):
        """测试嵌套骰池的推导过程带括号"""
        randomizer = SequenceRandomizer([3, 2, 5])
        inner = Pool(SidedDie(6, randomizer=randomizer), SidedDie(4, randomizer=randomizer))
        pool = Pool(inner, SidedDie(8, randomizer=randomizer))
        outcome = pool.roll()
        assert outcome.value == 10
        assert outcome.operation == "(3 + 2) + 5"

    def test_minimum_trace(self):
        """测试下界推导过程"""
        pool = Pool(SidedDie(6), CustomDie(-2, 4))
        outcome = pool.minimum_outcome()
        assert outcome.value == -1
        assert outcome.operation == "1 + -2"
        assert outcome.method == "minimum"


class TestPoolNotation:
    """测试骰池表达式"""

    def test_collapse_identical_dice(self):
        """测试相同骰子合并"""
        assert Pool.from_rollable(SidedDie(6), 2).notation() == "2D6"

    def test_single_die(self):
        """测试单个骰子不加数量"""
        assert Pool(SidedDie(20)).notation() == "D20"

    def test_runs(self):
        """测试只合并连续的相同骰子"""
        pool = Pool(SidedDie(3), SidedDie(3), SidedDie(4), SidedDie(3))
        assert pool.notation() == "2D3+D4+D3"

    def test_custom_and_fudge(self):
        """测试自定义骰与命运骰"""
        assert Pool.from_rollable(CustomDie(-1, -1, -1), 4).notation() == "4D[-1,-1,-1]"
        assert Pool.from_rollable(FudgeDie(), 4).notation() == "4DF"

    def test_modifiers_not_collapsed(self):
        """测试修饰器不会被合并"""
        pool = Pool(Explode(SidedDie(6)), Explode(SidedDie(6)), SidedDie(6))
        assert pool.notation() == "D6!+D6!+D6"
