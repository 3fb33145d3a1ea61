"""追踪器与求值结果单元测试"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from loguru import logger

from diceroller.dice import (
    Arithmetic, LogTracer, MemoryTracer, NullTracer, Outcome, Pool, SidedDie,
    SequenceRandomizer, Tracer,
)


class BrokenTracer(Tracer):
    """总是抛出异常的追踪器"""

    def append(self, outcome):
        raise RuntimeError("sink unavailable")


@pytest.fixture
def log_messages():
    """启用 diceroller 日志并收集输出"""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    logger.enable("diceroller")
    yield messages
    logger.disable("diceroller")
    logger.remove(handler_id)


class TestOutcome:
    """测试求值结果"""

    def test_str(self):
        """测试字符串表示"""
        die = SidedDie(6)
        assert str(Outcome(value=5, operation="3 + 2", source=die, method="roll")) == "3 + 2 = 5"
        assert str(Outcome(value=4, operation="4", source=die, method="roll")) == "4"

    def test_int(self):
        """测试转换为整数"""
        outcome = SidedDie(6, randomizer=SequenceRandomizer([5])).roll()
        assert int(outcome) == 5

    def test_as_dict(self):
        """测试追踪记录"""
        outcome = SidedDie(6, randomizer=SequenceRandomizer([2])).roll()
        assert outcome.as_dict() == {
            "source": "D6",
            "value": 2,
            "operation": "2",
            "method": "roll",
        }

    def test_immutable(self):
        """测试结果不可修改"""
        outcome = SidedDie(6).roll()
        with pytest.raises(AttributeError):
            outcome.value = 100


class TestLastTrace:
    """测试最近一次推导过程"""

    def test_reset_per_call(self):
        """测试每次调用都会覆盖最近结果"""
        die = SidedDie(6, randomizer=SequenceRandomizer([4]))
        modifier = Arithmetic(die, "*", 2)
        assert modifier.last_trace == ""
        assert modifier.last_outcome is None

        modifier.roll()
        assert modifier.last_trace == "4 * 2"
        modifier.minimum()
        assert modifier.last_trace == "1 * 2"
        assert modifier.last_outcome.method == "minimum"
        modifier.maximum()
        assert modifier.last_trace == "6 * 2"
        assert modifier.last_outcome.value == 12


class TestMemoryTracer:
    """测试内存追踪器"""

    def test_records(self):
        """测试记录与过滤"""
        tracer = MemoryTracer()
        pool = Pool.from_rollable(SidedDie(6), 2)
        pool.tracer = tracer
        pool.roll()
        pool.minimum()
        pool.maximum()

        assert len(tracer) == 3
        assert [r.method for r in tracer.records("roll")] == ["roll"]
        assert tracer.records("maximum")[0].value == 12

        tracer.clear()
        assert len(tracer) == 0

    def test_default_tracer(self):
        """测试默认使用空追踪器"""
        die = SidedDie(6)
        assert isinstance(die.tracer, NullTracer)
        die.tracer = MemoryTracer()
        die.tracer = None
        assert isinstance(die.tracer, NullTracer)

    def test_does_not_change_values(self):
        """测试追踪器不改变结果"""
        values = [1, 6, 3, 2]
        plain = Pool.from_rollable(SidedDie(6, randomizer=SequenceRandomizer(values)), 4)
        traced = Pool.from_rollable(SidedDie(6, randomizer=SequenceRandomizer(values)), 4)
        traced.tracer = MemoryTracer()
        assert plain.roll().value == traced.roll().value


class TestTracerFailures:
    """测试追踪器异常"""

    def test_broken_tracer_does_not_abort(self, log_messages):
        """测试追踪器异常被记录而不是抛出"""
        die = SidedDie(6, randomizer=SequenceRandomizer([5]))
        die.tracer = BrokenTracer()
        assert die.roll().value == 5
        assert die.minimum() == 1
        assert any("TRACE_ERR" in m for m in log_messages)


class TestLogTracer:
    """测试日志追踪器"""

    def test_writes_log(self, log_messages):
        """测试通过 loguru 输出记录"""
        die = SidedDie(6, randomizer=SequenceRandomizer([3]))
        die.tracer = LogTracer(level="INFO")
        die.roll()
        assert any(
            "ROLL | method=roll | node=D6 | operation=3 | value=3" in m
            for m in log_messages
        )

    def test_default_level(self):
        """测试默认级别来自配置"""
        assert LogTracer().level == "DEBUG"
