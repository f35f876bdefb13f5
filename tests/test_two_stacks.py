import pytest

from algokit.two_stacks import TwoStacks


def test_source_driver():
    ts = TwoStacks(5)
    ts.push1(5)
    ts.push2(10)
    ts.push2(15)
    ts.push1(11)
    ts.push2(7)
    assert ts.pop1() == 11
    ts.push2(40)
    assert ts.pop2() == 40


def test_each_stack_is_lifo():
    first = [1, 2, 3]
    second = [4, 5]
    ts = TwoStacks(len(first) + len(second))
    for value in first:
        ts.push1(value)
    for value in second:
        ts.push2(value)
    assert [ts.pop1() for _ in first] == first[::-1]
    assert [ts.pop2() for _ in second] == second[::-1]


def test_overflow_when_shared_space_full():
    ts = TwoStacks(2)
    ts.push1(1)
    ts.push2(2)
    with pytest.raises(OverflowError):
        ts.push1(3)
    with pytest.raises(OverflowError):
        ts.push2(3)


def test_one_stack_can_use_all_space():
    ts = TwoStacks(3)
    for value in (1, 2, 3):
        ts.push1(value)
    with pytest.raises(OverflowError):
        ts.push2(4)
    with pytest.raises(IndexError):
        ts.pop2()


@pytest.mark.parametrize("method", ["pop1", "pop2"])
def test_underflow(method):
    with pytest.raises(IndexError):
        getattr(TwoStacks(4), method)()


def test_zero_capacity_overflows():
    with pytest.raises(OverflowError):
        TwoStacks(0).push1(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        TwoStacks(-1)