import pytest

from smartcalc.stack import EmptyStackError, Stack


def test_push_pop_is_lifo():
    s = Stack()
    for i in (1, 2, 3):
        s.push(i)
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]
    assert s.is_empty()


def test_peek_does_not_remove():
    s = Stack()
    s.push('+')
    assert s.peek() == '+'
    assert len(s) == 1


def test_empty_stack_signals_instead_of_zero():
    s = Stack()
    with pytest.raises(EmptyStackError):
        s.pop()
    with pytest.raises(EmptyStackError):
        s.peek()

