"""
Unit tests for reducers and the early termination signal
"""

from __future__ import annotations

import logging

import pytest

from foldkit import Reduced, Reducer, reduce
from foldkit.functional import (
    appending,
    concatenating,
    counting,
    joining,
    reducer,
    summing,
)
from foldkit.simple import Appending, FunctionReducer, Joining

log = logging.getLogger(__name__)


def test_appending() -> None:
    accumulator: list[int] = []
    result = appending()(accumulator, 1)

    # appending works in place
    assert result is accumulator
    assert accumulator == [1]
    assert reduce(range(3), accumulator, Appending()) is accumulator
    assert accumulator == [1, 0, 1, 2]


def test_concatenating() -> None:
    initial = (1, 2)
    result = concatenating()(initial, 3)

    # concatenating returns new sequences
    assert result == (1, 2, 3)
    assert initial == (1, 2)

    initial_list = [1]
    assert reduce([2, 3], initial_list, concatenating()) == [1, 2, 3]
    assert initial_list == [1]


def test_scalar_reducers() -> None:
    assert reduce(range(1, 11), 0, summing()) == 55
    assert reduce(["a", "b"], "", summing()) == "ab"
    assert reduce("hello", 0, counting()) == 5
    assert reduce([1, 2, 3], "", joining(", ")) == "1, 2, 3"
    assert reduce([1, 2, 3], "", Joining()) == "123"
    assert reduce([], "", joining(", ")) == ""


def test_function_reducer() -> None:
    def add(acc: int, x: int) -> int:
        return acc + x

    add_reducer = reducer(add)
    assert isinstance(add_reducer, FunctionReducer)
    assert add_reducer.function is add
    assert add_reducer(1, 2) == 3

    # reducers are not wrapped twice
    assert reducer(add_reducer) is add_reducer
    assert Reducer.from_function(add_reducer) is add_reducer

    assert str(add_reducer) == "FunctionReducer(function=add)"

    with pytest.raises(TypeError, match=r"^Arg function must be callable, not int$"):
        FunctionReducer(1)  # type: ignore[arg-type]

    with pytest.raises(TypeError, match=r"^Expected a reducer or a callable"):
        reducer("add")  # type: ignore[arg-type]


def test_reduced() -> None:
    assert Reduced(3).value == 3
    assert Reduced(3) == Reduced(3)
    assert Reduced(3) != Reduced(4)
    assert Reduced(3) != 3
    assert hash(Reduced("x")) == hash(Reduced("x"))
    assert repr(Reduced([1])) == "Reduced([1])"

    # a reducer returning a reduced value ends the reduction
    def first_negative(acc: int | None, x: int) -> int | None | Reduced[int]:
        return Reduced(x) if x < 0 else acc

    assert reduce([3, 1, -4, 1, -5], None, first_negative) == -4
    assert reduce([3, 1], None, first_negative) is None


def test_joining_empty_elements() -> None:
    # an empty accumulator marks the start of the reduction, so an element
    # rendering as an empty string does not get a separator after it
    assert reduce(["", "a"], "", joining(",")) == "a"
    assert reduce(["a", "", "b"], "", joining(",")) == "a,,b"
    assert joining(",")("", "") == ""
