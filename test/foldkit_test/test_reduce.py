"""
Unit tests for the reduction driver
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Iterator
from typing import Any

import pytest

from foldkit import Reduced, Reducer, reduce, transduce
from foldkit.functional import (
    appending,
    compose,
    concatenating,
    filtering,
    mapping,
    reducer,
    summing,
    taking_while,
)

log = logging.getLogger(__name__)


def incr(x: int) -> int:
    return x + 1


def is_even(x: int) -> bool:
    return x % 2 == 0


class CountingSource(Iterable[int]):
    """
    An iterable that counts how many elements have been taken from it.
    """

    def __init__(self, elements: Iterable[int]) -> None:
        self.elements = list(elements)
        self.n_iterations = 0
        self.n_visited = 0

    def __iter__(self) -> Iterator[int]:
        self.n_iterations += 1
        for element in self.elements:
            self.n_visited += 1
            yield element


class CountingReducer(Reducer[list[int], int]):
    """
    Appends to a list, and counts its invocations.
    """

    def __init__(self) -> None:
        self.n_calls = 0

    def step(self, accumulator: list[int], element: int) -> list[int]:
        self.n_calls += 1
        accumulator.append(element)
        return accumulator


def test_concrete_scenarios() -> None:
    increment_evens = mapping(incr) >> filtering(is_even)

    assert reduce(range(1, 11), [], increment_evens(appending())) == [2, 4, 6, 8, 10]
    assert reduce(range(1, 11), 0, increment_evens(summing())) == 30

    assert transduce(increment_evens, appending(), range(1, 11), []) == [
        2,
        4,
        6,
        8,
        10,
    ]
    assert transduce(increment_evens, summing(), range(1, 11), 0) == 30


@pytest.mark.parametrize(
    "source", [[], [0], [1, 2, 3], list(range(-7, 25)), [5, 5, 5, 6]]
)
def test_equivalence_with_map_and_filter(source: list[int]) -> None:
    def double(x: int) -> int:
        return x * 2

    def is_multiple_of_three(x: int) -> bool:
        return x % 3 == 0

    chain = (
        mapping(incr)
        >> filtering(is_even)
        >> mapping(double)
        >> filtering(is_multiple_of_three)
    )

    expected = list(
        filter(is_multiple_of_three, map(double, filter(is_even, map(incr, source))))
    )
    assert reduce(source, [], chain(appending())) == expected
    assert reduce(source, (), chain(concatenating())) == tuple(expected)
    assert reduce(source, 0, chain(summing())) == sum(expected)


def test_single_pass() -> None:
    source = CountingSource(range(1, 11))
    terminal = CountingReducer()

    chain = compose(
        mapping(incr),
        mapping(incr),
        filtering(is_even),
        mapping(incr),
        filtering(lambda x: x > 4),
    )
    result = reduce(source, [], chain(terminal))

    assert result == [5, 7, 9, 11, 13]
    assert source.n_iterations == 1
    assert source.n_visited == 10
    assert terminal.n_calls == len(result)


def test_empty_input() -> None:
    initial: list[int] = [1, 2]
    chain = mapping(incr) >> filtering(is_even)

    assert reduce([], initial, chain(appending())) is initial
    assert initial == [1, 2]

    sentinel = object()
    assert reduce(iter(()), sentinel, reducer(lambda acc, x: None)) is sentinel


def test_plain_function_as_operation() -> None:
    assert reduce([1, 2, 3], [], lambda acc, x: acc + [x]) == [1, 2, 3]
    assert transduce(mapping(incr), lambda acc, x: acc * x, [1, 2, 3], 1) == 24

    with pytest.raises(
        TypeError, match=r"^Expected a reducer or a callable but got a int: 3$"
    ):
        reduce([1, 2, 3], 0, 3)  # type: ignore[arg-type]

    with pytest.raises(TypeError, match=r"^Expected a transducer but got a function"):
        transduce(incr, appending(), [1], [])  # type: ignore[arg-type]


def test_reducers_are_reusable() -> None:
    composed = (mapping(incr) >> filtering(is_even))(appending())

    assert reduce(range(5), [], composed) == [2, 4]
    assert reduce(range(5), [], composed) == [2, 4]

    # reducers are plain callables, too
    assert functools.reduce(composed, range(5), []) == [2, 4]


def test_early_termination(caplog: pytest.LogCaptureFixture) -> None:
    source = CountingSource(range(100))

    with caplog.at_level(logging.DEBUG, logger="foldkit._reduce"):
        result = reduce(source, [], taking_while(lambda x: x < 3)(appending()))

    assert result == [0, 1, 2]
    # the element failing the predicate is the last one taken from the source
    assert source.n_visited == 4
    assert "Reduction terminated early after 4 element(s)" in caplog.text

    # a terminal reducer can end the reduction, too
    def sum_up_to_ten(acc: int, x: int) -> int | Reduced[int]:
        total = acc + x
        return Reduced(total) if total >= 10 else total

    source = CountingSource(range(1, 100))
    assert reduce(source, 0, mapping(incr)(sum_up_to_ten)) == 14
    assert source.n_visited == 4


def test_errors_propagate_unchanged() -> None:
    class TransformError(Exception):
        pass

    def failing_transform(x: int) -> int:
        if x == 3:
            raise TransformError(f"cannot transform {x}")
        return x

    def failing_predicate(x: int) -> bool:
        raise KeyError(x)

    source = CountingSource(range(10))
    with pytest.raises(TransformError, match="^cannot transform 3$"):
        reduce(source, [], (mapping(failing_transform) >> mapping(incr))(appending()))
    assert source.n_visited == 4

    with pytest.raises(KeyError):
        transduce(filtering(failing_predicate), appending(), [1], [])

    def failing_reducer(acc: Any, x: int) -> Any:
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        transduce(mapping(incr), failing_reducer, [1], [])
