# -----------------------------------------------------------------------------
# © 2024 Boston Consulting Group. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# -----------------------------------------------------------------------------

"""
Implementation of public functions of the functional API.
"""

from __future__ import annotations

import functools
import logging
import operator
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any, TypeVar, overload

from .._passthrough import IdentityTransducer
from .._reducer import Reduced, Reducer
from .._transducer import Transducer
from ..simple import (
    Appending,
    Concatenating,
    Counting,
    Filtering,
    FlatMapping,
    Joining,
    Mapping,
    Removing,
    Summing,
    TakingWhile,
)

log = logging.getLogger(__name__)

__all__ = [
    "appending",
    "compose",
    "concatenating",
    "counting",
    "filtering",
    "flat_mapping",
    "identity",
    "joining",
    "mapping",
    "reducer",
    "removing",
    "summing",
    "taking_while",
]

#
# Type variables
#

T_Accumulator = TypeVar("T_Accumulator")
T_Element = TypeVar("T_Element")
T_Input = TypeVar("T_Input")
T_Output = TypeVar("T_Output")
T_Sequence = TypeVar("T_Sequence", bound=Sequence[Any])


#
# Transducers
#


def mapping(transform: Callable[[T_Input], T_Output]) -> Transducer[T_Input, T_Output]:
    """
    Create a transducer that applies a function to each element.

    :param transform: the function to apply to each element
    :return: the transducer
    :raises TypeError: if the transform is not callable
    """
    return Mapping(transform)


def filtering(
    predicate: Callable[[T_Element], bool]
) -> Transducer[T_Element, T_Element]:
    """
    Create a transducer that forwards only the elements satisfying a predicate.

    :param predicate: the predicate an element must satisfy to be forwarded
    :return: the transducer
    :raises TypeError: if the predicate is not callable
    """
    return Filtering(predicate)


def removing(
    predicate: Callable[[T_Element], bool]
) -> Transducer[T_Element, T_Element]:
    """
    Create a transducer that drops the elements satisfying a predicate.

    :param predicate: the predicate identifying the elements to drop
    :return: the transducer
    :raises TypeError: if the predicate is not callable
    """
    return Removing(predicate)


def flat_mapping(
    transform: Callable[[T_Input], Iterable[T_Output]]
) -> Transducer[T_Input, T_Output]:
    """
    Create a transducer that expands each element into the items of the iterable
    returned by a function.

    :param transform: the function mapping each element to an iterable
    :return: the transducer
    :raises TypeError: if the transform is not callable
    """
    return FlatMapping(transform)


def taking_while(
    predicate: Callable[[T_Element], bool]
) -> Transducer[T_Element, T_Element]:
    """
    Create a transducer that ends the reduction at the first element not satisfying
    a predicate.

    :param predicate: the predicate an element must satisfy for the reduction to
        continue
    :return: the transducer
    :raises TypeError: if the predicate is not callable
    """
    return TakingWhile(predicate)


def identity() -> Transducer[Any, Any]:
    """
    Get the identity transducer, which forwards every element unchanged.

    :return: the identity transducer
    """
    return IdentityTransducer()


#
# Composition
#


@overload
def compose() -> Transducer[Any, Any]:
    """[see below]"""


@overload
def compose(
    _transducer: Transducer[T_Input, T_Output], /
) -> Transducer[T_Input, T_Output]:
    """[see below]"""


@overload
def compose(
    _first: Transducer[T_Input, Any],
    /,
    *transducers: Transducer[Any, Any],
) -> Transducer[T_Input, Any]:
    """[see below]"""


def compose(*transducers: Transducer[Any, Any]) -> Transducer[Any, Any]:
    """
    Chain the given transducers, in the given order.

    The first transducer is nearest to the input: each element is processed by the
    first transducer, and only the elements it forwards reach the second, and so on.

    ``compose(t1, t2, t3)`` is equivalent to ``t1 >> t2 >> t3``. With no arguments,
    returns the identity transducer; with one argument, returns that transducer.

    Example:

    .. code-block:: python

        increment_evens = compose(
            mapping(lambda x: x + 1),
            filtering(lambda x: x % 2 == 0),
        )
        transduce(increment_evens, summing(), range(1, 11), 0)  # 30

    :param transducers: the transducers to chain
    :return: the chained transducer
    :raises TypeError: if any of the arguments is not a transducer
    """
    for transducer in transducers:
        if not isinstance(transducer, Transducer):
            raise TypeError(
                "Expected only transducers as arguments but got a "
                f"{type(transducer).__name__}: {transducer!r}"
            )
    return functools.reduce(operator.rshift, transducers, IdentityTransducer())


#
# Reducers
#


def reducer(
    function: Callable[
        [T_Accumulator, T_Element], T_Accumulator | Reduced[T_Accumulator]
    ]
) -> Reducer[T_Accumulator, T_Element]:
    """
    Create a reducer from a function taking an accumulator and an element, and
    returning the new accumulator.

    :param function: the function to delegate each reduction step to
    :return: the reducer
    :raises TypeError: if the function is not callable
    """
    return Reducer.from_function(function)


def appending() -> Reducer[MutableSequence[T_Element], T_Element]:
    """
    Create a reducer that appends each element to a list, in place.

    :return: the reducer
    """
    return Appending()


def concatenating() -> Reducer[T_Sequence, Any]:
    """
    Create a reducer that returns a new sequence with the element added at the end,
    at each step.

    :return: the reducer
    """
    return Concatenating()


def summing() -> Reducer[Any, Any]:
    """
    Create a reducer that adds each element to the accumulator.

    :return: the reducer
    """
    return Summing()


def counting() -> Reducer[int, Any]:
    """
    Create a reducer that counts the elements.

    :return: the reducer
    """
    return Counting()


def joining(separator: str = "") -> Reducer[str, Any]:
    """
    Create a reducer that joins the elements into a string; the reduction must start
    from an empty string, and elements should have non-empty string representations.

    :param separator: the separator to insert between elements (default: none)
    :return: the reducer
    """
    return Joining(separator)
