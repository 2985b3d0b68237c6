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
Implementation of the reduction driver.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from ._reducer import Reduced, Reducer
from ._transducer import Transducer

log = logging.getLogger(__name__)

__all__ = [
    "reduce",
    "transduce",
]

#
# Type variables
#

T_Accumulator = TypeVar("T_Accumulator")
T_Input = TypeVar("T_Input")
T_Output = TypeVar("T_Output")


#
# Functions
#


def reduce(
    source: Iterable[T_Input],
    initial: T_Accumulator,
    operation: (
        Reducer[T_Accumulator, T_Input]
        | Callable[[T_Accumulator, T_Input], T_Accumulator]
    ),
) -> T_Accumulator:
    """
    Fold the elements of the source into the initial accumulator, in a single pass.

    Iterates over the source once, from first to last element, and passes the running
    accumulator and each element to the reducer. The accumulator returned by the
    reducer becomes the running accumulator for the next element.

    If the reducer returns a :class:`.Reduced` instance, the reduction stops right
    away, without fetching any further elements from the source, and the wrapped
    accumulator is returned.

    Errors raised by the reducer, or by any of the functions it is composed of, are
    propagated unchanged.

    Example:

    .. code-block:: python

        from foldkit.functional import appending, filtering, mapping

        reducer = (mapping(lambda x: x + 1) >> filtering(lambda x: x % 2 == 0))(
            appending()
        )
        reduce(range(1, 11), [], reducer)  # [2, 4, 6, 8, 10]

    :param source: the elements to reduce
    :param initial: the initial accumulator; returned unchanged if the source is
        empty
    :param operation: the reducer, or a function taking an accumulator and an element
        and returning the new accumulator
    :return: the final accumulator
    :raises TypeError: if the operation is not callable
    """
    step = Reducer.from_function(operation).step

    accumulator = initial
    n_visited = 0
    for element in source:
        n_visited += 1
        result = step(accumulator, element)
        if isinstance(result, Reduced):
            log.debug(f"Reduction terminated early after {n_visited} element(s)")
            return result.value
        accumulator = result

    return accumulator


def transduce(
    transducer: Transducer[T_Input, T_Output],
    operation: (
        Reducer[T_Accumulator, T_Output]
        | Callable[[T_Accumulator, T_Output], T_Accumulator]
    ),
    source: Iterable[T_Input],
    initial: T_Accumulator,
) -> T_Accumulator:
    """
    Apply the transducer to the reducer, and reduce the source with the result.

    Equivalent to ``reduce(source, initial, transducer(operation))``.

    :param transducer: the transducer to apply to each element of the source
    :param operation: the terminal reducer, or a function taking an accumulator and
        an element and returning the new accumulator
    :param source: the elements to reduce
    :param initial: the initial accumulator
    :return: the final accumulator
    """
    if not isinstance(transducer, Transducer):
        raise TypeError(
            f"Expected a transducer but got a {type(transducer).__name__}: "
            f"{transducer!r}"
        )
    return reduce(source, initial, transducer(operation))
