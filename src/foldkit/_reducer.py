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
Implementation of reducers, and of the early termination signal.
"""

from __future__ import annotations

import logging
from abc import ABCMeta, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar, final

from .core import Stage

log = logging.getLogger(__name__)

__all__ = [
    "Reduced",
    "Reducer",
]

#
# Type variables
#
# Naming convention used here:
# _ret for covariant type variables used in return positions
# _arg for contravariant type variables used in argument positions
#

T_Accumulator = TypeVar("T_Accumulator")
T_Element_arg = TypeVar("T_Element_arg", contravariant=True)
T_Value_ret = TypeVar("T_Value_ret", covariant=True)


#
# Classes
#


@final
class Reduced(Generic[T_Value_ret]):
    """
    Wraps an accumulator to signal that a reduction is complete.

    A reducer returns a :class:`.Reduced` instance instead of a plain accumulator when
    no further elements can change the result. Transducers pass the signal through
    unchanged; the reduction driver unwraps it and stops visiting the source.
    """

    __slots__ = ("value",)

    #: The final accumulator.
    value: T_Value_ret

    def __init__(self, value: T_Value_ret) -> None:
        """
        :param value: the final accumulator
        """
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Reduced) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Reduced, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Reducer(Stage, Generic[T_Accumulator, T_Element_arg], metaclass=ABCMeta):
    """
    A reducing operation: takes an accumulator and an element, and returns the
    accumulator that reflects the element's effect.

    Reducers are stateless. If the accumulator is immutable, a new accumulator is
    returned; if it is mutable, the reducer may update it in place and return the
    same object.

    A reducer may return a :class:`.Reduced` instance to end the reduction early.

    Reducers are callable, so they can also be passed to functions that expect a
    plain two-argument function, e.g., :func:`functools.reduce`.
    """

    @abstractmethod
    def step(
        self, accumulator: T_Accumulator, element: T_Element_arg
    ) -> T_Accumulator | Reduced[T_Accumulator]:
        """
        Fold one element into the accumulator.

        :param accumulator: the current accumulator
        :param element: the element to fold into the accumulator
        :return: the new accumulator, optionally wrapped in a :class:`.Reduced`
            instance to end the reduction
        """

    @staticmethod
    def from_function(
        function: (
            Reducer[T_Accumulator, T_Element_arg]
            | Callable[[T_Accumulator, T_Element_arg], T_Accumulator]
        ),
    ) -> Reducer[T_Accumulator, T_Element_arg]:
        """
        Get a reducer for the given two-argument function.

        Reducers are returned as they are.

        :param function: a reducer, or a function taking an accumulator and an
            element and returning the new accumulator
        :return: the reducer
        :raises TypeError: if the argument is not callable
        """
        if isinstance(function, Reducer):
            return function
        elif not callable(function):
            raise TypeError(
                f"Expected a reducer or a callable but got a "
                f"{type(function).__name__}: {function!r}"
            )

        from .simple import FunctionReducer

        return FunctionReducer(function)

    @final
    def __call__(
        self, accumulator: T_Accumulator, element: T_Element_arg
    ) -> T_Accumulator | Reduced[T_Accumulator]:
        return self.step(accumulator, element)

