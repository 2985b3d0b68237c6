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
Implementation of terminal reducers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, Generic, TypeVar

from pytools.api import inheritdoc

from .._reducer import Reduced, Reducer

log = logging.getLogger(__name__)

__all__ = [
    "Appending",
    "Concatenating",
    "Counting",
    "FunctionReducer",
    "Joining",
    "Summing",
]

#
# Type variables
#
# Naming convention used here:
# _ret for covariant type variables used in return positions
# _arg for contravariant type variables used in argument positions

T_Accumulator = TypeVar("T_Accumulator")
T_Element = TypeVar("T_Element")
T_Element_arg = TypeVar("T_Element_arg", contravariant=True)
T_Sequence = TypeVar("T_Sequence", bound=Sequence[Any])


#
# Classes
#


@inheritdoc(match="[see superclass]")
class FunctionReducer(
    Reducer[T_Accumulator, T_Element_arg], Generic[T_Accumulator, T_Element_arg]
):
    """
    A reducer that delegates each step to a function.
    """

    #: The function taking an accumulator and an element, and returning the new
    #: accumulator.
    function: Callable[
        [T_Accumulator, T_Element_arg], T_Accumulator | Reduced[T_Accumulator]
    ]

    def __init__(
        self,
        function: Callable[
            [T_Accumulator, T_Element_arg], T_Accumulator | Reduced[T_Accumulator]
        ],
    ) -> None:
        """
        :param function: the function taking an accumulator and an element, and
            returning the new accumulator
        :raises TypeError: if the function is not callable
        """
        if not callable(function):
            raise TypeError(
                f"Arg function must be callable, not {type(function).__name__}"
            )
        self.function = function

    def step(
        self, accumulator: T_Accumulator, element: T_Element_arg
    ) -> T_Accumulator | Reduced[T_Accumulator]:
        """[see superclass]"""
        return self.function(accumulator, element)


@inheritdoc(match="[see superclass]")
class Appending(Reducer[MutableSequence[T_Element], T_Element], Generic[T_Element]):
    """
    Appends each element to a mutable sequence, in place.

    Returns the accumulator it was given, so no copies are made during a reduction.
    """

    def step(
        self, accumulator: MutableSequence[T_Element], element: T_Element
    ) -> MutableSequence[T_Element]:
        """[see superclass]"""
        accumulator.append(element)
        return accumulator


@inheritdoc(match="[see superclass]")
class Concatenating(Reducer[T_Sequence, Any], Generic[T_Sequence]):
    """
    Returns a new sequence with each element added to the end, leaving the
    accumulator unchanged.

    Works with any sequence type that can be constructed from a tuple and that
    supports ``+``, e.g., tuples and lists.
    """

    def step(self, accumulator: T_Sequence, element: Any) -> T_Sequence:
        """[see superclass]"""
        return accumulator + type(accumulator)((element,))  # type: ignore


@inheritdoc(match="[see superclass]")
class Summing(Reducer[Any, Any]):
    """
    Adds each element to the accumulator using the ``+`` operator.
    """

    def step(self, accumulator: Any, element: Any) -> Any:
        """[see superclass]"""
        return accumulator + element


@inheritdoc(match="[see superclass]")
class Counting(Reducer[int, Any]):
    """
    Counts the elements, ignoring their values.
    """

    def step(self, accumulator: int, element: Any) -> int:
        """[see superclass]"""
        return accumulator + 1


@inheritdoc(match="[see superclass]")
class Joining(Reducer[str, Any]):
    """
    Joins the string representations of the elements, with a separator between
    consecutive elements.

    The reduction must start with an empty string; the first element then replaces
    the empty accumulator. Since an empty accumulator marks the start of the
    reduction, elements should have non-empty string representations: an element
    rendering as an empty string is indistinguishable from no element at all, and
    no separator is inserted after it.
    """

    #: The separator to insert between elements.
    separator: str

    def __init__(self, separator: str = "") -> None:
        """
        :param separator: the separator to insert between elements (default: none)
        """
        if not isinstance(separator, str):
            raise TypeError(
                f"Arg separator must be a string, not {type(separator).__name__}"
            )
        self.separator = separator

    def step(self, accumulator: str, element: Any) -> str:
        """[see superclass]"""
        if accumulator:
            return f"{accumulator}{self.separator}{element}"
        else:
            return str(element)
