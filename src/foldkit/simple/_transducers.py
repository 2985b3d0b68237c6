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
Implementation of atomic transducers, and of the reducers they create.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from pytools.api import inheritdoc

from .._reducer import Reduced, Reducer
from .._transducer import Transducer

log = logging.getLogger(__name__)

__all__ = [
    "Filtering",
    "FlatMapping",
    "Mapping",
    "Removing",
    "TakingWhile",
]

#
# Type variables
#
# Naming convention used here:
# _ret for covariant type variables used in return positions
# _arg for contravariant type variables used in argument positions

T_Accumulator = TypeVar("T_Accumulator")
T_Element = TypeVar("T_Element")
T_Input = TypeVar("T_Input")
T_Output = TypeVar("T_Output")


#
# Transducers
#


@inheritdoc(match="[see superclass]")
class Mapping(Transducer[T_Input, T_Output], Generic[T_Input, T_Output]):
    """
    Applies a function to each element, and forwards the result.

    Every input element results in exactly one call of the downstream reducer.
    """

    #: The function to apply to each element.
    transform: Callable[[T_Input], T_Output]

    def __init__(self, transform: Callable[[T_Input], T_Output]) -> None:
        """
        :param transform: the function to apply to each element
        :raises TypeError: if the transform is not callable
        """
        _validate_callable(transform, arg_name="transform")
        self.transform = transform

    def apply(
        self, reducer: Reducer[T_Accumulator, T_Output]
    ) -> Reducer[T_Accumulator, T_Input]:
        """[see superclass]"""
        return _MappingReducer(self.transform, reducer)


@inheritdoc(match="[see superclass]")
class Filtering(Transducer[T_Element, T_Element], Generic[T_Element]):
    """
    Forwards only the elements for which a predicate holds.

    For rejected elements, the accumulator is returned as it is: the very same object,
    neither copied nor modified.
    """

    #: The predicate an element must satisfy to be forwarded.
    predicate: Callable[[T_Element], bool]

    def __init__(self, predicate: Callable[[T_Element], bool]) -> None:
        """
        :param predicate: the predicate an element must satisfy to be forwarded
        :raises TypeError: if the predicate is not callable
        """
        _validate_callable(predicate, arg_name="predicate")
        self.predicate = predicate

    def apply(
        self, reducer: Reducer[T_Accumulator, T_Element]
    ) -> Reducer[T_Accumulator, T_Element]:
        """[see superclass]"""
        return _FilteringReducer(self.predicate, reducer)


@inheritdoc(match="[see superclass]")
class Removing(Transducer[T_Element, T_Element], Generic[T_Element]):
    """
    Drops the elements for which a predicate holds, and forwards all others.

    The complement of :class:`.Filtering`.
    """

    #: The predicate identifying the elements to drop.
    predicate: Callable[[T_Element], bool]

    def __init__(self, predicate: Callable[[T_Element], bool]) -> None:
        """
        :param predicate: the predicate identifying the elements to drop
        :raises TypeError: if the predicate is not callable
        """
        _validate_callable(predicate, arg_name="predicate")
        self.predicate = predicate

    def apply(
        self, reducer: Reducer[T_Accumulator, T_Element]
    ) -> Reducer[T_Accumulator, T_Element]:
        """[see superclass]"""
        return _RemovingReducer(self.predicate, reducer)


@inheritdoc(match="[see superclass]")
class FlatMapping(Transducer[T_Input, T_Output], Generic[T_Input, T_Output]):
    """
    Applies a function returning an iterable to each element, and forwards each item
    of that iterable in turn.

    An element for which the function returns an empty iterable is dropped.
    """

    #: The function mapping each element to an iterable of output elements.
    transform: Callable[[T_Input], Iterable[T_Output]]

    def __init__(self, transform: Callable[[T_Input], Iterable[T_Output]]) -> None:
        """
        :param transform: the function mapping each element to an iterable of output
            elements
        :raises TypeError: if the transform is not callable
        """
        _validate_callable(transform, arg_name="transform")
        self.transform = transform

    def apply(
        self, reducer: Reducer[T_Accumulator, T_Output]
    ) -> Reducer[T_Accumulator, T_Input]:
        """[see superclass]"""
        return _FlatMappingReducer(self.transform, reducer)


@inheritdoc(match="[see superclass]")
class TakingWhile(Transducer[T_Element, T_Element], Generic[T_Element]):
    """
    Forwards elements as long as a predicate holds, and ends the reduction at the first
    element for which it does not hold.

    That element is not forwarded, and no further elements are taken from the source.
    """

    #: The predicate an element must satisfy for the reduction to continue.
    predicate: Callable[[T_Element], bool]

    def __init__(self, predicate: Callable[[T_Element], bool]) -> None:
        """
        :param predicate: the predicate an element must satisfy for the reduction to
            continue
        :raises TypeError: if the predicate is not callable
        """
        _validate_callable(predicate, arg_name="predicate")
        self.predicate = predicate

    def apply(
        self, reducer: Reducer[T_Accumulator, T_Element]
    ) -> Reducer[T_Accumulator, T_Element]:
        """[see superclass]"""
        return _TakingWhileReducer(self.predicate, reducer)


#
# Reducers created by the transducers
#


class _TransducedReducer(
    Reducer[T_Accumulator, T_Input], Generic[T_Accumulator, T_Input]
):
    """
    A reducer that forwards to a downstream reducer.
    """

    #: The reducer to forward elements to.
    downstream: Reducer[T_Accumulator, Any]

    def __init__(self, downstream: Reducer[T_Accumulator, Any]) -> None:
        """
        :param downstream: the reducer to forward elements to
        """
        self.downstream = downstream


@inheritdoc(match="[see superclass]")
class _MappingReducer(
    _TransducedReducer[T_Accumulator, T_Input],
    Generic[T_Accumulator, T_Input, T_Output],
):
    """
    The reducer created by a :class:`.Mapping` transducer.
    """

    #: The function to apply to each element.
    transform: Callable[[T_Input], T_Output]

    def __init__(
        self,
        transform: Callable[[T_Input], T_Output],
        downstream: Reducer[T_Accumulator, T_Output],
    ) -> None:
        """
        :param transform: the transform to apply to each element
        :param downstream: the reducer to forward elements to
        """
        super().__init__(downstream)
        self.transform = transform

    def step(
        self, accumulator: T_Accumulator, element: T_Input
    ) -> T_Accumulator | Reduced[T_Accumulator]:
        """[see superclass]"""
        return self.downstream.step(accumulator, self.transform(element))


@inheritdoc(match="[see superclass]")
class _FilteringReducer(
    _TransducedReducer[T_Accumulator, T_Element], Generic[T_Accumulator, T_Element]
):
    """
    The reducer created by a :class:`.Filtering` transducer.
    """

    #: The predicate an element must satisfy to be forwarded.
    predicate: Callable[[T_Element], bool]

    def __init__(
        self,
        predicate: Callable[[T_Element], bool],
        downstream: Reducer[T_Accumulator, T_Element],
    ) -> None:
        """
        :param predicate: the predicate to apply to each element
        :param downstream: the reducer to forward elements to
        """
        super().__init__(downstream)
        self.predicate = predicate

    def step(
        self, accumulator: T_Accumulator, element: T_Element
    ) -> T_Accumulator | Reduced[T_Accumulator]:
        """[see superclass]"""
        if self.predicate(element):
            return self.downstream.step(accumulator, element)
        else:
            return accumulator


@inheritdoc(match="[see superclass]")
class _RemovingReducer(
    _TransducedReducer[T_Accumulator, T_Element], Generic[T_Accumulator, T_Element]
):
    """
    The reducer created by a :class:`.Removing` transducer.
    """

    #: The predicate identifying the elements to drop.
    predicate: Callable[[T_Element], bool]

    def __init__(
        self,
        predicate: Callable[[T_Element], bool],
        downstream: Reducer[T_Accumulator, T_Element],
    ) -> None:
        """
        :param predicate: the predicate to apply to each element
        :param downstream: the reducer to forward elements to
        """
        super().__init__(downstream)
        self.predicate = predicate

    def step(
        self, accumulator: T_Accumulator, element: T_Element
    ) -> T_Accumulator | Reduced[T_Accumulator]:
        """[see superclass]"""
        if self.predicate(element):
            return accumulator
        else:
            return self.downstream.step(accumulator, element)


@inheritdoc(match="[see superclass]")
class _FlatMappingReducer(
    _TransducedReducer[T_Accumulator, T_Input],
    Generic[T_Accumulator, T_Input, T_Output],
):
    """
    The reducer created by a :class:`.FlatMapping` transducer.
    """

    #: The function mapping each element to an iterable of output elements.
    transform: Callable[[T_Input], Iterable[T_Output]]

    def __init__(
        self,
        transform: Callable[[T_Input], Iterable[T_Output]],
        downstream: Reducer[T_Accumulator, T_Output],
    ) -> None:
        """
        :param transform: the transform to apply to each element
        :param downstream: the reducer to forward elements to
        """
        super().__init__(downstream)
        self.transform = transform

    def step(
        self, accumulator: T_Accumulator, element: T_Input
    ) -> T_Accumulator | Reduced[T_Accumulator]:
        """[see superclass]"""
        downstream_step = self.downstream.step
        for item in self.transform(element):
            result = downstream_step(accumulator, item)
            if isinstance(result, Reduced):
                # stop expanding; the driver ends the reduction
                return result
            accumulator = result
        return accumulator


@inheritdoc(match="[see superclass]")
class _TakingWhileReducer(
    _TransducedReducer[T_Accumulator, T_Element], Generic[T_Accumulator, T_Element]
):
    """
    The reducer created by a :class:`.TakingWhile` transducer.
    """

    #: The predicate an element must satisfy for the reduction to continue.
    predicate: Callable[[T_Element], bool]

    def __init__(
        self,
        predicate: Callable[[T_Element], bool],
        downstream: Reducer[T_Accumulator, T_Element],
    ) -> None:
        """
        :param predicate: the predicate to apply to each element
        :param downstream: the reducer to forward elements to
        """
        super().__init__(downstream)
        self.predicate = predicate

    def step(
        self, accumulator: T_Accumulator, element: T_Element
    ) -> T_Accumulator | Reduced[T_Accumulator]:
        """[see superclass]"""
        if self.predicate(element):
            return self.downstream.step(accumulator, element)
        else:
            return Reduced(accumulator)


#
# Auxiliary functions
#


def _validate_callable(function: Any, *, arg_name: str) -> None:
    """
    Validate that the given argument is callable.

    :param function: the argument to validate
    :param arg_name: the name of the argument, for the error message
    :raises TypeError: if the argument is not callable
    """
    if not callable(function):
        raise TypeError(
            f"Arg {arg_name} must be callable, not {type(function).__name__}: "
            f"{function!r}"
        )
