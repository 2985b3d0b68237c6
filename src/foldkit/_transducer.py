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
Implementation of the transducer base class.
"""

from __future__ import annotations

import logging
from abc import ABCMeta, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar, final

from ._reducer import Reducer
from .core import Stage

log = logging.getLogger(__name__)

__all__ = [
    "Transducer",
]

#
# Type variables
#
# Naming convention used here:
# _ret for covariant type variables used in return positions
# _arg for contravariant type variables used in argument positions
#

T_Accumulator = TypeVar("T_Accumulator")
T_Input_arg = TypeVar("T_Input_arg", contravariant=True)
T_Output_ret = TypeVar("T_Output_ret", covariant=True)
T_Product_ret = TypeVar("T_Product_ret", covariant=True)


#
# Classes
#


class Transducer(Stage, Generic[T_Input_arg, T_Output_ret], metaclass=ABCMeta):
    """
    Turns a reducer of output elements into a reducer of input elements.

    A transducer describes what happens to each element on its way to a reducer,
    e.g., transforming it, dropping it, or expanding it into several elements. It does
    not depend on what the reducer accumulates: the same transducer can feed a list,
    a running sum, or any other accumulator.

    Transducers are chained with the ``>>`` operator. ``first >> second`` is a
    transducer that passes each input element through ``first``, and forwards the
    elements emitted by ``first`` to ``second``. Chaining is associative.
    """

    @property
    def is_chained(self) -> bool:
        """
        ``True`` if this transducer is a composition of transducers chained together
        sequentially, ``False`` otherwise.
        """
        return False

    @property
    def chained_transducers(self) -> Iterator[Transducer[Any, Any]]:
        """
        An iterator yielding the atomic transducers that make up this transducer,
        starting with the transducer nearest to the input.

        For an atomic transducer, yields the transducer itself.
        """
        yield self

    @abstractmethod
    def apply(
        self, reducer: Reducer[T_Accumulator, T_Output_ret]
    ) -> Reducer[T_Accumulator, T_Input_arg]:
        """
        Create a reducer of input elements that forwards to the given reducer of
        output elements.

        :param reducer: the downstream reducer
        :return: the new reducer
        """

    @final
    def process(self, input: Iterable[T_Input_arg]) -> list[T_Output_ret]:
        """
        Run the given elements through this transducer and collect the results.

        :param input: the elements to process
        :return: the elements emitted by this transducer, in order
        """
        from ._reduce import reduce
        from .simple import Appending

        return reduce(input, [], self.apply(Appending()))

    def __call__(
        self,
        reducer: (
            Reducer[T_Accumulator, T_Output_ret]
            | Callable[[T_Accumulator, T_Output_ret], T_Accumulator]
        ),
    ) -> Reducer[T_Accumulator, T_Input_arg]:
        """
        Apply this transducer to the given reducer, wrapping plain functions as
        reducers first.

        :param reducer: the downstream reducer, or a two-argument function
        :return: the new reducer
        """
        return self.apply(Reducer.from_function(reducer))

    def __rshift__(
        self, other: Transducer[T_Output_ret, T_Product_ret]
    ) -> Transducer[T_Input_arg, T_Product_ret]:
        from ._passthrough import IdentityTransducer

        if isinstance(other, IdentityTransducer):
            return self  # type: ignore[return-value]
        elif isinstance(other, Transducer):
            # We import locally to avoid circular imports
            from .core._chained_ import _ChainedTransducer

            return _ChainedTransducer(self, other)
        else:
            return NotImplemented
