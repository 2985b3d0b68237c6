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
Implementation of chained transducers.
"""

from __future__ import annotations

import functools
import logging
import operator
from collections.abc import Iterator
from typing import Any, Generic, TypeVar, final

from pytools.api import inheritdoc
from pytools.expression import Expression

from .._reducer import Reducer
from .._transducer import Transducer

log = logging.getLogger(__name__)


#
# Type variables
#
# Naming convention used here:
# _ret for covariant type variables used in return positions
# _arg for contravariant type variables used in argument positions

T_Accumulator = TypeVar("T_Accumulator")
T_Input_arg = TypeVar("T_Input_arg", contravariant=True)
T_Intermediate_ret = TypeVar("T_Intermediate_ret", covariant=True)
T_Output_ret = TypeVar("T_Output_ret", covariant=True)


#
# Classes
#


@final
@inheritdoc(match="[see superclass]")
class _ChainedTransducer(
    Transducer[T_Input_arg, T_Output_ret],
    Generic[T_Input_arg, T_Intermediate_ret, T_Output_ret],
):
    """
    A sequential composition of two transducers, with the elements emitted by the
    first serving as input to the second.
    """

    #: The first transducer in the chain, nearest to the input.
    first: Transducer[T_Input_arg, T_Intermediate_ret]

    #: The second transducer in the chain, nearest to the reducer.
    second: Transducer[T_Intermediate_ret, T_Output_ret]

    def __init__(
        self,
        first: Transducer[T_Input_arg, T_Intermediate_ret],
        second: Transducer[T_Intermediate_ret, T_Output_ret],
    ) -> None:
        """
        :param first: the first transducer in the chain
        :param second: the second transducer in the chain
        """
        super().__init__()
        self.first = first
        self.second = second

    @property
    def is_chained(self) -> bool:
        """
        ``True``, since this is a composition of chained transducers.
        """
        return True

    @property
    def chained_transducers(self) -> Iterator[Transducer[Any, Any]]:
        """[see superclass]"""
        yield from self.first.chained_transducers
        yield from self.second.chained_transducers

    def apply(
        self, reducer: Reducer[T_Accumulator, T_Output_ret]
    ) -> Reducer[T_Accumulator, T_Input_arg]:
        """[see superclass]"""
        # the second transducer wraps the reducer first, so that the first
        # transducer ends up outermost and sees every input element first
        return self.first.apply(self.second.apply(reducer))

    def to_expression(self, *, compact: bool = False) -> Expression:
        """[see superclass]"""
        # render the flattened chain, so that all bracketings look the same
        return functools.reduce(
            operator.rshift,
            (
                transducer.to_expression(compact=compact)
                for transducer in self.chained_transducers
            ),
        )
