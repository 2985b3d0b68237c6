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
Implementation of the identity transducer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, TypeVar, final

from pytools.api import inheritdoc
from pytools.meta import SingletonABCMeta

from ._reducer import Reducer
from ._transducer import Transducer

log = logging.getLogger(__name__)

__all__ = [
    "IdentityTransducer",
]

#
# Type variables
#

T_Accumulator = TypeVar("T_Accumulator")
T_Product_ret = TypeVar("T_Product_ret", covariant=True)


#
# Classes
#


@final
@inheritdoc(match="[see superclass]")
class IdentityTransducer(Transducer[Any, Any], metaclass=SingletonABCMeta):
    """
    A transducer that forwards every element unchanged.

    Applying the identity transducer to a reducer yields the reducer itself.
    Chaining the identity transducer with another transducer, on either side,
    yields the other transducer.
    """

    @property
    def chained_transducers(self) -> Iterator[Transducer[Any, Any]]:
        """
        Returns an empty iterator since the identity transducer is transparent in
        chains.
        """
        yield from ()

    def apply(
        self, reducer: Reducer[T_Accumulator, Any]
    ) -> Reducer[T_Accumulator, Any]:
        """[see superclass]"""
        return reducer

    def __rshift__(
        self, other: Transducer[Any, T_Product_ret]
    ) -> Transducer[Any, T_Product_ret]:
        if isinstance(other, Transducer):
            return other
        else:
            return NotImplemented
