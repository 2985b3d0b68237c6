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
Implementation of the stage base class.
"""

from __future__ import annotations

import logging
from abc import ABCMeta
from collections.abc import Mapping
from typing import Any

from pytools.api import get_init_params
from pytools.expression import (
    Expression,
    HasExpressionRepr,
    expression_from_init_params,
)
from pytools.expression.atomic import Id

from ..util import simplify_repr_attributes

log = logging.getLogger(__name__)

__all__ = [
    "Stage",
]


#
# Classes
#


class Stage(HasExpressionRepr, metaclass=ABCMeta):
    """
    A building block of a reduction: either a reducer, or a transducer that turns one
    reducer into another.

    Stages are immutable once constructed and carry no state between calls, so that
    the same stage can take part in any number of reductions.
    """

    @property
    def name(self) -> str:
        """
        The name of this stage.
        """
        return type(self).__name__

    def get_repr_attributes(self) -> Mapping[str, Any]:
        """
        Get attributes of this stage to be used in representations.

        :return: a dictionary mapping attribute names to their values
        """

        return get_init_params(self, ignore_default=True, ignore_missing=True)

    def to_expression(self, *, compact: bool = False) -> Expression:
        """
        Make an expression representing this stage.

        :param compact: if ``True``, use a compact representation using only the subset
            of stage attributes from :meth:`.get_repr_attributes`; if ``False``,
            generate the full representation using all attributes
        :return: the expression representing this stage
        """
        if compact:
            return Id(self.name)(**simplify_repr_attributes(self.get_repr_attributes()))
        else:
            return expression_from_init_params(self)

    def __str__(self) -> str:
        """[see superclass]"""
        return str(self.to_expression(compact=True))
