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
This module composes sequence-processing operations such as mapping and filtering
into a single pass over a source, without building intermediate collections between
the operations.

Here's a brief overview of the main classes and functions and their roles:

- :class:`.Reducer`
    A reducing operation: takes an accumulator and an element, and returns the new
    accumulator. Terminal reducers such as :class:`.Appending` or :class:`.Summing`
    determine what a reduction produces.
- :class:`.Transducer`
    Turns one reducer into another, e.g., by transforming or dropping elements
    before they reach the reducer. Transducers are independent of the accumulator
    type, so the same transducer can feed any reducer.
- :class:`.Reduced`
    Wraps an accumulator to signal that a reduction is complete.
- :func:`.reduce`
    Runs a reducer over a source, visiting each element exactly once.
- :func:`.transduce`
    Applies a transducer to a reducer and runs the result over a source.

The ``>>`` operator is overloaded for transducers to chain them: in ``t1 >> t2``,
each element is processed by ``t1`` first, and only the elements emitted by ``t1``
reach ``t2``. Chaining is associative.

The :mod:`.functional` package provides functions to create transducers and
reducers, and the :mod:`.simple` package provides the underlying classes.
"""

from ._passthrough import *
from ._reduce import *
from ._reducer import *
from ._transducer import *

__version__ = "1.0.0"
