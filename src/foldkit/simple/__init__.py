"""
Ready-to-use reducers and transducers.

Reducers:

- :class:`.Appending`: appends elements to a list, in place
- :class:`.Concatenating`: adds elements to a new sequence at each step
- :class:`.Summing`: adds up elements
- :class:`.Counting`: counts elements
- :class:`.Joining`: joins elements into a string
- :class:`.FunctionReducer`: delegates to a two-argument function

Transducers:

- :class:`.Mapping`: transforms each element
- :class:`.Filtering`: keeps the elements satisfying a predicate
- :class:`.Removing`: drops the elements satisfying a predicate
- :class:`.FlatMapping`: expands each element into zero or more elements
- :class:`.TakingWhile`: ends the reduction at the first element failing a
  predicate
"""

from ._reducers import *
from ._transducers import *
