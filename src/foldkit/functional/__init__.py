"""
Functional API for building reductions.

The functions :func:`mapping`, :func:`filtering`, :func:`removing`,
:func:`flat_mapping` and :func:`taking_while` create transducers, and function
:func:`compose` chains them into a single transducer. Alternatively, the ``>>``
operator can be used to chain transducers.

The functions :func:`appending`, :func:`concatenating`, :func:`summing`,
:func:`counting` and :func:`joining` create terminal reducers that determine what the
reduction accumulates; function :func:`reducer` turns any two-argument function into
a reducer.

Applying a transducer to a terminal reducer yields a new reducer, which is then run
over a source using :func:`.reduce`; function :func:`.transduce` does both in one call.

Example:

.. code-block:: python

    from foldkit import reduce, transduce
    from foldkit.functional import appending, compose, filtering, mapping, summing

    increment_evens = compose(
        mapping(lambda x: x + 1),
        filtering(lambda x: x % 2 == 0),
    )

    reduce(range(1, 11), [], increment_evens(appending()))

    transduce(increment_evens, summing(), range(1, 11), 0)

This will output ``[2, 4, 6, 8, 10]`` and ``30``, respectively. Both reductions visit
each element of the range exactly once, and create no intermediate lists.
"""

from ._functions import *
