from typing import Callable, Iterable, TypeVar

from xduce.reduced import Reduced
from xduce.reducers import array_of

A = TypeVar("A")
C = TypeVar("C")


def reduce(source: Iterable[A], initial: C, step: Callable[[C, A], C]) -> C:
    """
    reduce consumes source in order, threading the accumulation through step.
    Think foldl from Haskell.
    step is (c -> a -> c)
    initial is c
    source is [a]

    step is called exactly once per consumed element. When step returns a
    Reduced box, no further elements are pulled from source and the boxed
    accumulation is returned. Exceptions raised by step abort the reduction.
    """
    accumulation = initial
    for value in source:
        accumulation = step(accumulation, value)
        if isinstance(accumulation, Reduced):
            return accumulation.value
    return accumulation


def transduce(xform, reducer, seed, iterable):
    """
    xform is a transducer, (c -> b -> c) -> (c -> a -> c)
    reducer is (c -> b -> c)
    seed is c
    iterable is [a]
    """
    return reduce(iterable, seed, xform(reducer))


def into(xform, iterable):
    """Runs iterable through xform, collecting the results in a new list."""
    return transduce(xform, array_of, [], iterable)
