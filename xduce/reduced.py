from typing import Generic, TypeVar

T = TypeVar("T")


class Reduced(Generic[T]):
    """
    Box around an accumulation which tells the reduce driver to stop pulling
    elements. A reducer returns Reduced(acc) instead of acc once it will not
    accept anything more.
    """
    __slots__ = ("value",)

    def __init__(self, value: T):
        self.value = value

    def __repr__(self):
        return "Reduced(%r)" % (self.value,)

    def __eq__(self, other):
        return isinstance(other, Reduced) and self.value == other.value

    def __hash__(self):
        return hash((Reduced, self.value))


def reduced(value):
    return Reduced(value)


def is_reduced(value):
    return isinstance(value, Reduced)


def ensure_reduced(value):
    """Wraps value in Reduced, unless it already is one."""
    if isinstance(value, Reduced):
        return value
    return Reduced(value)


def unreduced(value):
    if isinstance(value, Reduced):
        return value.value
    return value
