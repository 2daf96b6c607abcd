from typing import Callable, Generic, TypeVar

from func_prototypes import typed

from xduce.reduced import Reduced, ensure_reduced

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

Reducer = Callable[[C, A], C]
# A transducer turns a reducer of B into a reducer of A, for any accumulation C.
Transducer = Callable[[Reducer[C, B]], Reducer[C, A]]


class Stage(Generic[C, A, B]):
    """
    A reducer built by applying a transducer to a downstream reducer rf.
    The base stage passes every input straight through.
    """

    def __init__(self, rf: Reducer[C, B]):
        self.rf = rf

    def __call__(self, result: C, input: A):
        return self.rf(result, input)


class Mapping(Stage[C, A, B]):

    def __init__(self, f: Callable[[A], B], rf: Reducer[C, B]):
        super().__init__(rf)
        self.f = f

    def __call__(self, result: C, input: A):
        return self.rf(result, self.f(input))


class Filtering(Stage[C, A, A]):

    def __init__(self, pred: Callable[[A], bool], rf: Reducer[C, A]):
        super().__init__(rf)
        self.pred = pred

    def __call__(self, result: C, input: A):
        if self.pred(input):
            return self.rf(result, input)
        return result


class Taking(Stage[C, A, A]):
    """
    Accepts the first n inputs. The call which accepts the nth input returns
    Reduced, and so does every call after it, without touching rf.
    """

    def __init__(self, n: int, rf: Reducer[C, A]):
        super().__init__(rf)
        self.n = n
        self.accepted = 0

    def __call__(self, result: C, input: A):
        if self.accepted >= self.n:
            return ensure_reduced(result)
        self.accepted += 1
        result = self.rf(result, input)
        if self.accepted == self.n:
            return ensure_reduced(result)
        return result


class TakingWhile(Stage[C, A, A]):

    def __init__(self, pred: Callable[[A], bool], rf: Reducer[C, A]):
        super().__init__(rf)
        self.pred = pred

    def __call__(self, result: C, input: A):
        if self.pred(input):
            return self.rf(result, input)
        return Reduced(result)


def identity(rf):
    """The transducer which hands back rf untouched. Unit of compose."""
    return rf


def mapping(f: Callable[[A], B]):
    """
    Lifts f: a -> b into a transducer. Note the direction: the result turns a
    reducer of b into a reducer of a, since f runs before rf sees the value.
    """
    def mapped(rf: Reducer[C, B]) -> Reducer[C, A]:
        return Mapping(f, rf)
    return mapped


def filtering(pred: Callable[[A], bool]):
    def filtered(rf: Reducer[C, A]) -> Reducer[C, A]:
        return Filtering(pred, rf)
    return filtered


@typed(int)
def taking(n):
    """
    Bounds a reduction to its first n elements. Each application builds its
    own Taking, so one taking(n) value can seed any number of independent
    pipelines. taking(0) never calls rf and stops at the first element.
    n must be a non-negative int; bools are refused.
    """
    if isinstance(n, bool):
        raise TypeError("taking requires an int count, got %r" % (n,))
    if n < 0:
        raise ValueError("taking requires a non-negative count, got %d" % n)
    def taker(rf: Reducer[C, A]) -> Reducer[C, A]:
        return Taking(n, rf)
    return taker


def taking_while(pred: Callable[[A], bool]):
    def taker(rf: Reducer[C, A]) -> Reducer[C, A]:
        return TakingWhile(pred, rf)
    return taker
