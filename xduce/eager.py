# Collection at a time versions of map, filter and take, each written as a
# reduction that builds a brand new list. Chaining them walks the data once per
# stage and allocates a list per stage, which is the cost transducers remove.
from xduce.transduce import reduce


def fmap(func):
    def mapped(collection):
        return reduce(collection, [], lambda acc, x: acc + [func(x)])
    mapped.__name__ = "mapped_" + getattr(func, "__name__", "func")
    return mapped


def ffilter(pred):
    def filtered(collection):
        return reduce(collection, [], lambda acc, x: acc + [x] if pred(x) else acc)
    filtered.__name__ = "filtered_" + getattr(pred, "__name__", "pred")
    return filtered


def take(count):
    """
    Keeps the first count elements. Visits every element of collection: a plain
    reduction has no way to stop early.
    """
    if count < 0:
        raise ValueError("take requires a non-negative count, got %d" % count)
    def taker(collection):
        return reduce(collection, [], lambda acc, x: acc + [x] if len(acc) < count else acc)
    return taker
