from docopt import docopt
from functools import partial
from tabulate import tabulate
import timeit
import sys

from xduce.compose import compose, pipeline
from xduce.eager import fmap, ffilter, take
from xduce.reducers import array_of
from xduce.transduce import transduce
from xduce.transducer import mapping, filtering, taking

BENCH_USAGE = """
xduce-bench

Usage:
  xduce-bench compare [--size=<n>] [--number=<n>] [--limit=<n>]
  xduce-bench count [--size=<n>] [--limit=<n>]

Options:
  --size=<n>    Number of source elements [default: 1000].
  --number=<n>  Repetitions per case [default: 10].
  --limit=<n>   How many results to take [default: 10].
"""

def square(x):
    return x * x

def incr(x):
    return x + 1

def is_odd(x):
    return x % 2 == 1

def eager_chain(limit, nums):
    return pipeline(fmap(square), fmap(incr), ffilter(is_odd), take(limit))(nums)

def transduce_chain(limit, nums):
    xform = compose(mapping(square), mapping(incr), filtering(is_odd), taking(limit))
    return transduce(xform, array_of, [], nums)

def comprehension_chain(limit, nums):
    return [y for y in (incr(square(x)) for x in nums) if is_odd(y)][:limit]

def performance_compare(*cases, case_args=None, timeit_kwargs=None):
    case_args = case_args or []
    timeit_kwargs = timeit_kwargs or {}
    results = {}
    for case in cases:
        name = case.__name__
        case = partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))

def counted(fn, counts):
    """Wraps fn so every call bumps counts[fn.__name__]."""
    name = fn.__name__
    counts.setdefault(name, 0)
    def counting(x):
        counts[name] += 1
        return fn(x)
    counting.__name__ = name
    return counting

def stage_counts(limit, nums):
    table = []
    for label, build in [("eager", _eager_counted), ("transduce", _transduce_counted)]:
        counts = {}
        result = build(counts, limit, nums)
        table.append((label, len(result), counts['square'], counts['incr'], counts['is_odd']))
    print(tabulate(table, headers=['case', 'results', 'square', 'incr', 'is_odd']))

def _eager_counted(counts, limit, nums):
    return pipeline(
        fmap(counted(square, counts)),
        fmap(counted(incr, counts)),
        ffilter(counted(is_odd, counts)),
        take(limit))(nums)

def _transduce_counted(counts, limit, nums):
    xform = compose(
        mapping(counted(square, counts)),
        mapping(counted(incr, counts)),
        filtering(counted(is_odd, counts)),
        taking(limit))
    return transduce(xform, array_of, [], nums)

def _int_option(args, name):
    value = args[name]
    try:
        return int(value)
    except ValueError:
        raise ValueError("%s must be an integer, got %r" % (name, value))

def bench_ui(argv):
    exitcode = 0
    args = docopt(BENCH_USAGE, argv)
    size = _int_option(args, '--size')
    limit = _int_option(args, '--limit')
    nums = list(range(size))
    if args['compare']:
        number = _int_option(args, '--number')
        performance_compare(
            eager_chain,
            transduce_chain,
            comprehension_chain,
            case_args=[limit, nums],
            timeit_kwargs={'number': number})
    elif args['count']:
        stage_counts(limit, nums)
    return exitcode

def main():
    result = bench_ui(sys.argv[1:])
    exit(result)
