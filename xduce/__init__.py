from xduce.reduced import Reduced, reduced, is_reduced, ensure_reduced, unreduced
from xduce.reducers import array_of, set_of, sum_of, joined_with
from xduce.transduce import reduce, transduce, into
from xduce.transducer import \
    Reducer,      \
    Transducer,   \
    identity,     \
    mapping,      \
    filtering,    \
    taking,       \
    taking_while
from xduce.compose import compose, pipeline
