from functools import reduce as _fold

from xduce.transducer import identity

# compose(a, b, ...)(rf) == a(b(...(rf))). Transducers wrap the reducer
# from the inside out, so the first transducer listed becomes the outermost
# stage and is the first one to see each element.


def _comp_0():
    return identity


def _comp_1(a):
    return a


def _comp_2(a, b):
    def _combined2(rf):
        return a(b(rf))

    return _combined2


def _comp_3(a, b, c):
    def _combined3(rf):
        return a(b(c(rf)))

    return _combined3


def _comp_4(a, b, c, d):
    def _combined4(rf):
        return a(b(c(d(rf))))

    return _combined4


def _comp_5(a, b, c, d, e):
    def _combined5(rf):
        return a(b(c(d(e(rf)))))

    return _combined5


def _comp_6(a, b, c, d, e, f):
    def _combined6(rf):
        return a(b(c(d(e(f(rf))))))

    return _combined6


def _comp_7(a, b, c, d, e, f, g):
    def _combined7(rf):
        return a(b(c(d(e(f(g(rf)))))))

    return _combined7


def _comp_8(a, b, c, d, e, f, g, h):
    def _combined8(rf):
        return a(b(c(d(e(f(g(h(rf))))))))

    return _combined8


_comp_fns = [
    _comp_0,
    _comp_1,
    _comp_2,
    _comp_3,
    _comp_4,
    _comp_5,
    _comp_6,
    _comp_7,
    _comp_8,
]


def compose(*xforms):
    """
    Composes transducers. Reading order is processing order:
    compose(mapping(square), filtering(odd)) squares each element, then
    filters the squares.
    """
    for xform in xforms:
        if not callable(xform):
            raise TypeError("Can't compose non-callable %r" % (xform,))
    n = len(xforms)
    if n < len(_comp_fns):
        return _comp_fns[n](*xforms)
    return _fold(_comp_2, xforms)


def pipeline(*funcs):
    """
    Left to right function composition: pipeline(f, g)(x) == g(f(x)).
    Use it to build element functions, e.g. mapping(pipeline(square, incr)).
    """
    if funcs:
        foo = funcs[0]
        rest = funcs[1:]
        if rest:
            next_hop = pipeline(*rest)
            def pipe(*args, **kwargs):
                return next_hop(foo(*args, **kwargs))
            return pipe
        else:  # no rest, foo is final function.
            return foo
    else:  # no funcs at all.
        return lambda x: x
