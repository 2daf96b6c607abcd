# Base reducers. Each one is (acc, val) -> acc and is the innermost step of a
# transducer pipeline.

def array_of(acc, val):
    """
    Appends val to acc in place. Avoids reallocating the list on every
    iteration, so seed it with a fresh list per reduction.
    """
    acc.append(val)
    return acc


def set_of(acc, val):
    acc.add(val)
    return acc


def sum_of(acc, val):
    """Reducer which computes a sum"""
    return acc + val


def joined_with(separator):
    """
    Joins values into a string. Seed it with None, which also marks that
    nothing has been joined yet; an empty source hands back the None.
    """
    def joint(acc, val):
        if acc is None:
            return "%s" % (val,)
        else:
            return "%s%s%s" % (acc, separator, val)
    joint.__name__ = "joined_with_" + repr(separator)
    return joint
