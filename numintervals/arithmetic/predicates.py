"""Three-valued predicates on intervals.

Every predicate here reads only the endpoints of its arguments (anything with
`lo`, `hi` and `invalid`, normally a `NumberInterval`) and returns a `TriBool`:
`TRUE` if the predicate holds for every point of the interval(s), `FALSE` if
it holds for none, and `INDETERMINATE` otherwise. Endpoints are compared
exactly; the enclosure provided by outward rounding is the only tolerance.

These are the raw predicates and never consult the exception policy. The
comparison operators and predicate methods of `NumberInterval` run them
through `policy.evaluate_gated()`.
"""

from ..core import gmpmath
from .tribool import TRUE, FALSE, INDETERMINATE


def _invalid(*args):
    return any(x.invalid for x in args)

def _is_point(x):
    return x.lo == x.hi

def _disjoint(a, b):
    return a.hi < b.lo or b.hi < a.lo


#
#   Comparison
#

def eq(a, b):
    """`a == b`: true only if both intervals are the same single point."""
    if _invalid(a, b):
        return INDETERMINATE
    elif _disjoint(a, b):
        return FALSE
    elif _is_point(a) and _is_point(b):
        # overlapping points are equal
        return TRUE
    else:
        return INDETERMINATE

def ne(a, b):
    return eq(a, b).neg()

def lt(a, b):
    """`a < b`. Intervals sharing only an endpoint, like [0, 1] < [1, 2],
    are indeterminate: 1 < 1 fails but 0 < 2 holds."""
    if _invalid(a, b):
        return INDETERMINATE
    elif a.hi < b.lo:
        return TRUE
    elif a.lo >= b.hi:
        return FALSE
    else:
        return INDETERMINATE

def le(a, b):
    """`a <= b`. Sharing only an endpoint is enough: [0, 1] <= [1, 2]."""
    if _invalid(a, b):
        return INDETERMINATE
    elif a.hi <= b.lo:
        return TRUE
    elif a.lo > b.hi:
        return FALSE
    else:
        return INDETERMINATE

def gt(a, b):
    return lt(b, a)

def ge(a, b):
    return le(b, a)


#
#   Classification
#

def _isvalue(x, v):
    if _invalid(x):
        return INDETERMINATE
    elif x.lo == v and x.hi == v:
        return TRUE
    elif x.hi < v or x.lo > v:
        return FALSE
    else:
        return INDETERMINATE

def iszero(x):
    """`x == 0`. Endpoints compare equal to zero regardless of their sign,
    so [-0, +0] is definitely zero while [-1, 1] is indeterminate."""
    return _isvalue(x, 0)

def isone(x):
    return _isvalue(x, 1)

def isinteger(x):
    """Is `x` an integer? False only if no integer lies in `[lo, hi]`."""
    if _invalid(x):
        return INDETERMINATE
    elif _is_point(x):
        if gmpmath.is_integer(x.lo):
            return TRUE
        else:
            return FALSE
    elif gmpmath.floor(x.hi) < x.lo:
        return FALSE
    else:
        return INDETERMINATE

def ispositive(x):
    """`x > 0`."""
    if _invalid(x):
        return INDETERMINATE
    elif x.lo > 0:
        return TRUE
    elif x.hi <= 0:
        return FALSE
    else:
        return INDETERMINATE

def isnegative(x):
    """`x < 0`."""
    if _invalid(x):
        return INDETERMINATE
    elif x.hi < 0:
        return TRUE
    elif x.lo >= 0:
        return FALSE
    else:
        return INDETERMINATE

def sign(x):
    """Returns -1, 0 or 1 if every point of `x` has that sign,
    else `INDETERMINATE`."""
    if _invalid(x):
        return INDETERMINATE
    elif x.lo > 0:
        return 1
    elif x.hi < 0:
        return -1
    elif x.lo == 0 and x.hi == 0:
        return 0
    else:
        return INDETERMINATE
