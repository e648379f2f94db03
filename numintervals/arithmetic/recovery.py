"""Falling back to another formula when a predicate is indeterminate.

With the exception policy intercepting indeterminate results, an algorithm
that branches on an interval comparison raises `IndeterminateException`
instead of taking a branch that may be wrong. The helpers here catch that
exception (and only that exception) and substitute an alternative
computation, or report the failure as a value.
"""

import logging

from ..core.utils import IndeterminateException
from ..core.ops import PRED
from .policy import parse_kind
from .interval import interval


log = logging.getLogger(__name__)


class Outcome(object):
    """Result of `attempt()`: either a `value`, or the predicate kind
    that was indeterminate (`failure`), along with the exception itself."""

    def __init__(self, value=None, failure=None, exception=None):
        self.value = value
        self.failure = failure
        self.exception = exception

    @property
    def ok(self):
        return self.failure is None

    def __repr__(self):
        if self.ok:
            return '{}(value={})'.format(type(self).__name__, repr(self.value))
        else:
            return '{}(failure={})'.format(type(self).__name__, repr(self.failure))

    def unwrap(self):
        """Returns the value, re-raising the original exception on failure."""
        if self.ok:
            return self.value
        raise self.exception


def _matches(exc, kinds):
    if kinds is None:
        return True
    kinds = {parse_kind(k) for k in kinds}
    return IndeterminateException in kinds or exc.kind in kinds


def attempt(fn, *args, kinds=None, **kwargs):
    """Calls `fn(*args, **kwargs)`. An `IndeterminateException` whose kind is
    in `kinds` (any kind, if `kinds` is None) becomes a failed `Outcome`;
    every other exception propagates unchanged."""
    try:
        return Outcome(value=fn(*args, **kwargs))
    except IndeterminateException as e:
        if not _matches(e, kinds):
            raise
        return Outcome(failure=e.kind, exception=e)


def with_fallback(preferred, fallback, *args, kinds=None, **kwargs):
    """Returns `preferred(*args, **kwargs)`, or `fallback(*args, **kwargs)` if
    the preferred computation hits a matching indeterminate predicate."""
    try:
        return preferred(*args, **kwargs)
    except IndeterminateException as e:
        if not _matches(e, kinds):
            raise
        log.debug('%s: %s, falling back to %s', getattr(preferred, '__name__', preferred),
                  e, getattr(fallback, '__name__', fallback))
        return fallback(*args, **kwargs)


#
#   hypot
#

def hypot(x, y):
    """sqrt(x**2 + y**2) without intermediate overflow, by scaling with the
    larger magnitude. Branches on `abs(x) < abs(y)` and on the larger one being
    zero, so it needs those comparisons to be decidable."""
    x = abs(interval(x))
    y = abs(interval(y))
    if x < y:
        x, y = y, x
    if x.iszero():
        return x
    r = y / x
    return x * (1 + r * r).sqrt()

def hypot_direct(x, y):
    """sqrt(x**2 + y**2), evaluated directly. No branches."""
    x = interval(x)
    y = interval(y)
    return (x ** 2 + y ** 2).sqrt()

def safe_hypot(x, y):
    """`hypot()`, falling back to `hypot_direct()` when an ordering or zero
    test in it is indeterminate and the exception policy intercepts `PRED.lt`
    or `PRED.iszero`. Under the default pass-through policy the indeterminate
    test reaches `if` and raises `IndeterminateCoercionError` instead."""
    return with_fallback(hypot, hypot_direct, x, y, kinds=(PRED.lt, PRED.iszero))
