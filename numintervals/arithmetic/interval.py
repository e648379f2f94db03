"""Real numbers represented by intervals.

A `NumberInterval` stands in for an unknown real number known to lie in
`[lo, hi]`. Arithmetic rounds outward, so the result always encloses every
possible exact result. Predicates (comparison operators, `iszero()`, ...)
are three-valued: they return `TRUE` or `FALSE` only when the answer is the
same for every point of the interval, and `INDETERMINATE` otherwise, unless
the exception policy asks for an `IndeterminateException` instead.
"""

from enum import IntEnum, unique
import gmpy2 as gmp

from ..core import gmpmath
from ..core.ops import PRED, RM
from . import predicates
from .policy import evaluate_gated


@unique
class IntervalOrder(IntEnum):
    """Classification of a `NumberInterval` by comparison against a scalar value.
    See `NumberInterval.classify()` for details."""
    STRICTLY_LESS     = -2
    LESS              = -1
    CONTAINS          = 0
    GREATER           = 1
    STRICTLY_GREATER  = 2


_numeric_types = (int, float, str, type(gmp.mpfr(0)), type(gmp.mpz(0)), type(gmp.mpq(0)))
_operand_types = tuple(t for t in _numeric_types if t is not str)


#
#   Interval type
#

class NumberInterval(object):
    """An interval with MPFR endpoints, used as a number.
    Endpoints keep the sign of zero, may be infinite, and are nan
    only for the empty (invalid) interval, e.g. sqrt([-2, -1]).
    """

    # working precision of the endpoints, in bits
    prec: int = 53

    # represents the real number interval [_lo, _hi]
    _lo = gmpmath.inf(negative=True)
    _hi = gmpmath.inf(negative=False)

    # empty interval, e.g. sqrt([-2, -1]) or nan inputs
    _invalid: bool = False

    # the internal state is not directly visible: expose it with properties

    @property
    def lo(self):
        """The lower bound.
        """
        return self._lo

    @property
    def hi(self):
        """The upper bound.
        """
        return self._hi

    @property
    def invalid(self):
        """Is this the empty interval?
        """
        return self._invalid

    def __init__(self, x=None, lo=None, hi=None, invalid=False):
        """Creates a new interval. The first argument `x` is either an interval
        to clone and update, or a number (int, float, decimal string, or gmpy2 type)
        to construct the smallest interval containing it. The arguments `lo` and `hi`
        construct the interval `[lo, hi]`, rounding `lo` down and `hi` up.
        If none of these arguments are provided, the interval is initialized
        to the real number line `[-inf, inf]`."""

        if x is not None and not isinstance(x, NumberInterval) and not isinstance(x, _numeric_types):
            raise TypeError('cannot convert {} to {}'.format(repr(x), type(self).__name__))

        if invalid:
            self._lo = gmpmath.nan()
            self._hi = gmpmath.nan()
            self._invalid = True
            return

        # _lo
        if lo is not None:
            self._lo = gmpmath.mpfr(lo, self.prec, RM.RTN)
        elif x is not None:
            if isinstance(x, NumberInterval):
                self._lo = gmpmath.mpfr(x._lo, self.prec, RM.RTN)
            else:
                self._lo = gmpmath.mpfr(x, self.prec, RM.RTN)
        else:
            self._lo = type(self)._lo

        # _hi
        if hi is not None:
            self._hi = gmpmath.mpfr(hi, self.prec, RM.RTP)
        elif x is not None:
            if isinstance(x, NumberInterval):
                self._hi = gmpmath.mpfr(x._hi, self.prec, RM.RTP)
            else:
                self._hi = gmpmath.mpfr(x, self.prec, RM.RTP)
        else:
            self._hi = type(self)._hi

        # _invalid
        if isinstance(x, NumberInterval) and x._invalid:
            self._invalid = True
        else:
            self._invalid = gmpmath.is_nan(self._lo) or gmpmath.is_nan(self._hi)
        if self._invalid:
            self._lo = gmpmath.nan()
            self._hi = gmpmath.nan()
            return

        # check bounds
        if self._lo > self._hi:
            raise ValueError('invalid interval: lo={}, hi={}'.format(self._lo, self._hi))
        if self._lo == gmpmath.inf() or self._hi == gmpmath.inf(negative=True):
            raise ValueError('interval does not contain a real number: lo={}, hi={}'.format(self._lo, self._hi))

    @classmethod
    def empty(cls):
        return cls(invalid=True)

    @classmethod
    def entire(cls):
        return cls()

    def __repr__(self):
        if self._invalid:
            return '{}(invalid=True)'.format(type(self).__name__)
        else:
            return '{}(lo={}, hi={})'.format(type(self).__name__, repr(self._lo), repr(self._hi))

    def __str__(self):
        if self._invalid:
            return '[nan, nan]'
        else:
            return '[{}, {}]'.format(str(self._lo), str(self._hi))

    # (visible) utility functions

    def is_point(self) -> bool:
        """"Is the interval a "singleton" interval, e.g. [a, a]?"""
        return not self._invalid and self._lo == self._hi

    def contains(self, x) -> bool:
        """Does the interval contain every point of `x`?"""
        x = _coerce(x)
        if self._invalid or x._invalid:
            return False
        return self._lo <= x._lo and x._hi <= self._hi

    def classify(self, val=0, strict=False) -> IntervalOrder:
        """Classifies this interval by comparing against a value.
        By default, this interval can be `LESS`, `CONTAINS`, or `GREATER`
        where intervals with `val` as an endpoint are either `LESS` and `GREATER`.
        If `strict` is `True`, this interval can be `STRICTLY_LESS`, `CONTAINS`
        or `STRICTLY_GREATER` where intervals with `val` as an endpoint are classified
        as `CONTAINS`.
        """
        if self._invalid:
            raise ValueError('cannot classify an empty interval')
        if strict:
            if self._hi < val:
                return IntervalOrder.STRICTLY_LESS
            elif self._lo > val:
                return IntervalOrder.STRICTLY_GREATER
            else:
                return IntervalOrder.CONTAINS
        else:
            if self._hi <= val:
                return IntervalOrder.LESS
            elif self._lo >= val:
                return IntervalOrder.GREATER
            else:
                return IntervalOrder.CONTAINS

    def union(self, other):
        """Returns the smallest interval containing this interval and another."""
        other = _coerce(other)
        if self._invalid:
            return type(self)(other)
        if other._invalid:
            return type(self)(self)
        lo = self._lo if self._lo < other._lo else other._lo
        hi = self._hi if self._hi > other._hi else other._hi
        return type(self)(lo=lo, hi=hi)

    # predicates, gated by the exception policy

    def eq(self, other):
        """Returns a TriBool representing `self` == `other`."""
        other = _coerce(other)
        return evaluate_gated(predicates.eq(self, other), PRED.eq, self, other)

    def ne(self, other):
        """Returns a TriBool representing `self` != `other`."""
        other = _coerce(other)
        return evaluate_gated(predicates.ne(self, other), PRED.ne, self, other)

    def lt(self, other):
        """Returns a TriBool representing `self` < `other`."""
        other = _coerce(other)
        return evaluate_gated(predicates.lt(self, other), PRED.lt, self, other)

    def le(self, other):
        """Returns a TriBool representing `self` <= `other`."""
        other = _coerce(other)
        return evaluate_gated(predicates.le(self, other), PRED.le, self, other)

    def gt(self, other):
        """Returns a TriBool representing `self` > `other`."""
        other = _coerce(other)
        return evaluate_gated(predicates.gt(self, other), PRED.gt, self, other)

    def ge(self, other):
        """Returns a TriBool representing `self` >= `other`."""
        other = _coerce(other)
        return evaluate_gated(predicates.ge(self, other), PRED.ge, self, other)

    def iszero(self):
        return evaluate_gated(predicates.iszero(self), PRED.iszero, self)

    def isone(self):
        return evaluate_gated(predicates.isone(self), PRED.isone, self)

    def isinteger(self):
        return evaluate_gated(predicates.isinteger(self), PRED.isinteger, self)

    def ispositive(self):
        return evaluate_gated(predicates.ispositive(self), PRED.ispositive, self)

    def isnegative(self):
        return evaluate_gated(predicates.isnegative(self), PRED.isnegative, self)

    def sign(self):
        """Returns -1, 0 or 1, or `INDETERMINATE` if the sign is not known."""
        return evaluate_gated(predicates.sign(self), PRED.sign, self)

    def _compare(self, other, fn):
        try:
            other = _coerce(other)
        except TypeError:
            return NotImplemented
        return fn(self, other)

    def __eq__(self, other):
        return self._compare(other, NumberInterval.eq)

    def __ne__(self, other):
        return self._compare(other, NumberInterval.ne)

    def __lt__(self, other):
        return self._compare(other, NumberInterval.lt)

    def __le__(self, other):
        return self._compare(other, NumberInterval.le)

    def __gt__(self, other):
        return self._compare(other, NumberInterval.gt)

    def __ge__(self, other):
        return self._compare(other, NumberInterval.ge)

    # equality is three-valued, so intervals cannot be hashed
    __hash__ = None

    def __bool__(self):
        """Truth value testing, like for numbers: nonzero is true."""
        return bool(self.iszero().neg())

    # math operations

    def neg(self):
        """Negates this interval. Exact."""
        if self._invalid:
            return type(self)(invalid=True)
        return type(self)(lo=-self._hi, hi=-self._lo)

    def fabs(self):
        """Absolute value of this interval. Exact."""
        if self._invalid:
            return type(self)(invalid=True)
        xclass = self.classify()
        if xclass == IntervalOrder.GREATER:
            return type(self)(self)
        elif xclass == IntervalOrder.LESS:
            return self.neg()
        else:   # xclass == IntervalOrder.CONTAINS
            hi = -self._lo if -self._lo > self._hi else self._hi
            return type(self)(lo=0, hi=hi)

    def add(self, other):
        """Adds this interval and another and returns the result."""
        other = _coerce(other)
        if self._invalid or other._invalid:
            return type(self)(invalid=True)
        lo = gmpmath.compute(gmp.add, self._lo, other._lo, prec=self.prec, rm=RM.RTN)
        hi = gmpmath.compute(gmp.add, self._hi, other._hi, prec=self.prec, rm=RM.RTP)
        return type(self)(lo=lo, hi=hi)

    def sub(self, other):
        """Subtracts this interval by another and returns the result."""
        other = _coerce(other)
        if self._invalid or other._invalid:
            return type(self)(invalid=True)
        lo = gmpmath.compute(gmp.sub, self._lo, other._hi, prec=self.prec, rm=RM.RTN)
        hi = gmpmath.compute(gmp.sub, self._hi, other._lo, prec=self.prec, rm=RM.RTP)
        return type(self)(lo=lo, hi=hi)

    def mul(self, other):
        """Multiplies this interval and another and returns the result."""
        other = _coerce(other)
        if self._invalid or other._invalid:
            return type(self)(invalid=True)
        corners = [(a, b) for a in (self._lo, self._hi) for b in (other._lo, other._hi)]
        lo = min(gmpmath.mul(a, b, prec=self.prec, rm=RM.RTN) for a, b in corners)
        hi = max(gmpmath.mul(a, b, prec=self.prec, rm=RM.RTP) for a, b in corners)
        return type(self)(lo=lo, hi=hi)

    def div(self, other):
        """Divides this interval by another and returns the result.
        Dividing by [0, 0] gives the empty interval, and dividing by
        any other interval containing zero gives the whole real line."""
        other = _coerce(other)
        if self._invalid or other._invalid:
            return type(self)(invalid=True)
        if other.classify(strict=True) == IntervalOrder.CONTAINS:
            if other._lo == 0 and other._hi == 0:
                return type(self)(invalid=True)
            else:
                return type(self)()
        corners = [(a, b) for a in (self._lo, self._hi) for b in (other._lo, other._hi)]
        # inf / inf corners are nan; the neighbouring finite / inf and inf / finite
        # corners already bound the quotient there
        los = [gmpmath.div(a, b, prec=self.prec, rm=RM.RTN) for a, b in corners]
        his = [gmpmath.div(a, b, prec=self.prec, rm=RM.RTP) for a, b in corners]
        lo = min(q for q in los if not gmpmath.is_nan(q))
        hi = max(q for q in his if not gmpmath.is_nan(q))
        return type(self)(lo=lo, hi=hi)

    def sqrt(self):
        """Square root of the nonnegative part of this interval;
        empty if the interval is entirely negative."""
        if self._invalid or self._hi < 0:
            return type(self)(invalid=True)
        lo = self._lo if self._lo > 0 else gmpmath.zero()
        lo = gmpmath.compute(gmp.sqrt, lo, prec=self.prec, rm=RM.RTN)
        hi = gmpmath.compute(gmp.sqrt, self._hi, prec=self.prec, rm=RM.RTP)
        return type(self)(lo=lo, hi=hi)

    def pown(self, n):
        """Raises this interval to an integer power `n`.
        Even powers of intervals containing zero start at zero."""
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError('expected an integer exponent: {}'.format(repr(n)))
        if self._invalid:
            return type(self)(invalid=True)
        if n < 0:
            return type(self)(1).div(self.pown(-n))
        elif n == 0:
            return type(self)(1)
        elif n % 2 == 0:
            base = self.fabs()
        else:
            base = self
        lo = gmpmath.compute(lambda x: x ** n, base._lo, prec=self.prec, rm=RM.RTN)
        hi = gmpmath.compute(lambda x: x ** n, base._hi, prec=self.prec, rm=RM.RTP)
        return type(self)(lo=lo, hi=hi)

    def __neg__(self):
        return self.neg()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.fabs()

    def _arith(self, other, fn, reflected=False):
        try:
            other = _coerce(other)
        except TypeError:
            return NotImplemented
        if reflected:
            return fn(other, self)
        else:
            return fn(self, other)

    def __add__(self, other):
        return self._arith(other, NumberInterval.add)

    def __radd__(self, other):
        return self._arith(other, NumberInterval.add, reflected=True)

    def __sub__(self, other):
        return self._arith(other, NumberInterval.sub)

    def __rsub__(self, other):
        return self._arith(other, NumberInterval.sub, reflected=True)

    def __mul__(self, other):
        return self._arith(other, NumberInterval.mul)

    def __rmul__(self, other):
        return self._arith(other, NumberInterval.mul, reflected=True)

    def __truediv__(self, other):
        return self._arith(other, NumberInterval.div)

    def __rtruediv__(self, other):
        return self._arith(other, NumberInterval.div, reflected=True)

    def __pow__(self, n):
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return self.pown(n)


def _coerce(x):
    if isinstance(x, NumberInterval):
        return x
    elif isinstance(x, _operand_types) and not isinstance(x, bool):
        return NumberInterval(x)
    else:
        raise TypeError('cannot convert {} to NumberInterval'.format(repr(x)))


#
#   Gated predicates on numbers
#

def interval(x=None, lo=None, hi=None):
    """Returns `x` if it is already a `NumberInterval`, else a new one."""
    if isinstance(x, NumberInterval) and lo is None and hi is None:
        return x
    return NumberInterval(x, lo=lo, hi=hi)

def eq(a, b):
    return _coerce(a).eq(b)

def ne(a, b):
    return _coerce(a).ne(b)

def lt(a, b):
    return _coerce(a).lt(b)

def le(a, b):
    return _coerce(a).le(b)

def gt(a, b):
    return _coerce(a).gt(b)

def ge(a, b):
    return _coerce(a).ge(b)

def iszero(x):
    return _coerce(x).iszero()

def isone(x):
    return _coerce(x).isone()

def isinteger(x):
    return _coerce(x).isinteger()

def ispositive(x):
    return _coerce(x).ispositive()

def isnegative(x):
    return _coerce(x).isnegative()

def sign(x):
    return _coerce(x).sign()

def sqrt(x):
    return _coerce(x).sqrt()
