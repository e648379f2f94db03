"""Interval endpoint operations implemented with GMP as a backend.

Endpoints are MPFR numbers. Every operation here takes the rounding
direction explicitly, so lower endpoints can be rounded toward -inf and
upper endpoints toward +inf.
"""


import gmpy2 as gmp

from .ops import RM


gmp_rm = {
    RM.RNE: gmp.RoundToNearest,
    RM.RTP: gmp.RoundUp,
    RM.RTN: gmp.RoundDown,
}


def _context(prec, rm):
    return gmp.context(
        precision=prec,
        emin=gmp.get_emin_min(),
        emax=gmp.get_emax_max(),
        subnormalize=False,
        # overflow goes to inf and underflow to (signed) zero
        trap_underflow=False,
        trap_overflow=False,
        # invalid operations produce nan, which is how empty endpoints propagate
        trap_inexact=False,
        trap_invalid=False,
        trap_erange=False,
        trap_divzero=False,
        round=gmp_rm[rm],
    )


def mpfr(x, prec, rm=RM.RNE):
    """Converts `x` (int, float, str, or mpfr) to an mpfr with `prec` bits,
    rounding in the direction `rm`."""
    if isinstance(x, bool):
        raise ValueError('expected a number, got a boolean: {}'.format(repr(x)))
    with _context(prec, rm):
        return gmp.mpfr(x)


def compute(op, *args, prec=53, rm=RM.RNE):
    """Compute op(*args) on mpfr endpoints with `prec` bits of precision,
    rounding in the direction `rm`. Does not trap: sqrt(-1) and friends
    give the MPFR answer."""
    # gmpy2 really doesn't like it when you pass nan as an argument
    for arg in args:
        if gmp.is_nan(arg):
            return gmp.nan()
    with _context(prec, rm):
        return op(*args)


def mul(a, b, prec=53, rm=RM.RNE):
    """Endpoint product where 0 * inf is 0, since endpoints bound real numbers."""
    if is_zero(a) and gmp.is_infinite(b) or gmp.is_infinite(a) and is_zero(b):
        return gmp.zero()
    return compute(gmp.mul, a, b, prec=prec, rm=rm)


def div(a, b, prec=53, rm=RM.RNE):
    return compute(gmp.div, a, b, prec=prec, rm=rm)


def inf(negative=False):
    return gmp.inf(-1 if negative else 1)


def zero(negative=False):
    return gmp.zero(-1 if negative else 1)


def nan():
    return gmp.nan()


def is_nan(x) -> bool:
    return gmp.is_nan(x)


def is_zero(x) -> bool:
    """True for both +0 and -0."""
    return gmp.is_zero(x)


def is_integer(x) -> bool:
    return gmp.is_integer(x)


def floor(x):
    return gmp.floor(x)
