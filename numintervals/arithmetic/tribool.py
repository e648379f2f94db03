"""Three-valued (Kleene) booleans, represented as boolean intervals."""

from ..core.utils import IndeterminateCoercionError


class TriBool(object):
    """A boolean interval [lo, hi] over False < True.
    `[False, False]` and `[True, True]` are definite; `[False, True]` means the
    answer is not known, i.e. it is true for some points of the underlying
    numeric interval and false for others (or we cannot tell which).
    AND, OR and NOT follow Kleene's strong three-valued logic.

    Only three values exist, available as `TRUE`, `FALSE` and `INDETERMINATE`;
    use `TriBool.of()` to get one of them.
    """

    # the internal state is not directly visible: expose it with properties
    _lo: bool = False
    _hi: bool = True

    @property
    def lo(self):
        """The lower bound: True only if the predicate definitely holds."""
        return self._lo

    @property
    def hi(self):
        """The upper bound: False only if the predicate definitely fails."""
        return self._hi

    def __init__(self, lo=False, hi=True):
        if not isinstance(lo, bool):
            raise ValueError('expected a boolean: lo={}'.format(repr(lo)))
        if not isinstance(hi, bool):
            raise ValueError('expected a boolean: hi={}'.format(repr(hi)))
        # check bounds
        if lo and not hi:
            raise ValueError('invalid boolean interval: lo={}, hi={}'.format(lo, hi))
        self._lo = lo
        self._hi = hi

    @classmethod
    def of(cls, x):
        """Returns the TriBool for `x`: a bool, None (indeterminate), or a TriBool."""
        if isinstance(x, TriBool):
            return x
        elif x is None:
            return INDETERMINATE
        elif isinstance(x, bool):
            return TRUE if x else FALSE
        else:
            raise ValueError('expected a boolean or None: {}'.format(repr(x)))

    def __repr__(self):
        if self.is_definite():
            return 'TriBool({})'.format(repr(self._lo))
        else:
            return 'TriBool(indeterminate)'

    def __str__(self):
        if self.is_definite():
            return str(self._lo)
        else:
            return 'indeterminate'

    # coercion is an explicit decision for the caller

    def is_definite(self) -> bool:
        return self._lo == self._hi

    def is_indeterminate(self) -> bool:
        return self._lo != self._hi

    def bool_or_none(self):
        """Returns the boolean representation of this value if
        both endpoints agree, else returns None."""
        return self._lo if self._lo == self._hi else None

    def as_bool(self, default):
        """Returns the boolean representation of this value, or `default`
        if it is indeterminate."""
        if self._lo == self._hi:
            return self._lo
        else:
            return bool(default)

    def __bool__(self):
        if self._lo == self._hi:
            return self._lo
        raise IndeterminateCoercionError(
            'cannot convert an indeterminate boolean to bool; use as_bool() or bool_or_none()')

    def __eq__(self, other):
        if isinstance(other, TriBool):
            return self._lo == other._lo and self._hi == other._hi
        elif isinstance(other, bool):
            return self._lo == self._hi == other
        else:
            return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        # definite values compare equal to their bool, so they hash like it
        if self._lo == self._hi:
            return hash(self._lo)
        return hash((self._lo, self._hi))

    # Kleene logic

    def neg(self):
        """Applies boolean NOT to this value."""
        return TriBool.of_bounds(not self._hi, not self._lo)

    def conjoin(self, other):
        """Applies boolean AND to this value and another and returns the result."""
        other = TriBool.of(other)
        return TriBool.of_bounds(self._lo and other._lo, self._hi and other._hi)

    def disjoin(self, other):
        """Applies boolean OR to this value and another and returns the result."""
        other = TriBool.of(other)
        return TriBool.of_bounds(self._lo or other._lo, self._hi or other._hi)

    def exclusive(self, other):
        """Applies boolean XOR; definite only if both operands are."""
        other = TriBool.of(other)
        if self.is_definite() and other.is_definite():
            return TriBool.of(self._lo != other._lo)
        else:
            return INDETERMINATE

    def union(self, other):
        """Returns the smallest TriBool containing both values."""
        other = TriBool.of(other)
        return TriBool.of_bounds(self._lo and other._lo, self._hi or other._hi)

    @staticmethod
    def of_bounds(lo, hi):
        if lo:
            return TRUE
        elif hi:
            return INDETERMINATE
        else:
            return FALSE

    def __invert__(self):
        return self.neg()

    def __and__(self, other):
        try:
            return self.conjoin(other)
        except ValueError:
            return NotImplemented

    __rand__ = __and__

    def __or__(self, other):
        try:
            return self.disjoin(other)
        except ValueError:
            return NotImplemented

    __ror__ = __or__

    def __xor__(self, other):
        try:
            return self.exclusive(other)
        except ValueError:
            return NotImplemented

    __rxor__ = __xor__


TRUE = TriBool(True, True)
FALSE = TriBool(False, False)
INDETERMINATE = TriBool(False, True)


def and_(*args):
    """Kleene AND of any number of TriBools (or bools)."""
    result = TRUE
    for x in args:
        result = result.conjoin(x)
    return result

def or_(*args):
    """Kleene OR of any number of TriBools (or bools)."""
    result = FALSE
    for x in args:
        result = result.disjoin(x)
    return result

def not_(x):
    return TriBool.of(x).neg()

def is_indeterminate(x) -> bool:
    """Is `x` the indeterminate sentinel? Plain values are never indeterminate."""
    return isinstance(x, TriBool) and x.is_indeterminate()
