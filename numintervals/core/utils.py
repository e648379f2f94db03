"""Common utilities and the numintervals error hierarchy."""


class NumIntervalError(Exception):
    """Base numintervals error."""


class IndeterminateException(NumIntervalError, ArithmeticError):
    """A predicate could not be decided over an interval, and the exception
    policy asked for an error instead of the indeterminate sentinel.
    `kind` is the predicate code and `operands` are the intervals it was
    evaluated on.
    """

    def __init__(self, kind, operands=()):
        super().__init__(kind, operands)
        self.kind = kind
        self.operands = tuple(operands)

    def __str__(self):
        name = getattr(self.kind, 'name', str(self.kind))
        if self.operands:
            return 'indeterminate: {}({})'.format(name, ', '.join(str(x) for x in self.operands))
        else:
            return 'indeterminate: {}'.format(name)

    def __repr__(self):
        return '{}({}, {})'.format(type(self).__name__, repr(self.kind), repr(self.operands))


class IndeterminateCoercionError(NumIntervalError, TypeError):
    """An indeterminate boolean was used where a plain bool is required."""
