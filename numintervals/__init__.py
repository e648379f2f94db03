from .core import utils, ops, gmpmath
from .arithmetic import tribool, predicates, policy, interval, recovery

PRED = ops.PRED

NumIntervalError = utils.NumIntervalError
IndeterminateException = utils.IndeterminateException
IndeterminateCoercionError = utils.IndeterminateCoercionError

TriBool = tribool.TriBool
TRUE = tribool.TRUE
FALSE = tribool.FALSE
INDETERMINATE = tribool.INDETERMINATE
and_ = tribool.and_
or_ = tribool.or_
not_ = tribool.not_
is_indeterminate = tribool.is_indeterminate

NumberInterval = interval.NumberInterval
IntervalOrder = interval.IntervalOrder
eq = interval.eq
ne = interval.ne
lt = interval.lt
le = interval.le
gt = interval.gt
ge = interval.ge
iszero = interval.iszero
isone = interval.isone
isinteger = interval.isinteger
ispositive = interval.ispositive
isnegative = interval.isnegative
sign = interval.sign

ExceptionPolicy = policy.ExceptionPolicy
should_intercept = policy.should_intercept
intercept_exception = policy.intercept_exception
reset_policy = policy.reset_policy
get_policy = policy.get_policy
set_policy = policy.set_policy
evaluate_gated = policy.evaluate_gated

Outcome = recovery.Outcome
attempt = recovery.attempt
with_fallback = recovery.with_fallback
