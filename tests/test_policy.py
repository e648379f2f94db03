"""Tests for the exception policy gate."""
import logging
import threading

import pytest

from numintervals import (
    PRED,
    TRUE,
    FALSE,
    INDETERMINATE,
    ExceptionPolicy,
    IndeterminateException,
    NumIntervalError,
    evaluate_gated,
    get_policy,
    intercept_exception,
    iszero,
    lt,
    reset_policy,
    set_policy,
    should_intercept,
    sign,
)
from numintervals.arithmetic.policy import parse_kind

from conftest import iv


def test_default_passes_through():
    assert should_intercept(IndeterminateException) is False
    for kind in PRED:
        assert should_intercept(kind) is False


def test_pass_through_is_idempotent():
    x = iv(-1, 1)
    for _ in range(5):
        assert iszero(x) is INDETERMINATE


def test_end_to_end_iszero():
    x = iv(-1, 1)
    assert iszero(x) is INDETERMINATE
    intercept_exception(IndeterminateException)
    with pytest.raises(IndeterminateException) as excinfo:
        iszero(x)
    assert excinfo.value.kind is PRED.iszero
    assert excinfo.value.operands[0] is x
    assert 'iszero' in str(excinfo.value)
    assert '[-1.0, 1.0]' in str(excinfo.value)


def test_intercept_is_idempotent_and_persistent():
    intercept_exception()
    for _ in range(5):
        with pytest.raises(IndeterminateException):
            iv(0, 2) < iv(1, 3)
    assert should_intercept(IndeterminateException)
    reset_policy()
    assert (iv(0, 2) < iv(1, 3)) is INDETERMINATE


def test_definite_results_pass_through_when_intercepting():
    intercept_exception()
    assert iszero(iv(1, 2)) is FALSE
    assert iszero(iv(-0.0, 0.0)) is TRUE
    assert (iv(0, 1) < iv(2, 3)) is TRUE
    assert sign(iv(1, 2)) == 1
    assert sign(iv(0)) == 0


def test_sign_intercepted():
    intercept_exception()
    with pytest.raises(IndeterminateException) as excinfo:
        sign(iv(-1, 1))
    assert excinfo.value.kind is PRED.sign


def test_intercept_single_predicate():
    intercept_exception(PRED.iszero)
    with pytest.raises(IndeterminateException):
        iszero(iv(-1, 1))
    assert lt(iv(0, 2), iv(1, 3)) is INDETERMINATE


def test_specific_setting_overrides_generic():
    intercept_exception()
    intercept_exception(PRED.lt, False)
    assert lt(iv(0, 2), iv(1, 3)) is INDETERMINATE
    with pytest.raises(IndeterminateException):
        iszero(iv(-1, 1))
    get_policy().clear(PRED.lt)
    with pytest.raises(IndeterminateException):
        lt(iv(0, 2), iv(1, 3))


def test_cannot_clear_generic_kind():
    with pytest.raises(ValueError):
        get_policy().clear(IndeterminateException)


def test_turn_interception_back_off():
    intercept_exception()
    intercept_exception(IndeterminateException, False)
    assert iszero(iv(-1, 1)) is INDETERMINATE


def test_string_kinds():
    assert parse_kind('IndeterminateException') is IndeterminateException
    assert parse_kind('indeterminate') is IndeterminateException
    assert parse_kind('iszero') is PRED.iszero
    assert parse_kind('<') is PRED.lt
    assert parse_kind('>=') is PRED.ge
    assert parse_kind(' EQ ') is PRED.eq
    with pytest.raises(ValueError):
        parse_kind('nonsense')
    with pytest.raises(ValueError):
        parse_kind(ValueError)
    intercept_exception('IndeterminateException')
    assert should_intercept(PRED.eq)


def test_evaluate_gated():
    assert evaluate_gated(INDETERMINATE, PRED.eq) is INDETERMINATE
    intercept_exception()
    assert evaluate_gated(TRUE, PRED.eq) is TRUE
    assert evaluate_gated(FALSE, PRED.eq) is FALSE
    assert evaluate_gated(-1, PRED.sign) == -1
    with pytest.raises(IndeterminateException) as excinfo:
        evaluate_gated(INDETERMINATE, PRED.eq, iv(0, 1), iv(0, 1))
    assert len(excinfo.value.operands) == 2


def test_exception_hierarchy():
    e = IndeterminateException(PRED.lt)
    assert isinstance(e, NumIntervalError)
    assert isinstance(e, ArithmeticError)
    assert str(e) == 'indeterminate: lt'
    assert repr(e) == 'IndeterminateException({}, ())'.format(repr(PRED.lt))


def test_policy_object():
    policy = ExceptionPolicy({'iszero': True})
    assert policy.should_intercept(PRED.iszero)
    assert not policy.should_intercept(PRED.eq)
    assert policy.snapshot() == {IndeterminateException: False, PRED.iszero: True}
    policy.reset()
    assert policy.snapshot() == {IndeterminateException: False}
    assert 'iszero' not in repr(policy)


class OrderingOnly(object):
    """A host policy that only refuses indeterminate orderings."""

    def should_intercept(self, kind):
        return parse_kind(kind) in {PRED.lt, PRED.le, PRED.gt, PRED.ge}


def test_custom_policy():
    previous = set_policy(OrderingOnly())
    assert isinstance(previous, ExceptionPolicy)
    assert iszero(iv(-1, 1)) is INDETERMINATE
    with pytest.raises(IndeterminateException):
        iv(0, 2) <= iv(1, 3)
    with pytest.raises(ValueError):
        intercept_exception()
    reset_policy()
    assert isinstance(get_policy(), ExceptionPolicy)
    assert (iv(0, 2) <= iv(1, 3)) is INDETERMINATE


def test_custom_policy_must_decide():
    with pytest.raises(ValueError):
        set_policy(object())


def test_interception_is_logged(caplog):
    intercept_exception()
    with caplog.at_level(logging.DEBUG, logger='numintervals.arithmetic.policy'):
        with pytest.raises(IndeterminateException):
            iszero(iv(-1, 1))
    assert any('intercepted indeterminate iszero' in r.getMessage() for r in caplog.records)


def test_reconfiguration_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger='numintervals.arithmetic.policy'):
        intercept_exception(PRED.eq)
    assert any('eq -> intercept' in r.getMessage() for r in caplog.records)


def test_concurrent_reconfiguration_keeps_every_update():
    kinds = list(PRED)
    barrier = threading.Barrier(len(kinds))

    def configure(kind):
        barrier.wait()
        intercept_exception(kind)

    threads = [threading.Thread(target=configure, args=(k,)) for k in kinds]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    snapshot = get_policy().snapshot()
    assert all(snapshot[k] is True for k in kinds)
    assert snapshot[IndeterminateException] is False
