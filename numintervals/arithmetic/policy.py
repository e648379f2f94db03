"""Exception policy for indeterminate predicates.

Predicates over intervals may be indeterminate. By default the indeterminate
sentinel is returned to the caller. A host that cannot consume three-valued
results can ask for an `IndeterminateException` instead, either for every
predicate (the generic `IndeterminateException` kind) or for specific
predicates (`PRED.iszero`, `PRED.lt`, ...). A setting for a specific predicate
overrides the generic setting.

The policy is process-wide. Configure it once, from one owner, before
evaluating anything; changes take effect for every subsequent evaluation and
are never undone automatically.
"""

import logging
import threading

from ..core.ops import PRED, pred_synonyms
from ..core.utils import IndeterminateException
from .tribool import is_indeterminate


log = logging.getLogger(__name__)


indeterminate_synonyms = {'indeterminateexception', 'indeterminate', 'indeterminateerror', 'all'}


def parse_kind(kind):
    """Normalizes an exception kind: `IndeterminateException`, a `PRED`,
    or a string naming either of them."""
    if kind is IndeterminateException or isinstance(kind, PRED):
        return kind
    elif isinstance(kind, str):
        s = kind.strip()
        if s.lower() in indeterminate_synonyms:
            return IndeterminateException
        elif s in pred_synonyms:
            return pred_synonyms[s]
        elif s.lower() in pred_synonyms:
            return pred_synonyms[s.lower()]
    raise ValueError('unknown exception kind {}'.format(repr(kind)))

def kind_name(kind):
    if isinstance(kind, PRED):
        return kind.name
    else:
        return getattr(kind, '__name__', str(kind))


class ExceptionPolicy(object):
    """Switchboard mapping exception kinds to intercept (raise) or pass through
    (return the sentinel). Reads are lock-free; writes take a lock so that
    concurrent reconfiguration cannot lose updates.
    """

    defaults = {IndeterminateException: False}

    def __init__(self, intercept=None):
        self._lock = threading.Lock()
        self._table = dict(self.defaults)
        if intercept:
            for kind, flag in intercept.items():
                self._table[parse_kind(kind)] = bool(flag)

    def __repr__(self):
        items = ', '.join('{}: {}'.format(kind_name(k), v) for k, v in self._table.items())
        return '{}({{{}}})'.format(type(self).__name__, items)

    def should_intercept(self, kind) -> bool:
        """Should an indeterminate result of `kind` be raised as an error?"""
        kind = parse_kind(kind)
        table = self._table
        if kind in table:
            return table[kind]
        else:
            return table.get(IndeterminateException, False)

    def intercept(self, kind, flag=True):
        kind = parse_kind(kind)
        with self._lock:
            table = dict(self._table)
            table[kind] = bool(flag)
            self._table = table

    def clear(self, kind):
        """Removes a specific setting, so `kind` follows the generic one again."""
        kind = parse_kind(kind)
        if kind is IndeterminateException:
            raise ValueError('the generic kind cannot be cleared, set it to False instead')
        with self._lock:
            table = dict(self._table)
            table.pop(kind, None)
            self._table = table

    def reset(self):
        with self._lock:
            self._table = dict(self.defaults)

    def snapshot(self):
        """Returns a copy of the current settings."""
        return dict(self._table)


_policy = ExceptionPolicy()


def get_policy():
    return _policy

def set_policy(policy):
    """Installs a custom policy. Anything with a `should_intercept(kind)`
    method will do; returns the previous policy."""
    global _policy
    if not callable(getattr(policy, 'should_intercept', None)):
        raise ValueError('policy must provide should_intercept(kind): {}'.format(repr(policy)))
    previous = _policy
    _policy = policy
    log.info('installed exception policy %r', policy)
    return previous

def should_intercept(kind) -> bool:
    return _policy.should_intercept(kind)

def intercept_exception(kind=IndeterminateException, flag=True):
    """Configures whether indeterminate results of `kind` are raised."""
    if not isinstance(_policy, ExceptionPolicy):
        raise ValueError('the installed policy {} is not configurable'.format(repr(_policy)))
    _policy.intercept(kind, flag)
    log.info('exception policy: %s -> %s', kind_name(parse_kind(kind)), 'intercept' if flag else 'pass-through')

def reset_policy():
    """Restores the default policy: nothing is intercepted."""
    global _policy
    if isinstance(_policy, ExceptionPolicy):
        _policy.reset()
    else:
        _policy = ExceptionPolicy()
    log.info('exception policy reset to defaults')

def evaluate_gated(result, kind, *operands):
    """Passes `result` through unchanged, unless it is indeterminate and the
    policy intercepts `kind`, in which case `IndeterminateException` is raised."""
    if is_indeterminate(result) and _policy.should_intercept(kind):
        log.debug('intercepted indeterminate %s on %s', kind_name(kind), ', '.join(str(x) for x in operands))
        raise IndeterminateException(kind, operands)
    return result
