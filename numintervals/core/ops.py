"""Standard predicate and rounding codes, shared by the interval arithmetic."""

from enum import IntEnum, unique

class RM(IntEnum):
    ROUND_NEAREST_EVEN = 0
    RNE = 0
    ROUND_UP = 2
    RTP = 2
    ROUND_DOWN = 3
    RTN = 3

@unique
class PRED(IntEnum):
    eq = 0
    ne = 1
    lt = 2
    le = 3
    gt = 4
    ge = 5
    iszero = 6
    isone = 7
    isinteger = 8
    ispositive = 9
    isnegative = 10
    sign = 11


binary_preds = {PRED.eq, PRED.ne, PRED.lt, PRED.le, PRED.gt, PRED.ge}
unary_preds = set(PRED) - binary_preds

eq_synonyms = {'eq', '==', '=', 'equal', 'isequal'}
ne_synonyms = {'ne', '!=', 'neq', 'notequal'}
lt_synonyms = {'lt', '<', 'less', 'isless'}
le_synonyms = {'le', '<=', 'lte', 'lessequal'}
gt_synonyms = {'gt', '>', 'greater', 'isgreater'}
ge_synonyms = {'ge', '>=', 'gte', 'greaterequal'}

pred_synonyms = {}
pred_synonyms.update((k, PRED.eq) for k in eq_synonyms)
pred_synonyms.update((k, PRED.ne) for k in ne_synonyms)
pred_synonyms.update((k, PRED.lt) for k in lt_synonyms)
pred_synonyms.update((k, PRED.le) for k in le_synonyms)
pred_synonyms.update((k, PRED.gt) for k in gt_synonyms)
pred_synonyms.update((k, PRED.ge) for k in ge_synonyms)
pred_synonyms.update((p.name, p) for p in unary_preds)
