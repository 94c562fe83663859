"""ProductionPlan aggregate: initial production baseline plus an append-only list of adjustments.

The production figure is never stored. It is recomputed from the baseline and
the adjustment history on every read, so the history is the only state that
mutations touch.
"""
import logging
from collections.abc import Mapping
from decimal import Decimal, Inexact, Rounded, localcontext
from typing import Iterable, List, Tuple

from prodplan.domain.Adjustment import Adjustment
from prodplan.utilities.validators import ProductionPlanInput

logger = logging.getLogger(__name__)


def _exact_sum(values: Iterable[Decimal]) -> Decimal:
    '''Sums Decimals without rounding, with precision sized from the operands.'''
    terms = [Decimal(0), *values]
    top = max(v.adjusted() for v in terms)
    bottom = min(v.as_tuple().exponent for v in terms)
    with localcontext() as ctx:
        # one digit of carry per decimal order of magnitude of the term count
        ctx.prec = top - bottom + len(str(len(terms))) + 1
        ctx.traps[Inexact] = True
        ctx.traps[Rounded] = True
        return sum(terms, Decimal(0))


class ProductionPlan:
    def __init__(self, initial_production=None):
        self._initial_production: Decimal = ProductionPlanInput(
            initial_production=initial_production
        ).initial_production
        self._adjustments: List[Adjustment] = []

    @property
    def initial_production(self) -> Decimal:
        return self._initial_production

    @property
    def adjustments(self) -> Tuple[Adjustment, ...]:
        '''Snapshot of the applied adjustments, oldest first.'''
        return tuple(self._adjustments)

    @property
    def adjustments_total(self) -> Decimal:
        '''Sum of all adjustment amounts, excluding the baseline.'''
        return _exact_sum(a.amount for a in self._adjustments)

    @property
    def production(self) -> Decimal:
        '''Baseline plus every adjustment applied so far.'''
        return _exact_sum([self._initial_production, *(a.amount for a in self._adjustments)])

    def apply_adjustment(self, adjustment) -> None:
        '''
        Appends an adjustment to the plan.
        Accepts an Adjustment, a mapping with an "amount" key, or any object with an amount attribute.
        '''
        self._adjustments.append(self._coerce(adjustment))
        logger.debug(f"Applied adjustment {self._adjustments[-1]} ({len(self._adjustments)} total)")

    @staticmethod
    def _coerce(adjustment) -> Adjustment:
        if isinstance(adjustment, Adjustment):
            return adjustment
        if isinstance(adjustment, Mapping):
            return Adjustment.from_dict(adjustment)
        if hasattr(adjustment, "amount"):
            logger.debug(f"Converting {type(adjustment).__name__} to Adjustment")
            return Adjustment(adjustment.amount, getattr(adjustment, "reason", "") or "")
        raise TypeError(f"Expected an adjustment with an amount, got {type(adjustment).__name__}")

    def __str__(self) -> str:
        adjustments_str = ", ".join(str(a) for a in self._adjustments)
        return f"Production: {self.production} (initial {self._initial_production}; adjustments: [{adjustments_str}])"

    def __repr__(self) -> str:
        return self.__str__()
