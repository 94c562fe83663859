"""Adjustment value: a signed delta applied to a production figure, with an optional reason."""
from decimal import Decimal
from typing import Any, Mapping

from prodplan.utilities.validators import AdjustmentInput


class Adjustment:
    __slots__ = ("_amount", "_reason")

    def __init__(self, amount, reason: str = ""):
        data = AdjustmentInput(amount=amount, reason=reason)
        self._amount: Decimal = data.amount
        self._reason: str = data.reason

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def reason(self) -> str:
        return self._reason

    def __eq__(self, other) -> bool:
        if not isinstance(other, Adjustment):
            return NotImplemented
        return (self._amount, self._reason) == (other._amount, other._reason)

    def __hash__(self) -> int:
        return hash((self._amount, self._reason))

    def __str__(self) -> str:
        sign = "+" if self._amount >= 0 else ""
        if self._reason:
            return f"{sign}{self._amount} ({self._reason})"
        return f"{sign}{self._amount}"

    def __repr__(self) -> str:
        return f"Adjustment(amount={self._amount!r}, reason={self._reason!r})"

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Adjustment":
        '''Creates an Adjustment from a mapping such as {"amount": 10}. Ignores unknown keys.'''
        parsed = AdjustmentInput.model_validate(dict(data))
        return Adjustment(parsed.amount, parsed.reason)
