"""Rejects PINs containing three consecutive digits."""
from ..core.base_rule import BaseRule
from ..core.matchers import has_consecutive_series
from ..core.models import RuleConfiguration, ViolationKind


class ConsecutiveSeriesRule(BaseRule):
    """Rejects any ascending or descending run of three digits.

    ``9`` followed by ``0`` does not count as consecutive, so ``890`` and
    ``109`` are allowed.
    """

    name = "ConsecutiveSeries"
    kind = ViolationKind.CONSECUTIVE_SERIES
    description = "PIN must not contain three consecutive digits (e.g. 123 or 321)."

    @classmethod
    def is_enabled(cls, rules: RuleConfiguration) -> bool:
        return rules.no_series_of_numbers

    def _is_violated(self, pin: str) -> bool:
        return has_consecutive_series(pin)
