"""Rejects PINs containing the full run of odd or even digits."""
from ..core.base_rule import BaseRule
from ..core.matchers import has_odd_or_even_series
from ..core.models import RuleConfiguration, ViolationKind


class OddEvenSeriesRule(BaseRule):
    """Rejects PINs that contain ``13579`` or ``02468``."""

    name = "OddEvenSeries"
    kind = ViolationKind.ODD_EVEN_SEQUENCE
    description = "PIN must not contain 13579 or 02468."

    @classmethod
    def is_enabled(cls, rules: RuleConfiguration) -> bool:
        return rules.no_even_or_odd_series_of_numbers

    def _is_violated(self, pin: str) -> bool:
        return has_odd_or_even_series(pin)
