"""Rejects PINs where one digit repeats in direct succession.

The minimum run length comes from the ``no_repeated_numbers`` setting: 2 by
default, so ``1123`` is rejected, or an explicit threshold such as 3, which
allows ``1123`` but rejects ``1112``.
"""
from ..core.base_rule import BaseRule
from ..core.matchers import has_repeated_digits
from ..core.models import RuleConfiguration, ViolationKind


class RepeatedDigitsRule(BaseRule):
    """Rejects runs of the same digit at or above the configured length."""

    name = "RepeatedDigits"
    kind = ViolationKind.SAME_DIGIT_REPETITION
    description = "PIN must not repeat the same digit {min_run} or more times in a row."

    @classmethod
    def is_enabled(cls, rules: RuleConfiguration) -> bool:
        return rules.no_repeated_numbers.enabled

    def _is_violated(self, pin: str) -> bool:
        return has_repeated_digits(pin, self.rules.no_repeated_numbers.min_run)

    def describe(self) -> str:
        return self.description.format(min_run=self.rules.no_repeated_numbers.min_run)
