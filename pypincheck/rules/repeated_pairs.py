"""Rejects PINs where a two-digit unit repeats back-to-back.

``121234`` repeats ``12`` twice in a row and is rejected under the default
threshold of 2; ``12341234`` repeats a four-digit block, which this rule
does not look at.
"""
from ..core.base_rule import BaseRule
from ..core.matchers import has_repeated_pairs
from ..core.models import RuleConfiguration, ViolationKind


class RepeatedPairsRule(BaseRule):
    """Rejects a digit pair repeated consecutively at or above the threshold."""

    name = "RepeatedPairs"
    kind = ViolationKind.DIGIT_PAIR_REPETITION
    description = "PIN must not repeat the same pair of digits {min_run} or more times in a row."

    @classmethod
    def is_enabled(cls, rules: RuleConfiguration) -> bool:
        return rules.no_repetition_of_two_same_numbers.enabled

    def _is_violated(self, pin: str) -> bool:
        return has_repeated_pairs(pin, self.rules.no_repetition_of_two_same_numbers.min_run)

    def describe(self) -> str:
        return self.description.format(min_run=self.rules.no_repetition_of_two_same_numbers.min_run)
