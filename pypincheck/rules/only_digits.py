"""Rejects PINs containing anything other than the digits 0-9."""
from ..core.base_rule import BaseRule
from ..core.matchers import is_digits_only
from ..core.models import RuleConfiguration, ViolationKind


class OnlyDigitsRule(BaseRule):
    """Rejects empty PINs and PINs with non-digit characters."""

    name = "OnlyDigits"
    kind = ViolationKind.NON_DIGIT_CHARACTERS
    description = "PIN must contain only the digits 0-9."

    @classmethod
    def is_enabled(cls, rules: RuleConfiguration) -> bool:
        return rules.only_numbers

    def _is_violated(self, pin: str) -> bool:
        return not is_digits_only(pin)
