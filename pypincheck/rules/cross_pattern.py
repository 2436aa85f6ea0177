"""Rejects PINs that trace a cross over the keypad.

Sweeping the two diagonals of a phone keypad (for example ``159753``) gives
a PIN that looks random but is one of a handful of shapes an attacker will
try first. Only exact matches are rejected.
"""
from ..core.base_rule import BaseRule
from ..core.matchers import is_cross_pattern
from ..core.models import RuleConfiguration, ViolationKind


class CrossPatternRule(BaseRule):
    """Rejects the eight 6-digit diagonal sweeps of a numeric keypad."""

    name = "CrossPattern"
    kind = ViolationKind.CROSS_PATTERN
    description = "PIN must not trace a cross over the keypad (e.g. 159753)."

    @classmethod
    def is_enabled(cls, rules: RuleConfiguration) -> bool:
        return rules.no_cross_pattern

    def _is_violated(self, pin: str) -> bool:
        return is_cross_pattern(pin)
