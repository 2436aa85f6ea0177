"""Checks the PIN length against the configured bounds.

This rule runs for every configuration. The kind it reports is chosen by
comparing the length with ``max_length`` only: a PIN shorter than
``max_length`` is reported as too short, anything else as too long, even
when the bound actually broken is ``min_length``. Callers key their messages
on this, so the behaviour is kept until the product owners decide otherwise.

Length is counted in Unicode code points (`len`). Clients that measure in
UTF-16 code units count a character outside the Basic Multilingual Plane,
such as an emoji, as two; for digit PINs the two counts agree.
"""
from ..core.base_rule import BaseRule
from ..core.matchers import is_length_within
from ..core.models import RuleConfiguration, ViolationKind


class LengthRule(BaseRule):
    """Rejects PINs shorter than ``min_length`` or longer than ``max_length``."""

    name = "Length"
    kind = ViolationKind.TOO_SHORT
    description = "PIN must be between {min_length} and {max_length} characters long."

    @classmethod
    def is_enabled(cls, rules: RuleConfiguration) -> bool:
        return True

    def _is_violated(self, pin: str) -> bool:
        return not is_length_within(pin, self.rules.min_length, self.rules.max_length)

    def violation_kind(self, pin: str) -> ViolationKind:
        if len(pin) < self.rules.max_length:
            return ViolationKind.TOO_SHORT
        return ViolationKind.TOO_LONG

    def describe(self) -> str:
        return self.description.format(min_length=self.rules.min_length, max_length=self.rules.max_length)
