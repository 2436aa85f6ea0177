"""The PIN rules, in the order the engine evaluates them.

Each module in this package holds one class inheriting from
`pypincheck.core.base_rule.BaseRule`. `RULES` fixes the evaluation order, so
the outcome list always lists rules in the same sequence.
"""
from .consecutive_series import ConsecutiveSeriesRule
from .cross_pattern import CrossPatternRule
from .length import LengthRule
from .odd_even_series import OddEvenSeriesRule
from .only_digits import OnlyDigitsRule
from .repeated_digits import RepeatedDigitsRule
from .repeated_pairs import RepeatedPairsRule

RULES = (
    CrossPatternRule,
    OddEvenSeriesRule,
    RepeatedDigitsRule,
    RepeatedPairsRule,
    ConsecutiveSeriesRule,
    OnlyDigitsRule,
    LengthRule,
)

__all__ = [
    "RULES",
    "ConsecutiveSeriesRule",
    "CrossPatternRule",
    "LengthRule",
    "OddEvenSeriesRule",
    "OnlyDigitsRule",
    "RepeatedDigitsRule",
    "RepeatedPairsRule",
]
