"""Runs the PIN rules and collects their outcomes.

The engine:
1.  Instantiates every rule in `pypincheck.rules.RULES` that the
    configuration enables (the length rule is always enabled).
2.  Evaluates each of them against the PIN, in order, without stopping at
    the first violation.
3.  Returns one `ValidationOutcome` per evaluated rule, so the caller gets a
    complete diagnostic in a single pass.

The engine is a pure function: it holds no state between calls and never
raises for any string input.
"""

import logging
from typing import Iterable, List

from .base_rule import BaseRule
from .models import RuleConfiguration, ValidationOutcome
from .. import rules as rules_package

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


def enabled_rules(rules: RuleConfiguration) -> List[BaseRule]:
    """Instantiates the rules enabled by a configuration, in evaluation order.

    Args:
        rules (RuleConfiguration): The active rule configuration.

    Returns:
        List[BaseRule]: One rule instance per enabled check.
    """
    return [rule_cls(rules) for rule_cls in rules_package.RULES if rule_cls.is_enabled(rules)]


def validate(pin: str, rules: RuleConfiguration) -> List[ValidationOutcome]:
    """Validates a candidate PIN against every enabled rule.

    Args:
        pin (str): The candidate PIN. It is not pre-validated and may contain
            any characters.
        rules (RuleConfiguration): The active rule configuration.

    Returns:
        List[ValidationOutcome]: One outcome per enabled rule, in the fixed
        evaluation order, with the length outcome always last.
    """
    outcomes = []
    for rule in enabled_rules(rules):
        outcome = rule.validate(pin)
        # The PIN itself is never logged.
        logger.debug(f"Rule {rule.name} on PIN of length {len(pin)}: violated={outcome.is_violated}")
        outcomes.append(outcome)
    return outcomes


def violations(outcomes: Iterable[ValidationOutcome]) -> List[ValidationOutcome]:
    """Returns only the violated outcomes."""
    return [outcome for outcome in outcomes if outcome.is_violated]


def is_acceptable(outcomes: Iterable[ValidationOutcome]) -> bool:
    """Returns True if no outcome is violated."""
    return not violations(outcomes)
