"""
Base rule class that all PIN checks inherit from.
"""

from abc import ABC, abstractmethod

from .models import RuleConfiguration, ValidationOutcome, ViolationKind


class BaseRule(ABC):
    """Abstract base class for all PIN rules.

    All rules must inherit from this class and implement `is_enabled` and
    `_is_violated`. This gives the engine a single interface for running an
    ordered list of different checks.

    Attributes:
        name (str): The display name of the rule.
        kind (ViolationKind): The identifier reported in the outcome.
        description (str): A brief explanation of what the rule rejects.
    """

    name: str = "UnnamedRule"
    kind: ViolationKind
    description: str = "No description provided"

    def __init__(self, rules: RuleConfiguration) -> None:
        """Initializes the rule with the active configuration.

        Args:
            rules (RuleConfiguration): The configuration the rule reads its
                parameters from.
        """
        self.rules = rules

    @classmethod
    @abstractmethod
    def is_enabled(cls, rules: RuleConfiguration) -> bool:
        """Returns True if this rule should run under the given configuration."""
        raise NotImplementedError("Subclasses must implement is_enabled()")

    @abstractmethod
    def _is_violated(self, pin: str) -> bool:
        """Abstract method for implementing the check itself.

        Subclasses must override this method with a total predicate: it must
        return a boolean for any string and never raise.
        """
        raise NotImplementedError("Subclasses must implement _is_violated()")

    def violation_kind(self, pin: str) -> ViolationKind:
        """Returns the kind reported for this PIN.

        Most rules always report their class-level `kind`; rules that choose
        between several kinds override this.
        """
        return self.kind

    def validate(self, pin: str) -> ValidationOutcome:
        """Evaluates the rule and returns its outcome.

        Args:
            pin (str): The candidate PIN.

        Returns:
            ValidationOutcome: Whether the PIN breaks this rule, and which
            kind of violation it is.
        """
        return ValidationOutcome(is_violated=self._is_violated(pin), kind=self.violation_kind(pin))

    def describe(self) -> str:
        """Returns the description with any configured parameters filled in."""
        return self.description
