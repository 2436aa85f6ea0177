"""Value types shared by the rules, the engine and the configuration layer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Union

from .matchers import DEFAULT_MIN_RUN


class ViolationKind(str, Enum):
    """Identifies the rule an outcome belongs to.

    The values are the identifiers callers already use to look up their
    user-facing messages, so they are kept stable.
    """

    CROSS_PATTERN = "CrossPatternValidation"
    ODD_EVEN_SEQUENCE = "OddOrEvenSequenceValidation"
    SAME_DIGIT_REPETITION = "NoRepetitionOfTheSameNumbersValidation"
    DIGIT_PAIR_REPETITION = "NoRepetitionOfTheTwoSameNumbersValidation"
    CONSECUTIVE_SERIES = "NoSeriesOfNumbersValidation"
    NON_DIGIT_CHARACTERS = "PinOnlyContainDigitsValidation"
    TOO_SHORT = "PinTooShortValidation"
    TOO_LONG = "PinTooLongValidation"


@dataclass(frozen=True)
class RepetitionRule:
    """A repetition check that is disabled, enabled, or enabled with a threshold.

    Attributes:
        enabled (bool): Whether the check runs at all.
        threshold (Optional[int]): An explicit minimum run length. ``None``
            means the default of 2.
    """

    DEFAULT_THRESHOLD: ClassVar[int] = DEFAULT_MIN_RUN

    enabled: bool = False
    threshold: Optional[int] = None

    @classmethod
    def disabled(cls) -> "RepetitionRule":
        return cls(enabled=False)

    @classmethod
    def default(cls) -> "RepetitionRule":
        return cls(enabled=True)

    @classmethod
    def with_threshold(cls, threshold: int) -> "RepetitionRule":
        return cls(enabled=True, threshold=threshold)

    @classmethod
    def from_value(cls, value: Union[bool, int, None, "RepetitionRule"]) -> "RepetitionRule":
        """Builds a rule from the ``bool | int`` shorthand used in config files.

        ``False``, ``None`` and ``0`` disable the check, ``True`` enables it
        with the default threshold, and any other integer is the threshold.

        Args:
            value: The shorthand value, or an existing RepetitionRule.

        Returns:
            RepetitionRule: The equivalent explicit rule.

        Raises:
            TypeError: If the value is neither a bool nor an int.
        """
        if isinstance(value, RepetitionRule):
            return value
        if value is None or value is False:
            return cls.disabled()
        if value is True:
            return cls.default()
        if isinstance(value, int):
            return cls.with_threshold(value) if value else cls.disabled()
        raise TypeError(f"Expected a bool or an int, got {type(value).__name__}: {value!r}")

    @property
    def min_run(self) -> int:
        return self.DEFAULT_THRESHOLD if self.threshold is None else self.threshold

    def to_value(self) -> Union[bool, int]:
        """Returns the ``bool | int`` shorthand for this rule."""
        if not self.enabled:
            return False
        return True if self.threshold is None else self.threshold


@dataclass(frozen=True)
class RuleConfiguration:
    """The set of enabled checks and their parameters.

    The engine trusts this value as given. Consistency checks such as
    ``min_length <= max_length`` belong to whoever builds it (see
    `pypincheck.core.config.Config.rule_configuration`).
    """

    no_cross_pattern: bool = False
    no_even_or_odd_series_of_numbers: bool = False
    no_repeated_numbers: RepetitionRule = field(default_factory=RepetitionRule.disabled)
    no_repetition_of_two_same_numbers: RepetitionRule = field(default_factory=RepetitionRule.disabled)
    no_series_of_numbers: bool = False
    only_numbers: bool = True
    min_length: int = 6
    max_length: int = 6

    # Older rule files spell this key with an extra "the".
    KEY_ALIASES: ClassVar[Dict[str, str]] = {
        "no_repetition_of_the_two_same_numbers": "no_repetition_of_two_same_numbers",
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RuleConfiguration":
        """Creates a configuration from a plain mapping of rule settings.

        Unknown keys are ignored; missing keys keep their defaults.

        Args:
            data (Mapping[str, Any]): Rule settings keyed by field name, for
                example the ``pin_rules`` table of a TOML file.

        Returns:
            RuleConfiguration: The immutable configuration.
        """
        values: Dict[str, Any] = {}
        for key, value in data.items():
            key = cls.KEY_ALIASES.get(key, key)
            if key not in cls.__dataclass_fields__:
                continue
            if key in ("no_repeated_numbers", "no_repetition_of_two_same_numbers"):
                value = RepetitionRule.from_value(value)
            elif key in ("min_length", "max_length"):
                value = _as_int(key, value)
            else:
                value = _as_flag(key, value)
            values[key] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "no_cross_pattern": self.no_cross_pattern,
            "no_even_or_odd_series_of_numbers": self.no_even_or_odd_series_of_numbers,
            "no_repeated_numbers": self.no_repeated_numbers.to_value(),
            "no_repetition_of_two_same_numbers": self.no_repetition_of_two_same_numbers.to_value(),
            "no_series_of_numbers": self.no_series_of_numbers,
            "only_numbers": self.only_numbers,
            "min_length": self.min_length,
            "max_length": self.max_length,
        }


@dataclass(frozen=True)
class ValidationOutcome:
    """The result of evaluating one enabled rule against a PIN."""

    is_violated: bool
    kind: ViolationKind

    def to_dict(self) -> Dict[str, Any]:
        return {"is_violated": self.is_violated, "kind": self.kind.value}


_TRUE_WORDS = ("true", "1", "yes", "on")
_FALSE_WORDS = ("false", "0", "no", "off")


def _as_flag(key: str, value: Any) -> bool:
    """Reads an on/off setting.

    Raises:
        TypeError: If the value is neither a bool nor a recognized word.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise TypeError(f"{key} must be true or false, got {value!r}")


def _as_int(key: str, value: Any) -> int:
    # bool is an int subclass; True is not a length.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer, got {value!r}")
    return value
