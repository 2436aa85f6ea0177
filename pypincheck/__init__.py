"""pypincheck: PIN strength validation.

This package checks a candidate numeric PIN against a configurable set of
security rules (keypad patterns, repetitions, series, length bounds) and
reports every rule outcome in a single pass.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .core.validator import is_acceptable, validate, violations

__all__ = ["__version__", "__license__", "validate", "violations", "is_acceptable"]
