"""Core components for the pypincheck application.

This package contains the building blocks of the validation engine: the
pattern matchers, the data model, the base class for all rules, the
configuration manager, and the engine that runs the rules in order.
"""
