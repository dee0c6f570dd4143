"""Lint rules."""

from codegraph_lint.rules.no_restricted_properties import (
    NOOP_LISTENER,
    NoRestrictedPropertiesRule,
    RuleListener,
    RuleMeta,
)

__all__ = [
    "NoRestrictedPropertiesRule",
    "RuleListener",
    "RuleMeta",
    "NOOP_LISTENER",
]
