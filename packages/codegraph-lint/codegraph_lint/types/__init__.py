"""Domain types for restriction matching."""

from codegraph_lint.types.access import UNKNOWN_PROPERTY, AccessSite, PropertyName, UnknownProperty
from codegraph_lint.types.entry import RestrictionEntry
from codegraph_lint.types.match import (
    MESSAGE_RESTRICTED_OBJECT_PROPERTY,
    MESSAGE_RESTRICTED_PROPERTY,
    MESSAGES,
    RULE_ID,
    Diagnostic,
    MatchKind,
    RestrictionMatch,
    RestrictionReport,
    Span,
    message_suffix,
)

__all__ = [
    "AccessSite",
    "PropertyName",
    "UnknownProperty",
    "UNKNOWN_PROPERTY",
    "RestrictionEntry",
    "MatchKind",
    "RestrictionMatch",
    "RestrictionReport",
    "Diagnostic",
    "Span",
    "message_suffix",
    "MESSAGES",
    "MESSAGE_RESTRICTED_OBJECT_PROPERTY",
    "MESSAGE_RESTRICTED_PROPERTY",
    "RULE_ID",
]
