"""Match results and diagnostics.

RestrictionMatch: what the restriction model returns for one access site.
RestrictionReport: matcher output, still anchored to a raw syntax node.
Diagnostic: host-side report with a resolved source span.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

RULE_ID = "no-restricted-properties"

MESSAGE_RESTRICTED_OBJECT_PROPERTY = "restrictedObjectProperty"
MESSAGE_RESTRICTED_PROPERTY = "restrictedProperty"

MESSAGES: dict[str, str] = {
    MESSAGE_RESTRICTED_OBJECT_PROPERTY: "'{objectName}.{propertyName}' is restricted from being used.{message}",
    MESSAGE_RESTRICTED_PROPERTY: "'{propertyName}' is restricted from being used.{message}",
}


class MatchKind(str, Enum):
    """Which restriction tier produced a match (highest priority first)."""

    SCOPED_OBJECT_PROPERTY = "scoped_object_property"
    GLOBAL_PROPERTY = "global_property"
    GLOBAL_OBJECT = "global_object"

    @property
    def message_id(self) -> str:
        if self is MatchKind.GLOBAL_PROPERTY:
            return MESSAGE_RESTRICTED_PROPERTY
        return MESSAGE_RESTRICTED_OBJECT_PROPERTY


@dataclass(frozen=True, slots=True)
class RestrictionMatch:
    """One matched restriction for one property name."""

    property_name: str
    message: str | None
    kind: MatchKind


def message_suffix(message: str | None) -> str:
    """Configured message as appended to the template (' text' or '')."""
    if message is None or message == "":
        return ""
    return f" {message}"


@dataclass(frozen=True, slots=True)
class RestrictionReport:
    """Report produced by the access matcher.

    `object_name` is only set for restrictedObjectProperty reports.
    """

    node: Any
    message_id: str
    property_name: str
    message: str
    object_name: str | None = None

    @property
    def data(self) -> dict[str, str]:
        """Template placeholders."""
        data = {"propertyName": self.property_name, "message": self.message}
        if self.object_name is not None:
            data["objectName"] = self.object_name
        return data


@dataclass(frozen=True, slots=True)
class Span:
    """
    Source code location (immutable).

    Attributes:
        start_line: Starting line number (1-indexed)
        start_col: Starting column (0-indexed)
        end_line: Ending line number (1-indexed)
        end_col: Ending column (0-indexed)
    """

    start_line: int
    start_col: int
    end_line: int
    end_col: int


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """User-facing lint diagnostic."""

    file_path: str
    span: Span
    message_id: str
    property_name: str
    message_suffix: str
    object_name: str | None = None
    rule_id: str = RULE_ID

    @property
    def message(self) -> str:
        """Rendered message text."""
        return MESSAGES[self.message_id].format(
            objectName=self.object_name,
            propertyName=self.property_name,
            message=self.message_suffix,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file_path,
            "line": self.span.start_line,
            "column": self.span.start_col + 1,
            "end_line": self.span.end_line,
            "end_column": self.span.end_col + 1,
            "rule_id": self.rule_id,
            "message_id": self.message_id,
            "object_name": self.object_name,
            "property_name": self.property_name,
            "message": self.message,
        }
