"""
no-restricted-properties

Disallow certain properties on certain objects.

Options (one entry per restriction):
    - {object: "foo", property: "bar"}   foo.bar is restricted
    - {object: "foo"}                    every property of foo is restricted
    - {property: "bar"}                  bar is restricted on every object
    - message                            optional text appended to the report
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from codegraph_lint.index.restriction_index import RestrictionModel
from codegraph_lint.runtime.matcher import AccessMatcher
from codegraph_lint.types.entry import RestrictionEntry
from codegraph_lint.types.match import MESSAGES, RULE_ID, RestrictionReport


@dataclass(frozen=True)
class RuleMeta:
    """Static rule metadata."""

    rule_id: str
    description: str
    type: str
    messages: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RuleListener:
    """Node types a rule listens on and the callback the host invokes for them.

    An empty `node_types` means the host can skip traversal entirely.
    """

    node_types: frozenset[str]
    visit: Callable[[Any], list[RestrictionReport]]

    @property
    def is_noop(self) -> bool:
        return not self.node_types


def _no_reports(node: Any) -> list[RestrictionReport]:
    return []


NOOP_LISTENER = RuleListener(node_types=frozenset(), visit=_no_reports)


class NoRestrictedPropertiesRule:
    """Rule definition: metadata plus `create()` for one activation."""

    meta = RuleMeta(
        rule_id=RULE_ID,
        description="Disallow certain properties on certain objects",
        type="suggestion",
        messages=dict(MESSAGES),
    )

    @staticmethod
    def create(entries: Sequence[RestrictionEntry]) -> RuleListener:
        """
        Activate the rule for one analysis run.

        Builds a fresh RestrictionModel; nothing is shared across activations.

        Args:
            entries: Validated restriction entries

        Returns:
            RuleListener (NOOP_LISTENER when no entries are configured)
        """
        model = RestrictionModel.build(entries)
        if model.is_empty:
            return NOOP_LISTENER

        matcher = AccessMatcher(model)
        return RuleListener(node_types=matcher.node_types, visit=matcher.check)
