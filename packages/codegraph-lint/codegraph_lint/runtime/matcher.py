"""Access Matcher - AccessSite x RestrictionModel -> reports.

Stateless: the same node always yields the same reports for a given model.
"""

from typing import Any

from codegraph_lint.index.restriction_index import RestrictionModel
from codegraph_lint.runtime.extractor import ACCESS_NODE_TYPES, extract_access_site
from codegraph_lint.types.access import AccessSite
from codegraph_lint.types.match import MatchKind, RestrictionReport, message_suffix


class AccessMatcher:
    """Decides which restrictions an access site violates.

    Usage:
        >>> matcher = AccessMatcher(RestrictionModel.build(entries))
        >>> reports = matcher.check(node)
    """

    node_types = ACCESS_NODE_TYPES

    def __init__(self, model: RestrictionModel) -> None:
        self.model = model

    def check(self, node: Any) -> list[RestrictionReport]:
        """Extract the access site from a node and match it.

        Args:
            node: Syntax node of one of `node_types`

        Returns:
            One report per match (empty if the node is not restricted)
        """
        site = extract_access_site(node)
        if site is None:
            return []
        return self.match_site(site)

    def match_site(self, site: AccessSite) -> list[RestrictionReport]:
        """Match an already extracted access site."""
        if not site.is_queryable:
            return []

        reports = []
        for match in self.model.query(site.object_name, site.property_names):
            reports.append(
                RestrictionReport(
                    node=site.node,
                    message_id=match.kind.message_id,
                    property_name=match.property_name,
                    message=message_suffix(match.message),
                    object_name=None if match.kind is MatchKind.GLOBAL_PROPERTY else site.object_name,
                )
            )
        return reports
