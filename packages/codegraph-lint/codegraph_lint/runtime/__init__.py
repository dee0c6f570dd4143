"""Runtime: access extraction and matching."""

from codegraph_lint.runtime.extractor import (
    ACCESS_NODE_TYPES,
    DESTRUCTURING_TYPES,
    MEMBER_ACCESS_TYPES,
    extract_access_site,
    pattern_property_names,
)
from codegraph_lint.runtime.matcher import AccessMatcher

__all__ = [
    "AccessMatcher",
    "extract_access_site",
    "pattern_property_names",
    "ACCESS_NODE_TYPES",
    "MEMBER_ACCESS_TYPES",
    "DESTRUCTURING_TYPES",
]
