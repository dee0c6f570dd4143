"""Restriction lookup index."""

from codegraph_lint.index.restriction_index import RestrictionModel

__all__ = ["RestrictionModel"]
