"""Restriction config loading."""

from codegraph_lint.registry.loader import CONFIG_KEY, load_restrictions_yaml, parse_restrictions

__all__ = ["load_restrictions_yaml", "parse_restrictions", "CONFIG_KEY"]
