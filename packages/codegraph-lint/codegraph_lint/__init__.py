"""
CodeGraph Lint

no-restricted-properties for JavaScript / TypeScript: flags reads and
writes of configured `object.property` patterns, including accesses
through object destructuring.

Quick Start:
    >>> from codegraph_lint import Linter, RestrictionEntry
    >>> linter = Linter([RestrictionEntry(object="foo", property="bar", message="Use baz instead.")])
    >>> result = linter.lint_source("foo.bar;", "example.js")
    >>> result.diagnostics[0].message
    "'foo.bar' is restricted from being used. Use baz instead."
"""

__version__ = "0.1.0"

from codegraph_lint.errors import (
    ConfigLoadError,
    ConfigurationError,
    LintError,
    SchemaValidationError,
    SourceParseError,
    UnsupportedLanguageError,
)
from codegraph_lint.index.restriction_index import RestrictionModel
from codegraph_lint.linter import Linter, LintResult
from codegraph_lint.registry.loader import load_restrictions_yaml, parse_restrictions
from codegraph_lint.rules.no_restricted_properties import NoRestrictedPropertiesRule, RuleListener
from codegraph_lint.runtime.extractor import extract_access_site
from codegraph_lint.runtime.matcher import AccessMatcher
from codegraph_lint.types import (
    UNKNOWN_PROPERTY,
    AccessSite,
    Diagnostic,
    MatchKind,
    RestrictionEntry,
    RestrictionMatch,
    RestrictionReport,
    Span,
)

__all__ = [
    "__version__",
    # Core
    "RestrictionEntry",
    "RestrictionModel",
    "AccessSite",
    "UNKNOWN_PROPERTY",
    "AccessMatcher",
    "extract_access_site",
    "MatchKind",
    "RestrictionMatch",
    "RestrictionReport",
    # Rule / host
    "NoRestrictedPropertiesRule",
    "RuleListener",
    "Linter",
    "LintResult",
    "Diagnostic",
    "Span",
    "load_restrictions_yaml",
    "parse_restrictions",
    # Errors
    "LintError",
    "ConfigurationError",
    "ConfigLoadError",
    "SchemaValidationError",
    "SourceParseError",
    "UnsupportedLanguageError",
]
