"""
Standardized Error Handling for codegraph-lint

Hierarchical exception classes with error codes and context.

Only the host layers (config loading, parsing, CLI) raise these.
The restriction model and access matcher never raise: an access they
cannot resolve statically is simply a non-match.
"""

from typing import Any


class LintError(Exception):
    """Base exception for all codegraph-lint errors.

    Includes error code for programmatic handling and context for debugging.

    Example:
        raise LintError(
            code="CONFIG_LOAD_ERROR",
            message="Failed to read config",
            path="rules.yaml",
        )
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def __repr__(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r}, {ctx_str})"


# ==============================================================================
# Configuration Errors
# ==============================================================================


class ConfigurationError(LintError):
    """Error in rule configuration."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="CONFIGURATION_ERROR", message=message, **context)


class ConfigLoadError(ConfigurationError):
    """Config file missing, unreadable or not valid YAML/JSON."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, **context)
        self.code = "CONFIG_LOAD_ERROR"


class SchemaValidationError(ConfigurationError):
    """Restriction entries rejected by schema validation.

    Attributes:
        errors: One dict per rejected entry (index, reason, pydantic errors)
    """

    def __init__(self, message: str, errors: list[dict[str, Any]], **context: Any) -> None:
        super().__init__(message, **context)
        self.code = "SCHEMA_VALIDATION_ERROR"
        self.errors = errors


# ==============================================================================
# Source Errors
# ==============================================================================


class SourceParseError(LintError):
    """Source could not be parsed at all."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="PARSE_ERROR", message=message, **context)


class UnsupportedLanguageError(SourceParseError):
    """No tree-sitter grammar registered for the requested language."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, **context)
        self.code = "UNSUPPORTED_LANGUAGE"


# ==============================================================================
# Exports
# ==============================================================================

__all__ = [
    # Base
    "LintError",
    # Configuration
    "ConfigurationError",
    "ConfigLoadError",
    "SchemaValidationError",
    # Source
    "SourceParseError",
    "UnsupportedLanguageError",
]
