"""
Parser Registry for Tree-sitter

Manages JavaScript / TypeScript parsers and provides a unified interface.
"""

from pathlib import Path

from tree_sitter import Parser
from tree_sitter_language_pack import get_language

from codegraph_lint.logging import get_logger

logger = get_logger(__name__)

EXTENSION_LANGUAGES = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


class ParserRegistry:
    """
    Registry for language parsers.

    Supports:
    - JavaScript (incl. JSX)
    - TypeScript
    - TSX
    """

    def __init__(self):
        self._parsers: dict[str, Parser] = {}
        self._languages: dict[str, object] = {}
        self._setup_languages()

    def _register_language(self, name: str, aliases: list[str] | None = None) -> None:
        """
        Register a language and its aliases.

        Args:
            name: Language name (e.g., "javascript", "typescript")
            aliases: Optional list of aliases (e.g., ["js"] for javascript)
        """
        try:
            lang = get_language(name)
        except Exception as e:
            logger.warning(f"Failed to load {name} parser: {e}")
            return

        self._languages[name] = lang
        for alias in aliases or []:
            self._languages[alias] = lang

        logger.debug(f"Loaded {name} parser" + (f" with aliases {aliases}" if aliases else ""))

    def _setup_languages(self):
        """Setup Tree-sitter languages"""
        self._register_language("javascript", ["js", "jsx"])
        self._register_language("typescript", ["ts"])
        self._register_language("tsx")

    def get_parser(self, language: str) -> Parser | None:
        """
        Get parser for the specified language.

        Args:
            language: Language name (javascript, typescript, tsx)

        Returns:
            Parser instance or None if language not supported
        """
        language = language.lower()

        if language in self._parsers:
            return self._parsers[language]

        lang = self._languages.get(language)
        if lang is None:
            return None

        parser = Parser(lang)
        self._parsers[language] = parser
        return parser

    def detect_language(self, file_path: str | Path) -> str | None:
        """
        Detect language from file extension.

        Args:
            file_path: Path to source file

        Returns:
            Language name or None if not supported
        """
        return EXTENSION_LANGUAGES.get(Path(file_path).suffix.lower())

    def supports_language(self, language: str) -> bool:
        """Check if language is supported"""
        return language.lower() in self._languages


# Global registry instance
_registry: ParserRegistry | None = None


def get_registry() -> ParserRegistry:
    """Get global parser registry instance"""
    global _registry
    if _registry is None:
        _registry = ParserRegistry()
    return _registry
