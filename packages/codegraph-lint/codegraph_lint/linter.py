"""
Linter (host)

Parses JavaScript / TypeScript with tree-sitter, walks the tree, and
dispatches each node to the rule listener registered for its type.

Each Linter owns its own rule activation, so separate instances can lint
different files in parallel.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from codegraph_lint.logging import get_logger
from codegraph_lint.parsing.ast_tree import AstTree
from codegraph_lint.parsing.parser_registry import get_registry
from codegraph_lint.parsing.source_file import SourceFile
from codegraph_lint.rules.no_restricted_properties import NoRestrictedPropertiesRule
from codegraph_lint.types.entry import RestrictionEntry
from codegraph_lint.types.match import Diagnostic

logger = get_logger(__name__)


@dataclass
class LintResult:
    """Diagnostics for one source file.

    Attributes:
        source: Linted source
        diagnostics: Reports in traversal order
        is_partial: True if the source had syntax errors (best-effort tree)
    """

    source: SourceFile
    diagnostics: list[Diagnostic] = field(default_factory=list)
    is_partial: bool = False

    @property
    def file_path(self) -> str:
        return self.source.file_path

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)


class Linter:
    """
    Runs no-restricted-properties over source files.

    Usage:
        >>> linter = Linter([RestrictionEntry(object="foo", property="bar")])
        >>> result = linter.lint_source("foo.bar;", "example.js")
        >>> [d.message for d in result.diagnostics]
        ["'foo.bar' is restricted from being used."]
    """

    def __init__(self, entries: Sequence[RestrictionEntry]):
        self.entries = tuple(entries)
        self.listener = NoRestrictedPropertiesRule.create(self.entries)

    def lint_source(self, content: str, file_path: str, language: str | None = None) -> LintResult:
        """
        Lint source text.

        Args:
            content: Source code
            file_path: Path used in diagnostics (and for language detection)
            language: Language override (javascript, typescript, tsx)

        Returns:
            LintResult

        Raises:
            UnsupportedLanguageError: If no language could be determined
        """
        if language is None:
            language = get_registry().detect_language(file_path) or "javascript"
        return self.lint(SourceFile.from_content(file_path, content, language))

    def lint_file(self, path: str | Path, language: str | None = None) -> LintResult:
        """Lint a file on disk."""
        return self.lint(SourceFile.from_file(path, language=language))

    def lint(self, source: SourceFile) -> LintResult:
        """
        Lint a source file.

        No restrictions configured means no parse and no traversal.
        """
        if self.listener.is_noop:
            return LintResult(source=source)

        ast_tree = AstTree.parse(source)
        result = LintResult(source=source, diagnostics=self.lint_tree(ast_tree))

        if ast_tree.has_error():
            error_count = len(ast_tree.get_errors())
            logger.warning(
                f"{source.file_path} has {error_count} syntax error nodes. Results may be incomplete."
            )
            result.is_partial = True

        logger.debug(f"Linted {source.file_path}: {len(result.diagnostics)} diagnostics")
        return result

    def lint_tree(self, ast_tree: AstTree) -> list[Diagnostic]:
        """Run the rule over an already parsed tree."""
        if self.listener.is_noop:
            return []

        node_types = self.listener.node_types
        diagnostics = []

        for node in ast_tree.walk():
            if node.type not in node_types:
                continue

            for report in self.listener.visit(node):
                diagnostics.append(
                    Diagnostic(
                        file_path=ast_tree.source.file_path,
                        span=ast_tree.get_span(report.node),
                        message_id=report.message_id,
                        property_name=report.property_name,
                        message_suffix=report.message,
                        object_name=report.object_name,
                    )
                )

        return diagnostics
