"""
AST Tree wrapper for Tree-sitter
"""

from collections.abc import Iterator

from tree_sitter import Node as TSNode
from tree_sitter import Tree as TSTree

from codegraph_lint.errors import SourceParseError, UnsupportedLanguageError
from codegraph_lint.parsing.parser_registry import get_registry
from codegraph_lint.parsing.source_file import SourceFile
from codegraph_lint.types.match import Span


class AstTree:
    """
    Wrapper for Tree-sitter AST.

    Provides traversal and location helpers for the linter.
    """

    def __init__(self, source: SourceFile, tree: TSTree):
        """
        Initialize AST tree.

        Args:
            source: Source file
            tree: Tree-sitter tree
        """
        self.source = source
        self.tree = tree
        self._root = tree.root_node

    @classmethod
    def parse(cls, source: SourceFile) -> "AstTree":
        """
        Parse source file into AST.

        Args:
            source: Source file to parse

        Returns:
            AstTree instance

        Raises:
            UnsupportedLanguageError: If language not supported
            SourceParseError: If parsing fails
        """
        parser = get_registry().get_parser(source.language)

        if parser is None:
            raise UnsupportedLanguageError(f"Language not supported: {source.language}", path=source.file_path)

        tree = parser.parse(source.content.encode(source.encoding))

        if tree is None:
            raise SourceParseError(f"Failed to parse file: {source.file_path}", path=source.file_path)

        return cls(source, tree)

    @property
    def root(self) -> TSNode:
        """Get root node"""
        return self._root

    def walk(self, node: TSNode | None = None) -> Iterator[TSNode]:
        """
        Walk AST in depth-first pre-order.

        Iterative, so deeply nested code cannot overflow the Python stack.

        Args:
            node: Starting node (defaults to root)

        Yields:
            Nodes in DFS order
        """
        stack = [node if node is not None else self._root]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def get_span(self, node: TSNode) -> Span:
        """
        Convert Tree-sitter node to Span.

        Args:
            node: Tree-sitter node

        Returns:
            Span (1-indexed lines, 0-indexed columns)
        """
        # Tree-sitter uses 0-indexed lines
        return Span(
            start_line=node.start_point[0] + 1,
            start_col=node.start_point[1],
            end_line=node.end_point[0] + 1,
            end_col=node.end_point[1],
        )

    def get_errors(self) -> list[TSNode]:
        """
        Get all error and missing nodes.

        Returns:
            List of error nodes
        """
        if not self._root.has_error:
            return []
        return [node for node in self.walk() if node.type == "ERROR" or node.is_missing]

    def has_error(self) -> bool:
        """Check if AST has any error nodes"""
        return self._root.has_error

    def __repr__(self) -> str:
        return f"AstTree(file={self.source.file_path}, language={self.source.language})"
