"""
Parsing Layer

Tree-sitter based parsing for JavaScript and TypeScript.

Components:
- parser_registry: Language parser management
- source_file: Source file representation
- ast_tree: AST tree wrapper with traversal helpers
"""

from codegraph_lint.parsing.ast_tree import AstTree
from codegraph_lint.parsing.parser_registry import ParserRegistry, get_registry
from codegraph_lint.parsing.source_file import SourceFile

__all__ = [
    "ParserRegistry",
    "get_registry",
    "SourceFile",
    "AstTree",
]
