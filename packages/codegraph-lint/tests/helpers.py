"""
Tree-sitter test helpers.

Helper functions for parsing code in tests.
"""

from codegraph_lint.parsing import AstTree, SourceFile


def parse_source(code: str, language: str = "javascript") -> AstTree:
    """
    Parse source text.

    Args:
        code: JavaScript / TypeScript source code
        language: Tree-sitter language name

    Returns:
        AstTree
    """
    return AstTree.parse(SourceFile.from_content("test.js", code, language))


def find_first(tree: AstTree, node_type: str):
    """First node of the given type in DFS order."""
    for node in tree.walk():
        if node.type == node_type:
            return node
    raise AssertionError(f"No {node_type} node in: {tree.source.content!r}")
