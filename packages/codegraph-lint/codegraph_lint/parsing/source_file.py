"""
Source File representation
"""

from dataclasses import dataclass
from pathlib import Path

from codegraph_lint.errors import UnsupportedLanguageError


@dataclass
class SourceFile:
    """
    Represents a source code file.

    Attributes:
        file_path: Path as reported in diagnostics
        content: File content as string
        language: Tree-sitter language name (javascript, typescript, tsx)
        encoding: File encoding (default: utf-8)
    """

    file_path: str
    content: str
    language: str
    encoding: str = "utf-8"

    @classmethod
    def from_file(
        cls,
        file_path: str | Path,
        language: str | None = None,
        encoding: str = "utf-8",
    ) -> "SourceFile":
        """
        Load source file from disk.

        Args:
            file_path: Path to file
            language: Language override (auto-detected if None)
            encoding: File encoding

        Returns:
            SourceFile instance

        Raises:
            UnsupportedLanguageError: If the language cannot be detected
        """
        file_path = Path(file_path)

        if language is None:
            from .parser_registry import get_registry

            language = get_registry().detect_language(file_path)
            if language is None:
                raise UnsupportedLanguageError(f"Could not detect language for: {file_path}", path=str(file_path))

        return cls(
            file_path=str(file_path),
            content=file_path.read_text(encoding=encoding),
            language=language,
            encoding=encoding,
        )

    @classmethod
    def from_content(
        cls,
        file_path: str,
        content: str,
        language: str,
        encoding: str = "utf-8",
    ) -> "SourceFile":
        """
        Create source file from content string.

        Args:
            file_path: File path used in diagnostics
            content: Source code content
            language: Programming language
            encoding: File encoding

        Returns:
            SourceFile instance
        """
        return cls(
            file_path=file_path,
            content=content,
            language=language,
            encoding=encoding,
        )

    def get_line(self, line_num: int) -> str:
        """
        Get specific line from source (1-indexed).

        Args:
            line_num: Line number (1-indexed)

        Returns:
            Line content (without newline)
        """
        lines = self.content.splitlines()
        if 1 <= line_num <= len(lines):
            return lines[line_num - 1]
        return ""
