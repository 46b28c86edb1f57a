"""
Error types for PageGen parsing, configuration and generation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class PagegenError(Exception):
    """Base exception for all PageGen errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class StructuralError(PagegenError):
    """
    Raised when a page model file is structurally malformed.

    Examples:
    - Missing or incomplete header line
    - Close-marker without a matching open-marker
    - Component/section open-marker without a name
    """

    pass


class LocatorUnderspecifiedError(PagegenError):
    """
    Raised when an element line has too few tokens to build an element.

    An element needs at least a name, a By strategy and a locator.
    """

    pass


class ConfigError(PagegenError):
    """
    Raised when the generator cannot be configured.

    Examples:
    - Invalid pagegen.toml
    - Source directory does not exist
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file where error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line showing the error location
    """

    file: Path
    line: int
    column: int = 1
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "LoginPage.pagemodel:10:1"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the offending line with its line number and an error marker."""
        if not self.snippet:
            return ""
        prefix = f"{self.line:4d} | "
        marker_pos = len(prefix) + self.column - 1
        return f"{prefix}{self.snippet}\n{' ' * marker_pos}^^^"


def make_structural_error(
    message: str,
    file: Path,
    line: int,
    snippet: str | None = None,
    column: int = 1,
) -> StructuralError:
    """
    Helper to create a StructuralError with context.

    Args:
        message: Error description
        file: Source file path
        line: Line number (1-indexed)
        snippet: Optional source line
        column: Column the error marker points at (1-indexed)

    Returns:
        StructuralError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return StructuralError(message, context)


def make_locator_error(
    message: str,
    file: Path,
    line: int,
    snippet: str | None = None,
    column: int = 1,
) -> LocatorUnderspecifiedError:
    """Helper to create a LocatorUnderspecifiedError with context."""
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return LocatorUnderspecifiedError(message, context)
