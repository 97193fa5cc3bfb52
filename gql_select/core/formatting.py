"""Formatting modes for rendered query documents."""

from enum import Enum


class Formatting(Enum):
    """How a query document is laid out."""
    COMPACT = "compact"    # Single line, no optional whitespace
    INDENTED = "indented"  # One field per line, nested levels indented

    @property
    def separator(self) -> str:
        """Optional whitespace emitted after ':' and ',' and before '{'."""
        return " " if self is Formatting.INDENTED else ""

    def indentation(self, level: int, indent_size: int = 2) -> str:
        """Leading whitespace for a line at the given nesting level."""
        if self is Formatting.INDENTED:
            return " " * (level * indent_size)
        return ""
