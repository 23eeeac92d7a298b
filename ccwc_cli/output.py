"""Output formatting for the ccwc CLI."""

from enum import Enum
from typing import List

from .cli import OptionSet
from .counting import Statistics

FIELD_WIDTH = 8


class Field(Enum):
    """A numeric column of the output line."""

    LINES = "line_count"
    WORDS = "word_count"
    BYTES = "byte_count"
    CHARS = "char_count"


DEFAULT_FIELDS = [Field.LINES, Field.WORDS, Field.BYTES]


class OutputFormatter:
    """Formats statistics into a wc-style output line."""

    def selected_fields(self, options: OptionSet) -> List[Field]:
        """Resolve which counts are printed, in output order.

        Lines come first, then words, then either bytes or characters.
        Bytes take precedence when both are requested. With no flags the
        line, word and byte counts are printed.

        Args:
            options: Requested counting options

        Returns:
            Fields in the order they appear on the output line
        """
        if options.is_default_mode:
            return list(DEFAULT_FIELDS)

        fields = []
        if options.count_lines:
            fields.append(Field.LINES)
        if options.count_words:
            fields.append(Field.WORDS)
        if options.count_bytes:
            fields.append(Field.BYTES)
        elif options.count_chars:
            fields.append(Field.CHARS)
        return fields

    def format(self, statistics: Statistics, options: OptionSet) -> str:
        """Generate the output line for one input.

        Args:
            statistics: Counts for the input
            options: Requested counting options and input source

        Returns:
            Right-aligned count fields, followed by a space and the source
            name when it has one (a file path, or ``-`` for stdin). No trailing newline.
        """
        parts = []
        for selected in self.selected_fields(options):
            parts.append(self._format_count(getattr(statistics, selected.value)))

        name = options.source.output_name
        if name is not None:
            parts.append(f" {name}")

        return "".join(parts)

    def _format_count(self, count: int) -> str:
        return f"{count:>{FIELD_WIDTH}d}"


def format_statistics(statistics: Statistics, options: OptionSet) -> str:
    """Generate the output line for one input.

    This is a convenience function that creates an OutputFormatter instance
    and calls the format method.

    Args:
        statistics: Counts for the input
        options: Requested counting options and input source

    Returns:
        Formatted output line
    """
    formatter = OutputFormatter()
    return formatter.format(statistics, options)
