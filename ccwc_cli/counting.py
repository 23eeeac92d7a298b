"""Line, word, byte and character counting."""

import re
from dataclasses import dataclass
from typing import Optional

from loguru import logger

NEWLINE = 0x0A

# ASCII space, tab, newline, carriage return, vertical tab, form feed
WORD_PATTERN = re.compile(r"[^ \t\n\r\v\f]+")


@dataclass(frozen=True)
class Statistics:
    """Counts computed from one input.

    Fields left as None were not computed, which only happens on the
    byte-count-only path where the size comes from file metadata.
    """

    byte_count: int
    line_count: Optional[int] = None
    word_count: Optional[int] = None
    char_count: Optional[int] = None

    @classmethod
    def from_size(cls, size: int) -> "Statistics":
        """Statistics carrying only a byte count."""
        return cls(byte_count=size)


def decode_text(content: bytes) -> str:
    """Decode bytes as UTF-8, replacing malformed sequences with U+FFFD.

    Each replaced sequence becomes one replacement character, so counts
    over malformed input are deterministic.
    """
    return content.decode("utf-8", errors="replace")


class StatisticsCounter:
    """Computes the four wc statistics from a byte buffer."""

    def count_bytes(self, content: bytes) -> int:
        return len(content)

    def count_lines(self, content: bytes) -> int:
        """Count newline bytes.

        Text after the last newline is not counted as a line.
        """
        return content.count(NEWLINE)

    def count_words(self, content: bytes) -> int:
        """Count maximal runs of non-whitespace characters.

        Args:
            content: Raw bytes, decoded leniently as UTF-8

        Returns:
            Number of whitespace-delimited tokens, 0 for blank input
        """
        text = decode_text(content)
        return sum(1 for _ in WORD_PATTERN.finditer(text))

    def count_chars(self, content: bytes) -> int:
        """Count Unicode code points in the UTF-8 decoded content.

        Args:
            content: Raw bytes

        Returns:
            Number of code points; each malformed sequence counts as one
        """
        return len(decode_text(content))

    def compute(self, content: bytes) -> Statistics:
        """Compute all four statistics from the same buffer.

        Args:
            content: Raw bytes of the input

        Returns:
            Statistics with every field filled in
        """
        statistics = Statistics(
            byte_count=self.count_bytes(content),
            line_count=self.count_lines(content),
            word_count=self.count_words(content),
            char_count=self.count_chars(content),
        )
        logger.debug(f"Computed {statistics}")
        return statistics


def compute_byte_count(content: bytes) -> int:
    return StatisticsCounter().count_bytes(content)


def compute_line_count(content: bytes) -> int:
    return StatisticsCounter().count_lines(content)


def compute_word_count(content: bytes) -> int:
    return StatisticsCounter().count_words(content)


def compute_char_count(content: bytes) -> int:
    return StatisticsCounter().count_chars(content)


def compute_statistics(content: bytes) -> Statistics:
    """Compute all four statistics from a byte buffer.

    This is a convenience function that creates a StatisticsCounter instance
    and calls the compute method.

    Args:
        content: Raw bytes of the input

    Returns:
        Statistics for the content
    """
    counter = StatisticsCounter()
    return counter.compute(content)
