"""CLI argument parsing and option resolution for ccwc."""

import argparse
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .errors import ArgumentError

VERSION = "1.0.0"

STDIN_PATH = "-"


@dataclass(frozen=True)
class FileSource:
    """Input read from a named file."""

    path: str

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("File source path must not be empty")

    @property
    def display_name(self) -> str:
        return self.path

    @property
    def output_name(self) -> Optional[str]:
        return self.path


@dataclass(frozen=True)
class StdinSource:
    """Input read from standard input.

    ``name`` is the operand that selected stdin, such as ``-``; it is
    printed after the counts. Implicit stdin has no name.
    """

    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return "standard input"

    @property
    def output_name(self) -> Optional[str]:
        return self.name


Source = Union[FileSource, StdinSource]


@dataclass(frozen=True)
class OptionSet:
    """Counting options parsed from CLI arguments.

    Flags are independent; any combination is accepted here and resolved
    into output fields by the formatter.
    """

    count_bytes: bool = False
    count_lines: bool = False
    count_words: bool = False
    count_chars: bool = False
    source: Source = field(default_factory=StdinSource)

    def __post_init__(self) -> None:
        """Validate the input source after initialization."""
        if not isinstance(self.source, (FileSource, StdinSource)):
            raise ValueError(
                f"Invalid input source: {self.source!r}. "
                "Expected FileSource or StdinSource"
            )

    @property
    def is_default_mode(self) -> bool:
        """True when no counting flag was requested explicitly."""
        return not (
            self.count_bytes or self.count_lines or self.count_words or self.count_chars
        )

    @property
    def reads_stdin(self) -> bool:
        return isinstance(self.source, StdinSource)

    @classmethod
    def from_flags(
        cls,
        count_bytes: bool = False,
        count_lines: bool = False,
        count_words: bool = False,
        count_chars: bool = False,
        filename: Optional[str] = None,
    ) -> "OptionSet":
        """Build an OptionSet, mapping a missing filename or ``-`` to stdin.

        Args:
            count_bytes: Report the byte count
            count_lines: Report the newline count
            count_words: Report the word count
            count_chars: Report the character count
            filename: File to read, or None for standard input

        Returns:
            Frozen OptionSet for the requested counts and source
        """
        if filename is None:
            source: Source = StdinSource()
        elif filename == STDIN_PATH:
            source = StdinSource(name=STDIN_PATH)
        else:
            source = FileSource(filename)

        return cls(
            count_bytes=count_bytes,
            count_lines=count_lines,
            count_words=count_words,
            count_chars=count_chars,
            source=source,
        )


class CLIArgumentParser:
    """Handles CLI argument parsing and validation."""

    def __init__(self) -> None:
        """Initialize the argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create and configure the argument parser."""
        parser = argparse.ArgumentParser(
            prog="ccwc",
            description="Print newline, word, and byte counts for a file",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
With no FILE, or when FILE is -, read standard input.
With no options, print the line, word and byte counts.

Examples:
  ccwc test.txt
  ccwc -l test.txt
  cat test.txt | ccwc -m
            """.strip(),
        )

        parser.add_argument(
            "-c", "--bytes", action="store_true", help="print the byte counts"
        )
        parser.add_argument(
            "-l", "--lines", action="store_true", help="print the newline counts"
        )
        parser.add_argument(
            "-w", "--words", action="store_true", help="print the word counts"
        )
        parser.add_argument(
            "-m",
            "--chars",
            action="store_true",
            help="print the character counts (ignored when -c is given)",
        )
        parser.add_argument(
            "--version", action="version", version=f"%(prog)s {VERSION}"
        )
        parser.add_argument(
            "files",
            nargs="*",
            metavar="FILE",
            help="file to examine (default: standard input)",
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> OptionSet:
        """Parse command line arguments into an OptionSet.

        Args:
            args: Command line arguments (defaults to sys.argv[1:])

        Returns:
            Parsed and validated options

        Raises:
            SystemExit: On argument parsing errors or validation failures
        """
        if args is None:
            args = sys.argv[1:]

        parsed_args = self.parser.parse_args(args)
        try:
            return self._build_options(parsed_args)
        except (ArgumentError, ValueError) as e:
            self.parser.error(str(e))

    def _build_options(self, args: argparse.Namespace) -> OptionSet:
        """Build an OptionSet from parsed arguments."""
        if len(args.files) > 1:
            raise ArgumentError(
                f"Multiple filenames not supported: {', '.join(args.files)}"
            )

        filename = args.files[0] if args.files else None

        return OptionSet.from_flags(
            count_bytes=args.bytes,
            count_lines=args.lines,
            count_words=args.words,
            count_chars=args.chars,
            filename=filename,
        )


def parse_cli_args(args: Optional[List[str]] = None) -> OptionSet:
    """Parse CLI arguments and return options.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Parsed and validated options

    Raises:
        SystemExit: On argument parsing errors or validation failures
    """
    parser = CLIArgumentParser()
    return parser.parse_args(args)
