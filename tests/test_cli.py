"""Tests for CLI argument parsing and option sets."""

import pytest

from ccwc_cli.cli import (
    CLIArgumentParser,
    FileSource,
    OptionSet,
    StdinSource,
    parse_cli_args,
)


class TestOptionSet:
    """Test OptionSet dataclass and validation."""

    def test_default_option_set(self):
        """Test an OptionSet with no flags reads stdin in default mode."""
        options = OptionSet()

        assert options.count_bytes is False
        assert options.count_lines is False
        assert options.count_words is False
        assert options.count_chars is False
        assert options.source == StdinSource()
        assert options.is_default_mode is True
        assert options.reads_stdin is True

    @pytest.mark.parametrize(
        "flag", ["count_bytes", "count_lines", "count_words", "count_chars"]
    )
    def test_any_flag_leaves_default_mode(self, flag):
        """Test that setting any single flag disables default mode."""
        options = OptionSet(**{flag: True})
        assert options.is_default_mode is False

    def test_all_flags_accepted(self):
        """Test that all four flags together are valid."""
        options = OptionSet(
            count_bytes=True, count_lines=True, count_words=True, count_chars=True
        )
        assert options.is_default_mode is False

    def test_file_source(self):
        """Test an OptionSet reading a named file."""
        options = OptionSet(count_lines=True, source=FileSource("test.txt"))

        assert options.reads_stdin is False
        assert options.source.path == "test.txt"

    def test_empty_file_path_rejected(self):
        """Test that an empty file path is rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            FileSource("")

    def test_invalid_source_rejected(self):
        """Test that a source must be a FileSource or StdinSource."""
        with pytest.raises(ValueError, match="Invalid input source"):
            OptionSet(source="test.txt")

    def test_option_set_immutable(self):
        """Test that an OptionSet cannot be modified."""
        options = OptionSet()
        with pytest.raises(AttributeError):
            options.count_bytes = True

    def test_from_flags_without_filename(self):
        """Test from_flags maps a missing filename to stdin."""
        options = OptionSet.from_flags(count_words=True)

        assert options.count_words is True
        assert options.source == StdinSource()

    def test_from_flags_dash_is_stdin(self):
        """Test from_flags maps '-' to stdin."""
        options = OptionSet.from_flags(filename="-")

        assert options.reads_stdin is True
        assert options.source.output_name == "-"

    def test_from_flags_with_filename(self):
        """Test from_flags builds a file source."""
        options = OptionSet.from_flags(count_bytes=True, filename="test.txt")
        assert options.source == FileSource("test.txt")

    def test_display_names(self):
        """Test human-readable source names."""
        assert FileSource("data/test.txt").display_name == "data/test.txt"
        assert StdinSource().display_name == "standard input"


class TestCLIArgumentParser:
    """Test CLI argument parsing."""

    def test_no_arguments(self):
        """Test parsing with no arguments reads stdin in default mode."""
        parser = CLIArgumentParser()
        options = parser.parse_args([])

        assert options.is_default_mode is True
        assert options.reads_stdin is True

    def test_filename_only(self):
        """Test a lone filename uses default mode."""
        parser = CLIArgumentParser()
        options = parser.parse_args(["test.txt"])

        assert options.is_default_mode is True
        assert options.source == FileSource("test.txt")

    @pytest.mark.parametrize(
        "flag,attribute",
        [
            ("-c", "count_bytes"),
            ("-l", "count_lines"),
            ("-w", "count_words"),
            ("-m", "count_chars"),
            ("--bytes", "count_bytes"),
            ("--lines", "count_lines"),
            ("--words", "count_words"),
            ("--chars", "count_chars"),
        ],
    )
    def test_single_flag(self, flag, attribute):
        """Test each counting flag sets its option."""
        parser = CLIArgumentParser()
        options = parser.parse_args([flag, "test.txt"])

        assert getattr(options, attribute) is True
        assert options.is_default_mode is False

    def test_combined_flags(self):
        """Test several separate flags."""
        parser = CLIArgumentParser()
        options = parser.parse_args(["-l", "-w", "-c"])

        assert options.count_lines is True
        assert options.count_words is True
        assert options.count_bytes is True
        assert options.count_chars is False
        assert options.reads_stdin is True

    def test_clustered_flags(self):
        """Test flags grouped behind one dash."""
        parser = CLIArgumentParser()
        options = parser.parse_args(["-lw", "test.txt"])

        assert options.count_lines is True
        assert options.count_words is True

    def test_filename_before_flags(self):
        """Test a filename given before the flags."""
        parser = CLIArgumentParser()
        options = parser.parse_args(["test.txt", "-m"])

        assert options.count_chars is True
        assert options.source == FileSource("test.txt")

    def test_dash_reads_stdin(self):
        """Test '-' as the filename means stdin, named '-'."""
        parser = CLIArgumentParser()
        options = parser.parse_args(["-l", "-"])

        assert options.reads_stdin is True
        assert options.source == StdinSource(name="-")

    def test_no_filename_stdin_is_unnamed(self):
        """Test implicit stdin carries no name."""
        parser = CLIArgumentParser()
        options = parser.parse_args(["-l"])

        assert options.source == StdinSource()
        assert options.source.output_name is None

    def test_multiple_filenames_rejected(self, capsys):
        """Test that two filenames are an argument error."""
        parser = CLIArgumentParser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["a.txt", "b.txt"])

        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert "Multiple filenames not supported: a.txt, b.txt" in captured.err

    def test_unknown_option_rejected(self, capsys):
        """Test that an unknown flag is an argument error."""
        parser = CLIArgumentParser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["-x", "test.txt"])

        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert "-x" in captured.err

    def test_empty_filename_rejected(self, capsys):
        """Test that an empty filename is an argument error."""
        parser = CLIArgumentParser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args([""])

        assert exc_info.value.code == 2

    def test_version(self, capsys):
        """Test --version prints the program version."""
        parser = CLIArgumentParser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--version"])

        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert captured.out.startswith("ccwc ")

    def test_parse_cli_args(self):
        """Test the parse_cli_args convenience function."""
        options = parse_cli_args(["-c", "test.txt"])

        assert options.count_bytes is True
        assert options.source == FileSource("test.txt")
