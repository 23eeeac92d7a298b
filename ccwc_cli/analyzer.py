"""Analysis of one input: read, count, format."""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .cli import FileSource, OptionSet
from .counting import Statistics, StatisticsCounter
from .input import InputHandler
from .output import OutputFormatter


@dataclass(frozen=True)
class AnalysisResult:
    """Statistics for one input and the line to print for them."""

    statistics: Statistics
    output: str


class Analyzer:
    """Runs one analysis for an OptionSet."""

    def __init__(
        self,
        input_handler: Optional[InputHandler] = None,
        counter: Optional[StatisticsCounter] = None,
        formatter: Optional[OutputFormatter] = None,
    ) -> None:
        self.input_handler = input_handler or InputHandler()
        self.counter = counter or StatisticsCounter()
        self.formatter = formatter or OutputFormatter()

    def analyze(self, options: OptionSet) -> AnalysisResult:
        """Read the requested source and produce its output line.

        When only the byte count of a file is needed, the size is taken
        from file metadata and the content is not read. A reported size of
        zero is not trusted, since pseudo-files such as those under /proc
        report 0; the content is read instead. Standard input is always
        drained.

        Args:
            options: Counting options and input source

        Returns:
            AnalysisResult with statistics and formatted output

        Raises:
            InputSourceError: If the source cannot be read
        """
        if self._needs_only_byte_count(options) and isinstance(
            options.source, FileSource
        ):
            size = self.input_handler.file_size(options.source.path)
            if size > 0:
                logger.debug(
                    f"Taking byte count of {options.source.path} from metadata"
                )
                return self._result(Statistics.from_size(size), options)
            logger.debug(f"{options.source.path} reports size 0, reading content")

        content = self.input_handler.read_all(options.source)
        return self.analyze_content(content, options)

    def analyze_content(self, content: bytes, options: OptionSet) -> AnalysisResult:
        """Count and format already loaded content.

        Args:
            content: Raw bytes of the input
            options: Counting options and input source

        Returns:
            AnalysisResult with statistics and formatted output
        """
        return self._result(self.counter.compute(content), options)

    def _result(self, statistics: Statistics, options: OptionSet) -> AnalysisResult:
        return AnalysisResult(
            statistics=statistics,
            output=self.formatter.format(statistics, options),
        )

    def _needs_only_byte_count(self, options: OptionSet) -> bool:
        return options.count_bytes and not (options.count_lines or options.count_words)


def analyze(options: OptionSet) -> AnalysisResult:
    """Read the requested source and produce its output line.

    This is a convenience function that creates an Analyzer instance
    and calls the analyze method.

    Args:
        options: Counting options and input source

    Returns:
        AnalysisResult with statistics and formatted output
    """
    analyzer = Analyzer()
    return analyzer.analyze(options)
