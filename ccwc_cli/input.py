"""Input handling for the ccwc CLI."""

import os
import stat
import sys

from loguru import logger

from .cli import FileSource, Source, StdinSource
from .errors import InputSourceError


class InputHandler:
    """Handles reading raw bytes from a file or standard input."""

    def read_all(self, source: Source) -> bytes:
        """Read the whole content of a source.

        Args:
            source: File or standard input to read

        Returns:
            Raw bytes of the source

        Raises:
            InputSourceError: If the source cannot be fully read
        """
        if isinstance(source, FileSource):
            return self._read_file(source.path)
        elif isinstance(source, StdinSource):
            return self._read_stdin()
        else:
            raise TypeError(f"Unsupported input source: {source!r}")

    def file_size(self, path: str) -> int:
        """Return the size of a regular file without reading its content.

        Raises:
            InputSourceError: If the file is missing, not regular or unreadable
        """
        st = self._stat_regular_file(path)
        logger.debug(f"Size of {path} from metadata: {st.st_size} bytes")
        return st.st_size

    def _read_stdin(self) -> bytes:
        """Drain standard input to end of stream.

        Raises:
            InputSourceError: If stdin cannot be read
        """
        try:
            content = sys.stdin.buffer.read()
        except OSError as e:
            raise InputSourceError(
                f"Failed to read from standard input: {e}", source="standard input"
            ) from e

        logger.debug(f"Read {len(content)} bytes from standard input")
        return content

    def _read_file(self, path: str) -> bytes:
        """Read a regular file as bytes.

        Raises:
            InputSourceError: If the file is missing, not regular or unreadable
        """
        self._stat_regular_file(path)
        try:
            with open(path, "rb") as f:
                content = f.read()
        except PermissionError as e:
            raise InputSourceError(
                f"Permission denied reading file: {path}", source=path
            ) from e
        except OSError as e:
            raise InputSourceError(f"Failed to read from {path}: {e}", source=path) from e

        logger.debug(f"Read {len(content)} bytes from {path}")
        return content

    def _stat_regular_file(self, path: str) -> os.stat_result:
        try:
            st = os.stat(path)
        except FileNotFoundError as e:
            raise InputSourceError(f"File not found: {path}", source=path) from e
        except PermissionError as e:
            raise InputSourceError(
                f"Permission denied reading file: {path}", source=path
            ) from e
        except OSError as e:
            raise InputSourceError(f"Failed to read from {path}: {e}", source=path) from e

        if not stat.S_ISREG(st.st_mode):
            raise InputSourceError(f"Not a regular file: {path}", source=path)

        return st


def read_all(source: Source) -> bytes:
    """Read the whole content of a source.

    This is a convenience function that creates an InputHandler instance
    and calls the read_all method.
    """
    handler = InputHandler()
    return handler.read_all(source)


def file_size(path: str) -> int:
    """Return the size of a regular file from its metadata."""
    handler = InputHandler()
    return handler.file_size(path)
