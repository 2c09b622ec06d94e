"""Line-oriented output sink for the file-mapper CLI.

Rendered lines go either to an inherited file descriptor (stdout) or to a file
the writer opens itself. Writes stop as soon as an interruption was signalled.
"""

import errno
import os
import types
from pathlib import Path
from typing import Iterable, Optional, Type, Union

from file_mapper.cli.signal_handler import signal_handler


class SafeWriter:
    """Append-only UTF-8 line writer aware of SIGPIPE and SIGINT.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor being written to.
    """

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Initialize the writer.

        Args:
            file: A file descriptor to write to, or a path to create or truncate.

        Raises:
            TypeError: If file is neither an int nor path-like.
            OSError: If the output file cannot be opened.
        """
        self.file = file
        self._closed = False

        if isinstance(file, bool):
            raise TypeError("Expected int, str, or PathLike, got bool")
        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write raw text.

        Raises:
            BrokenPipeError: If an interruption was signalled or the pipe is closed.
            ValueError: If the writer is closed.
            OSError: For any other I/O failure.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            # os.write may write less than requested on pipes
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def write_line(self, line: str) -> None:
        self.write(line + "\n")

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write_line(line)

    def close(self) -> None:
        """Close the file if this writer opened it. Inherited descriptors stay open."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes priority over a close failure
            if exc_type is None:
                raise
