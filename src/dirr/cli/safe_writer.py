"""Safe output writing utilities for the dirr CLI.

Tree output is often piped into tools like ``head`` that close the pipe early.
SafeWriter turns that condition into a plain BrokenPipeError the CLI can turn
into an exit code.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union


class SafeWriter:
    """Writes text to a file descriptor or a file path.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
    """

    def __init__(self, file: Union[int, Path, str]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path to create and write to.

        Raises:
            TypeError: If ``file`` is neither an int nor path-like.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write ``data`` encoded as UTF-8.

        Raises:
            BrokenPipeError: If the reading end of the pipe has been closed.
            OSError: If any other I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        payload = data.encode("utf-8")
        try:
            # os.write may write only part of the buffer
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def write_line(self, line: str) -> None:
        self.write(line + "\n")

    def close(self) -> None:
        """Close the file if it was opened by this writer.

        The writer is marked closed even if closing fails with a broken pipe.
        """
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
            # An exception from the with block takes priority
            if exc_type is None:
                raise
