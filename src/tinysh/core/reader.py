"""
Line acquisition from a text stream.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from tinysh.core.exceptions import AllocationError


@dataclass(frozen=True)
class Line:
    """One line of operator input.

    Attributes:
        text: The line without its terminating newline.
        eof: True if end of input terminated the line instead of a newline.
    """

    text: str
    eof: bool = False


class StreamLineReader:
    """Read lines from a text stream such as a piped stdin.

    A line that ends without a newline is returned with its text and
    eof=True; a read at end of stream returns Line("", eof=True).
    """

    def __init__(self, stream: TextIO, output: TextIO | None = None):
        self.stream = stream
        self.output = output

    def __call__(self, prompt: str = "") -> Line:
        if self.output is not None and prompt:
            self.output.write(prompt)
            self.output.flush()

        try:
            raw = self.stream.readline()
        except MemoryError as e:
            raise AllocationError("line buffer") from e

        if raw.endswith("\n"):
            return Line(raw[:-1])
        return Line(raw, eof=True)
