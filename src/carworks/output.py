"""
Output sinks - Destinations for the human-readable action log.

Every car component writes its console text ("Move Forward",
"Damage Tires: 60", ...) through a sink instead of printing directly,
so the same components can drive a terminal or a test buffer.

Provides:
- OutputSink: Base interface
- ConsoleSink: Writes lines to a text stream (stdout by default)
- BufferSink: Collects lines in memory
"""

import logging
import sys
from typing import List, Optional, TextIO


logger = logging.getLogger(__name__)


class OutputSink:
    """Base class for action log destinations."""

    def write(self, message: str) -> None:
        """Emit a single line of output.

        Args:
            message: Line to emit, without trailing newline
        """
        raise NotImplementedError


class ConsoleSink(OutputSink):
    """Writes each line to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        """Initialize console sink.

        Args:
            stream: Target stream. Resolved to sys.stdout at write time if None.
        """
        self._stream = stream

    def write(self, message: str) -> None:
        print(message, file=self._stream or sys.stdout)


class BufferSink(OutputSink):
    """Keeps every written line in memory, in order."""

    def __init__(self):
        self._lines: List[str] = []

    @property
    def lines(self) -> List[str]:
        """Copy of the lines written so far."""
        return list(self._lines)

    def write(self, message: str) -> None:
        self._lines.append(message)

    def clear(self) -> None:
        """Drop all buffered lines."""
        logger.debug("Clearing %d buffered lines", len(self._lines))
        self._lines.clear()
