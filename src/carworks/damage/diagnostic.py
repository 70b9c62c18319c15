"""
Diagnostic service - Finds parts that need repair.
"""

import logging
from typing import List

from carworks.parts import Part
from carworks.output import ConsoleSink, OutputSink


logger = logging.getLogger(__name__)


class DiagnosticService:
    """Read-only scan over a car's parts."""

    def __init__(self, parts: List[Part], sink: OutputSink | None = None):
        """Initialize diagnostic service.

        Args:
            parts: Parts to scan, in reporting order
            sink: Destination for action log lines. Console if None.
        """
        self._parts = parts
        self._sink = sink or ConsoleSink()

    def diagnose(self) -> List[Part]:
        """Get parts below their repair threshold.

        Returns:
            New list of parts needing repair, in original part order
        """
        self._sink.write("Diagnostic")
        worn = [part for part in self._parts if part.needs_repair]
        logger.debug("Diagnosis found %d of %d parts needing repair", len(worn), len(self._parts))
        return worn
