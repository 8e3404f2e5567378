"""
INI triple scanner for unit files.

This module defines the IniScanner class, which turns the text of an
INI-like unit file into section/key/value triples, delivered in file order
either as an iterator or by pushing each triple into a callback.
"""

from typing import Callable, Iterator, Optional

from unitref_analyzer.models.triple import Triple
from unitref_analyzer.utils.warnings import WarningCollector

COMMENT_PREFIXES = ("#", ";")


class IniScanner:
    """Scanner producing Triples from INI-like text.

    Responsibilities:
    1. Track the current [Section] header
    2. Split key=value lines (bare keys become value=None)
    3. Join backslash-continued lines
    4. Skip comments and record unclassifiable lines as warnings

    The scanner never raises for file content. Case is preserved for
    sections, keys and values.

    Usage:
        scanner = IniScanner()
        for triple in scanner.scan("[Unit]\\nAfter=a.service"):
            ...

        # Or push into a callback
        scanner.feed(text, extractor.on_triple)
    """

    def __init__(self, warnings: Optional[WarningCollector] = None) -> None:
        """Initialize an IniScanner.

        Args:
            warnings: Optional collector for skipped-line warnings. A fresh
                collector is created when omitted.
        """
        self.warnings = warnings if warnings is not None else WarningCollector()

    def scan(self, text: str) -> Iterator[Triple]:
        """Yield triples from text in file order.

        Args:
            text: Full unit file contents.

        Yields:
            One Triple per key line.
        """
        section = ""
        for line_number, line in self._logical_lines(text):
            if not line or line.startswith(COMMENT_PREFIXES):
                continue

            if line.startswith("["):
                if not line.endswith("]"):
                    self.warnings.add_skipped_line_warning(
                        line_number, line, "unterminated section header"
                    )
                    continue
                section = line[1:-1].strip()
                continue

            key, sep, value = line.partition("=")
            key = key.strip()
            if not key:
                self.warnings.add_skipped_line_warning(
                    line_number, line, "missing key"
                )
                continue

            yield Triple(
                section=section,
                key=key,
                value=value.strip() if sep else None,
                line_number=line_number,
            )

    def feed(self, text: str, callback: Callable[[Triple], None]) -> int:
        """Push every triple from text into callback.

        Args:
            text: Full unit file contents.
            callback: Called once per triple, in file order.

        Returns:
            Number of triples delivered.
        """
        count = 0
        for triple in self.scan(text):
            callback(triple)
            count += 1
        return count

    @staticmethod
    def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
        """Yield (starting line number, stripped line) with continuations joined."""
        pending: list[str] = []
        start = 0
        for index, raw in enumerate(text.split("\n"), start=1):
            line = raw.strip()
            if line.startswith(COMMENT_PREFIXES):
                # Comments never continue and are dropped inside a continuation.
                if not pending:
                    yield index, line
                continue
            if not pending:
                start = index
            if line.endswith("\\"):
                pending.append(line[:-1].strip())
                continue
            pending.append(line)
            yield start, " ".join(part for part in pending if part)
            pending = []

        if pending:
            yield start, " ".join(part for part in pending if part)
