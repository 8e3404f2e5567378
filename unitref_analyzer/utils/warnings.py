"""
Warning system for unit file scanning.

This module defines warning collection for the scanning layer, allowing
irregular lines to be skipped without failing while still being reported
to users.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

VALID_LEVELS = ("INFO", "WARNING", "ERROR")


@dataclass
class ScanWarning:
    """Warning or error message produced while scanning a unit file.

    Attributes:
        level: Severity level ("INFO", "WARNING", "ERROR").
        message: Warning or error message text.
        line_number: Optional 1-based line the warning refers to.
        context: Optional context information (e.g., the offending line).

    Example:
        >>> warning = ScanWarning(
        ...     level="WARNING",
        ...     message="Unterminated section header",
        ...     line_number=3,
        ...     context="[Unit",
        ... )
        >>> warning.level
        'WARNING'
    """

    level: str
    message: str
    line_number: Optional[int] = None
    context: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate warning level."""
        if self.level not in VALID_LEVELS:
            raise ValueError(
                f"Invalid warning level: {self.level}. "
                f"Must be one of {list(VALID_LEVELS)}"
            )

    def __str__(self) -> str:
        location = f"line {self.line_number}: " if self.line_number else ""
        return f"{location}{self.message}"

    def to_dict(self) -> dict[str, object]:
        return {
            "level": self.level,
            "message": self.message,
            "line_number": self.line_number,
            "context": self.context,
        }


class WarningCollector:
    """Collects warnings during scanning.

    Attributes:
        warnings: List of ScanWarning objects in the order they were added.

    Example:
        >>> collector = WarningCollector()
        >>> collector.add_skipped_line_warning(3, "[Unit", "unterminated section header")
        >>> len(collector)
        1
    """

    def __init__(self) -> None:
        """Initialize a WarningCollector."""
        self.warnings: list[ScanWarning] = []

    def add(
        self,
        level: str,
        message: str,
        line_number: Optional[int] = None,
        context: Optional[str] = None,
    ) -> None:
        """Add a warning or error message.

        Args:
            level: Severity level ("INFO", "WARNING", "ERROR").
            message: Warning or error message text.
            line_number: Optional 1-based line number.
            context: Optional context information (e.g., the raw line).
        """
        self.warnings.append(
            ScanWarning(
                level=level,
                message=message,
                line_number=line_number,
                context=context,
            )
        )

    def add_skipped_line_warning(
        self, line_number: int, line: str, reason: str
    ) -> None:
        """Record a line the scanner could not classify and skipped."""
        self.add(
            "WARNING",
            f"Skipped line ({reason})",
            line_number=line_number,
            context=line,
        )

    def get_all(self) -> list[ScanWarning]:
        """Get a copy of all collected warnings, in insertion order."""
        return self.warnings.copy()

    def __len__(self) -> int:
        return len(self.warnings)
