"""
Unit analysis result model.

This module defines the UnitAnalysisResult class, which holds the
references extracted from a single unit file along with any scan warnings.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from unitref_analyzer.models.reference import UnitReference
from unitref_analyzer.models.relationship import Relationship
from unitref_analyzer.utils.warnings import ScanWarning


@dataclass
class UnitAnalysisResult:
    """References extracted from one unit file.

    Attributes:
        path: Path of the analyzed file, or None for in-memory text.
        references: References in emission order (duplicates kept).
        warnings: Warnings collected while scanning the file.

    Example:
        >>> result = analyzer.analyze_text("[Unit]\\nAfter=a.service b.service")
        >>> [ref.unit_name for ref in result.references]
        ['a.serviceb.service']
    """

    path: Optional[str] = None
    references: list[UnitReference] = field(default_factory=list)
    warnings: list[ScanWarning] = field(default_factory=list)

    @property
    def unit_name(self) -> Optional[str]:
        """Unit name of the analyzed file (its basename), if known."""
        if self.path is None:
            return None
        return self.path.replace("\\", "/").rsplit("/", 1)[-1]

    def get_by_relationship(
        self, relationship: Relationship
    ) -> list[UnitReference]:
        """Get references emitted under a relationship, in order."""
        return [
            ref for ref in self.references if ref.relationship == relationship
        ]

    def referenced_units(self) -> list[str]:
        """Get referenced unit names in first-seen order, without repeats."""
        return list(dict.fromkeys(ref.unit_name for ref in self.references))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (for serialization)."""
        return {
            "path": self.path,
            "references": [ref.to_dict() for ref in self.references],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
