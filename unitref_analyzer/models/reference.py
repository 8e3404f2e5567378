"""
Unit reference model.

This module defines the UnitReference class, the single output entity of
reference extraction: one referenced unit name paired with the
relationship under which the scanned file mentions it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from unitref_analyzer.models.relationship import Relationship


@dataclass(frozen=True)
class UnitReference:
    """A reference from the scanned unit file to another unit.

    UnitReference has no identity beyond its two fields. Two references
    with the same name and relationship compare equal; extraction still
    emits both, leaving any deduplication to the consumer.

    Attributes:
        unit_name: Referenced unit name, e.g., "network.target".
        relationship: Relationship key the name appeared under.

    Example:
        >>> ref = UnitReference("network.target", Relationship.REQUIRES)
        >>> ref.to_dict()
        {'unit_name': 'network.target', 'relationship': 'Requires'}
    """

    unit_name: str
    relationship: Relationship

    def to_dict(self) -> dict[str, Any]:
        """Serialize the UnitReference to a dictionary."""
        return {
            "unit_name": self.unit_name,
            "relationship": self.relationship.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UnitReference:
        """Deserialize a UnitReference from a dictionary.

        Args:
            data: Dictionary with "unit_name" and "relationship" fields.

        Returns:
            A new UnitReference.

        Raises:
            KeyError: If a required key is missing.
            ValueError: If the relationship name is not recognized.
        """
        return cls(
            unit_name=data["unit_name"],
            relationship=Relationship(data["relationship"]),
        )

    def __str__(self) -> str:
        return f"{self.relationship.value}={self.unit_name}"
