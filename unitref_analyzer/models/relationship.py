"""
Relationship model and lookup table.

This module defines the Relationship enum, which names every unit file key
that declares a dependency or ordering link to other units, and the
RelationshipTable class, which resolves key names to relationships.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Relationship(str, Enum):
    """Enumeration of unit relationship keys.

    Each member's value is the exact key name as it appears in a unit file.
    Member order is significant: a relationship's ordinal (its role id) is
    its position in this enum.

    Attributes:
        REQUIRES: Hard requirement, e.g., Requires=network.target
        WANTS: Weak requirement, e.g., Wants=network-online.target
        AFTER: Start ordering, e.g., After=syslog.service
        BEFORE: Reverse start ordering, e.g., Before=shutdown.target
        REQUIRED_BY: Reverse hard requirement from the [Install] section
        WANTED_BY: Reverse weak requirement from the [Install] section,
            e.g., WantedBy=multi-user.target
    """

    REQUIRES = "Requires"
    WANTS = "Wants"
    AFTER = "After"
    BEFORE = "Before"
    REQUIRED_BY = "RequiredBy"
    WANTED_BY = "WantedBy"

    @property
    def display_name(self) -> str:
        """Key name used for matching and for labeling emitted references."""
        return self.value

    @property
    def description(self) -> str:
        """One-line human description of the relationship."""
        return f"referred in {self.value} key"

    @property
    def ordinal(self) -> int:
        """Role id: position of this relationship in the enum."""
        return list(type(self)).index(self)

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all relationship key names.

        Example:
            >>> Relationship.values()
            ['Requires', 'Wants', 'After', 'Before', 'RequiredBy', 'WantedBy']
        """
        return [member.value for member in cls]


@dataclass(frozen=True)
class ReferenceKind:
    """Kind label attached to every emitted unit reference.

    Attributes:
        letter: One-letter kind identifier.
        name: Kind name.
        description: Plural description used in listings.
        reference_only: Whether tags of this kind are only ever references
            (unit files never define the units they mention).
    """

    letter: str
    name: str
    description: str
    reference_only: bool = True


REFERENCE_KIND = ReferenceKind(letter="u", name="unit", description="units")


class RelationshipTable:
    """Immutable lookup from unit file key names to relationships.

    Matching is case-sensitive and exact: "requires" or "After " are not
    relationship keys. The table carries no per-scan state, so a single
    instance can be shared by any number of extractors.

    Usage:
        table = RelationshipTable()
        table.lookup("After")         # Relationship.AFTER
        table.lookup("Description")   # None
    """

    __slots__ = ("_by_name", "_ordered")

    def __init__(self) -> None:
        """Initialize the table from the Relationship enum."""
        ordered = tuple(Relationship)
        object.__setattr__(self, "_ordered", ordered)
        object.__setattr__(
            self, "_by_name", {rel.display_name: rel for rel in ordered}
        )

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("RelationshipTable is immutable")

    def lookup(self, key_name: str) -> Optional[Relationship]:
        """Resolve a key name to its relationship.

        Args:
            key_name: Key exactly as delivered by the scanner.

        Returns:
            The matching Relationship, or None for any other key.
        """
        return self._by_name.get(key_name)

    def all_relationships(self) -> tuple[Relationship, ...]:
        """Return every relationship in stable enum order."""
        return self._ordered

    def names(self) -> tuple[str, ...]:
        """Return every relationship key name in stable enum order."""
        return tuple(rel.display_name for rel in self._ordered)

    def __contains__(self, key_name: object) -> bool:
        return isinstance(key_name, str) and key_name in self._by_name

    def __len__(self) -> int:
        return len(self._ordered)


DEFAULT_RELATIONSHIP_TABLE = RelationshipTable()
