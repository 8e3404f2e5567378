"""
Configuration model for unit reference analysis.

This module defines the ExtractorConfig class, which controls whether
references are produced at all and how unit files are read.
"""

from dataclasses import dataclass
from typing import Optional

from unitref_analyzer.exceptions import ConfigurationError
from unitref_analyzer.models.relationship import Relationship


@dataclass
class ExtractorConfig:
    """Configuration settings for unit reference analysis.

    Attributes:
        references_enabled: Feature toggle consulted once per triple. When
            False, extraction emits nothing. Defaults to True.
        encoding: Text encoding used when reading unit files. Defaults to
            "utf-8".
        relationships: Optional set of relationship names to keep in
            analysis results. None keeps every relationship. This filter is
            applied to collected results, never to key matching.
        follow_symlinks: If True, directory walks follow symbolic links.
            Defaults to False.

    Example:
        >>> config = ExtractorConfig(relationships=frozenset({"After"}))
        >>> config.keeps(Relationship.AFTER)
        True
        >>> config.keeps(Relationship.WANTS)
        False
    """

    references_enabled: bool = True
    encoding: str = "utf-8"
    relationships: Optional[frozenset[str]] = None
    follow_symlinks: bool = False

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if not isinstance(self.references_enabled, bool):
            raise ConfigurationError(
                "references_enabled must be a boolean", "references_enabled"
            )
        if not isinstance(self.encoding, str) or not self.encoding:
            raise ConfigurationError(
                "encoding must be a non-empty string", "encoding"
            )
        if not isinstance(self.follow_symlinks, bool):
            raise ConfigurationError(
                "follow_symlinks must be a boolean", "follow_symlinks"
            )
        if self.relationships is not None:
            unknown = set(self.relationships) - set(Relationship.values())
            if unknown:
                raise ConfigurationError(
                    f"Unknown relationship(s): {', '.join(sorted(unknown))}. "
                    f"Expected any of {Relationship.values()}",
                    "relationships",
                )
            self.relationships = frozenset(self.relationships)

    def keeps(self, relationship: Relationship) -> bool:
        """Check whether results should keep references of a relationship."""
        if self.relationships is None:
            return True
        return relationship.value in self.relationships
