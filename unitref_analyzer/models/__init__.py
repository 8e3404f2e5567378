"""
Data models for unit reference analysis.

This package contains the core data structures: relationships and their
lookup table, scanned triples, extracted references, configuration, and
results.
"""

from unitref_analyzer.models.config import ExtractorConfig
from unitref_analyzer.models.reference import UnitReference
from unitref_analyzer.models.relationship import (
    DEFAULT_RELATIONSHIP_TABLE,
    REFERENCE_KIND,
    ReferenceKind,
    Relationship,
    RelationshipTable,
)
from unitref_analyzer.models.result import UnitAnalysisResult
from unitref_analyzer.models.triple import Triple

__all__ = [
    "DEFAULT_RELATIONSHIP_TABLE",
    "ExtractorConfig",
    "REFERENCE_KIND",
    "ReferenceKind",
    "Relationship",
    "RelationshipTable",
    "Triple",
    "UnitAnalysisResult",
    "UnitReference",
]
