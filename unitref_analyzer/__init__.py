"""
Unit Reference Analyzer v1.0

Extracts dependency references (Requires=, Wants=, After=, Before=,
RequiredBy=, WantedBy=) from systemd-style unit files so that indexing
tools can record which units each file refers to, and how.

Example:
    >>> from unitref_analyzer import UnitFileAnalyzer
    >>> analyzer = UnitFileAnalyzer()
    >>> result = analyzer.analyze_text("[Unit]\\nAfter=a.service,b.service")
    >>> [str(ref) for ref in result.references]
    ['After=a.service', 'After=b.service']
"""

from unitref_analyzer.version import __version__, __version_info__

__author__ = "Unit Reference Analyzer Contributors"

from unitref_analyzer.analyzer.reference_extractor import (
    ReferenceExtractor,
    tokenize_unit_list,
)
from unitref_analyzer.analyzer.unit_analyzer import UnitFileAnalyzer
from unitref_analyzer.exceptions import (
    ConfigurationError,
    UnitFileReadError,
    UnitRefError,
)
from unitref_analyzer.graph.dependency_graph import UnitDependencyGraph
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
from unitref_analyzer.parser.ini_scanner import IniScanner
from unitref_analyzer.parser.unit_files import UNIT_FILE_EXTENSIONS, is_unit_file
from unitref_analyzer.sink.collector import ReferenceCollector
from unitref_analyzer.sink.sink import TagSink
from unitref_analyzer.utils.warnings import ScanWarning, WarningCollector

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Core
    "ReferenceExtractor",
    "tokenize_unit_list",
    "UnitFileAnalyzer",
    # Configuration
    "ExtractorConfig",
    # Relationships
    "Relationship",
    "RelationshipTable",
    "DEFAULT_RELATIONSHIP_TABLE",
    "ReferenceKind",
    "REFERENCE_KIND",
    # Data models
    "Triple",
    "UnitReference",
    "UnitAnalysisResult",
    "UnitDependencyGraph",
    # Sinks
    "TagSink",
    "ReferenceCollector",
    # Parser
    "IniScanner",
    "UNIT_FILE_EXTENSIONS",
    "is_unit_file",
    # Warnings
    "ScanWarning",
    "WarningCollector",
    # Exceptions
    "UnitRefError",
    "UnitFileReadError",
    "ConfigurationError",
]
