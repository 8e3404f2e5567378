"""
Analyzer module for unit reference extraction.

This package contains the per-triple ReferenceExtractor and the
UnitFileAnalyzer entry point that drives it over whole files.
"""

from unitref_analyzer.analyzer.reference_extractor import (
    ReferenceExtractor,
    tokenize_unit_list,
)
from unitref_analyzer.analyzer.unit_analyzer import UnitFileAnalyzer

__all__ = [
    "ReferenceExtractor",
    "UnitFileAnalyzer",
    "tokenize_unit_list",
]
