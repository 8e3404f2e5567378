"""
Utility helpers for unit reference analysis.

This package contains helper classes that support the analyzer, such as
warning collection during scanning.
"""

from unitref_analyzer.utils.warnings import ScanWarning, WarningCollector

__all__ = [
    "ScanWarning",
    "WarningCollector",
]
