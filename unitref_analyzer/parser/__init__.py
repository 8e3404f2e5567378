"""
Unit file parsing module.

This package contains the INI triple scanner and the suffix check that
decides which files are unit files.
"""

from unitref_analyzer.parser.ini_scanner import IniScanner
from unitref_analyzer.parser.unit_files import UNIT_FILE_EXTENSIONS, is_unit_file

__all__ = [
    "IniScanner",
    "UNIT_FILE_EXTENSIONS",
    "is_unit_file",
]
