"""
Triple model.

A Triple is one section/key/value record scanned out of an INI-like unit
file. It is the atomic input of reference extraction.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Triple:
    """One parsed section/key/value record.

    Attributes:
        section: Name of the enclosing section ("" before the first header).
        key: Key text, case preserved.
        value: Value text, or None for a bare directive without "=".
        line_number: 1-based line where the record starts (diagnostics only).
    """

    section: str
    key: str
    value: Optional[str] = None
    line_number: int = 0
