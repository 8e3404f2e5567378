"""
List-backed tag sink.

This module defines the ReferenceCollector class, which implements the
TagSink interface by appending every reference to an in-memory list. It
backs UnitFileAnalyzer and is handy in tests.
"""

from typing import Iterator

from unitref_analyzer.models.reference import UnitReference
from unitref_analyzer.sink.sink import TagSink


class ReferenceCollector(TagSink):
    """Sink that keeps emitted references in emission order.

    Duplicates are kept.

    Attributes:
        references: References in the order they were emitted.

    Example:
        >>> collector = ReferenceCollector()
        >>> collector.emit(UnitReference("a.service", Relationship.AFTER))
        >>> len(collector)
        1
    """

    def __init__(self) -> None:
        self.references: list[UnitReference] = []

    def emit(self, reference: UnitReference) -> None:
        self.references.append(reference)

    def __iter__(self) -> Iterator[UnitReference]:
        return iter(self.references)

    def __len__(self) -> int:
        return len(self.references)
