"""
Reference extractor for unit files.

This module defines the ReferenceExtractor class, which classifies each
section/key/value triple of a unit file and, for relationship keys such as
Requires= or After=, emits one UnitReference per unit name in the value.
"""

from typing import Optional

from unitref_analyzer.models.config import ExtractorConfig
from unitref_analyzer.models.reference import UnitReference
from unitref_analyzer.models.relationship import (
    DEFAULT_RELATIONSHIP_TABLE,
    Relationship,
    RelationshipTable,
)
from unitref_analyzer.models.triple import Triple
from unitref_analyzer.sink.sink import SinkLike, as_sink

UNIT_SEPARATOR = ","


def tokenize_unit_list(value: str) -> list[str]:
    """Split a relationship value into unit names.

    Single left-to-right pass: a comma ends the current name, whitespace is
    dropped wherever it occurs, and every other character is kept. Empty
    names are never produced. Whitespace inside a name is removed rather
    than treated as a separator, so "foo bar, baz" yields ["foobar", "baz"].

    Args:
        value: Raw value text of a relationship key.

    Returns:
        Unit names in the order they appear.

    Example:
        >>> tokenize_unit_list("a.service, , b.service")
        ['a.service', 'b.service']
    """
    tokens: list[str] = []
    buffer: list[str] = []

    for char in value:
        if char == UNIT_SEPARATOR:
            if buffer:
                tokens.append("".join(buffer))
                buffer.clear()
        elif not char.isspace():
            buffer.append(char)

    if buffer:
        tokens.append("".join(buffer))

    return tokens


class ReferenceExtractor:
    """Per-triple reference extraction.

    The extractor keeps no state between calls: each process() invocation
    looks the key up in a shared, read-only RelationshipTable and emits
    all of its references to the sink before returning. Irregular input
    (unknown key, missing value, empty names) emits nothing and is never
    an error.

    Attributes:
        table: Relationship lookup table.
        sink: Receiver of extracted references.
        config: Configuration providing the references_enabled toggle used
            by on_triple().

    Example:
        >>> collector = ReferenceCollector()
        >>> extractor = ReferenceExtractor(collector)
        >>> extractor.process("Unit", "After", "a.service,b.service", True)
        >>> [ref.unit_name for ref in collector]
        ['a.service', 'b.service']
    """

    def __init__(
        self,
        sink: SinkLike,
        table: RelationshipTable = DEFAULT_RELATIONSHIP_TABLE,
        config: Optional[ExtractorConfig] = None,
    ) -> None:
        """Initialize a ReferenceExtractor.

        Args:
            sink: TagSink, object with an emit() method, or plain callable
                that receives each UnitReference.
            table: Relationship lookup table, shared read-only.
            config: Optional configuration; defaults to ExtractorConfig().
        """
        self.sink = as_sink(sink)
        self.table = table
        self.config = config or ExtractorConfig()

    def process(
        self,
        section: str,
        key: str,
        value: Optional[str],
        references_enabled: bool,
    ) -> None:
        """Classify one triple and emit its references.

        Args:
            section: Enclosing section name. Not used for classification.
            key: Key name, matched case-sensitively.
            value: Value text, or None for a bare key.
            references_enabled: Feature toggle; when False nothing is emitted.
        """
        if not references_enabled or value is None:
            return

        relationship = self.table.lookup(key)
        if relationship is None:
            return

        self._emit_units(value, relationship)

    def on_triple(self, triple: Triple) -> None:
        """Scanner callback: process a triple with the configured toggle."""
        self.process(
            triple.section,
            triple.key,
            triple.value,
            self.config.references_enabled,
        )

    __call__ = on_triple

    def _emit_units(self, value: str, relationship: Relationship) -> None:
        for unit_name in tokenize_unit_list(value):
            self.sink.emit(UnitReference(unit_name, relationship))
