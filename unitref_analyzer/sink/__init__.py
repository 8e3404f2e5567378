"""
Tag sink interfaces and implementations.

This package contains the TagSink interface that receives extracted
references, plus a list-backed implementation.
"""

from unitref_analyzer.sink.collector import ReferenceCollector
from unitref_analyzer.sink.sink import CallableSink, SinkLike, TagSink, as_sink

__all__ = [
    "CallableSink",
    "ReferenceCollector",
    "SinkLike",
    "TagSink",
    "as_sink",
]
