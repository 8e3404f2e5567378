"""
Abstract tag sink interface.

This module defines the TagSink abstract base class: the downstream
collaborator that receives every UnitReference produced by extraction.
Implementations decide how references are stored or serialized; the
extractor never reads back what it emitted.
"""

from abc import ABC, abstractmethod
from typing import Callable, Union

from unitref_analyzer.models.reference import UnitReference


class TagSink(ABC):
    """Abstract interface for reference consumers.

    Example:
        >>> class PrintingSink(TagSink):
        ...     def emit(self, reference: UnitReference) -> None:
        ...         print(reference)
    """

    @abstractmethod
    def emit(self, reference: UnitReference) -> None:
        """Accept one extracted reference.

        Called synchronously, in token order, while the extractor processes
        a triple.

        Args:
            reference: The extracted reference.
        """
        pass


SinkLike = Union[TagSink, Callable[[UnitReference], None]]


class CallableSink(TagSink):
    """Adapter that lets a plain function act as a TagSink."""

    def __init__(self, func: Callable[[UnitReference], None]) -> None:
        self._func = func

    def emit(self, reference: UnitReference) -> None:
        self._func(reference)


def as_sink(sink: SinkLike) -> TagSink:
    """Wrap a callable in a CallableSink; return TagSink instances as is.

    Raises:
        TypeError: If sink is neither a TagSink nor callable.
    """
    if isinstance(sink, TagSink):
        return sink
    if hasattr(sink, "emit") and callable(getattr(sink, "emit")):
        return CallableSink(sink.emit)
    if callable(sink):
        return CallableSink(sink)
    raise TypeError(
        f"sink must be a TagSink or a callable, got {type(sink).__name__}"
    )
