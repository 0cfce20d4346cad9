"""
Diagnostic emitter and sinks.

The emitter turns a classified message into a ``Diagnostic`` and hands it to a
sink, synchronously and in call order.
"""

from collections import Counter
from typing import Callable, List, Protocol

from loguru import logger

from ..core.data_structures import Diagnostic
from ..core.enums import DiagnosticKind


class DiagnosticSink(Protocol):
    """Protocol defining interface for consumers of diagnostics."""

    def accept(self, diagnostic: Diagnostic) -> None:
        """Receive one finalized diagnostic."""
        ...


class CollectingSink:
    """Sink keeping every received diagnostic in a list."""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def accept(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def clear(self) -> None:
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)


class CallbackSink:
    """Sink forwarding each diagnostic to a callable."""

    def __init__(self, callback: Callable[[Diagnostic], None]):
        self.callback = callback

    def accept(self, diagnostic: Diagnostic) -> None:
        self.callback(diagnostic)


class Emitter:
    """Delivers finalized diagnostics to a sink."""

    def __init__(self, sink: DiagnosticSink):
        self.sink = sink
        self.emitted: Counter = Counter()

    def emit(self, kind: DiagnosticKind, message: str) -> Diagnostic:
        """Construct a diagnostic and deliver it to the sink."""
        diagnostic = Diagnostic(kind=kind, message=message)
        logger.debug(f"Emitting {kind.value}: {message}")
        self.sink.accept(diagnostic)
        self.emitted[kind] += 1
        return diagnostic
