"""
Continuation assembler.

Once a diagnostic is known to wrap past the end of a physical line, the
assembler collects the following lines until one is shorter than the wrap
width, then hands the reassembled message to the emitter.
"""

from dataclasses import dataclass
from typing import Optional, Union

from loguru import logger

from ..core.data_structures import Diagnostic
from ..core.enums import DiagnosticKind
from .emitter import Emitter


@dataclass(frozen=True)
class Idle:
    """Not assembling a message."""


@dataclass(frozen=True)
class Collecting:
    """Assembling a message of ``kind``; ``buffer`` holds the text so far."""

    kind: DiagnosticKind
    buffer: str


ParserState = Union[Idle, Collecting]

IDLE = Idle()


class ContinuationAssembler:
    """Owns the parser state and joins wrapped lines into one message."""

    def __init__(self, emitter: Emitter, wrap_width: int):
        self.emitter = emitter
        self.wrap_width = wrap_width
        self.state: ParserState = IDLE

    @property
    def is_collecting(self) -> bool:
        return isinstance(self.state, Collecting)

    def start(
        self, kind: DiagnosticKind, message: str, line: str
    ) -> Optional[Diagnostic]:
        """
        Begin a diagnostic whose text so far is ``message``.

        ``line`` is the physical line the message currently ends on. When it is
        shorter than the wrap width the diagnostic is already complete and is
        emitted right away.
        """
        self.state = Collecting(kind=kind, buffer=message)
        if len(line) < self.wrap_width:
            return self._complete()
        logger.debug(f"Collecting wrapped {kind.value} message")
        return None

    def feed(self, line: str) -> Optional[Diagnostic]:
        """Append a continuation line; a short line completes the message."""
        if not isinstance(self.state, Collecting):
            raise RuntimeError("feed() called while not collecting a message")

        self.state = Collecting(kind=self.state.kind, buffer=self.state.buffer + line)
        if len(line) < self.wrap_width:
            return self._complete()
        return None

    def finalize(self) -> Optional[Diagnostic]:
        """Emit an unfinished message as is; used at end of stream."""
        if not isinstance(self.state, Collecting):
            return None
        logger.debug("Flushing unterminated message at end of stream")
        return self._complete()

    def reset(self) -> None:
        """Drop any message being collected."""
        self.state = IDLE

    def _complete(self) -> Diagnostic:
        state = self.state
        assert isinstance(state, Collecting)
        self.state = IDLE
        return self.emitter.emit(state.kind, state.buffer)
