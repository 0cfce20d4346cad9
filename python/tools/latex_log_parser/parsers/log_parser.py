"""
Streaming parser for LaTeX compiler output.

LaTeX writes its log at a fixed width of 79 columns, wrapping longer lines
without any continuation marker. The only hint that a line continues on the
next one is that it is exactly as long as the wrap width. This parser consumes
physical lines one at a time and emits each error or warning once, with the
wrapped pieces joined back together.

A line following an empty line is examined one call late: the empty line marks
a boundary, so the next line is held back and looked at once the window has
moved past the empty entry.
"""

import io
from typing import Iterable, Iterator, List, Optional

from ..core.config import DEFAULT_CONFIG, ParserConfig
from ..core.data_structures import Diagnostic
from ..core.enums import OutputChannel
from .assembler import ContinuationAssembler, ParserState
from .detector import Detection, DiagnosticDetector
from .emitter import CollectingSink, DiagnosticSink, Emitter
from .window import LineWindow


def strip_line_ending(text: str) -> str:
    """Remove trailing newline and carriage return characters."""
    return text.rstrip("\r\n")


def split_lines(text: str) -> Iterator[str]:
    """
    Split text into physical lines the way a log file is read.

    Only line terminators split; form feeds and other characters
    ``str.splitlines`` treats as breaks stay part of the line.
    """
    return iter(io.StringIO(text, newline=None))


class LatexLogParser:
    """Turns physical lines of LaTeX output into diagnostics."""

    def __init__(
        self,
        sink: Optional[DiagnosticSink] = None,
        config: ParserConfig = DEFAULT_CONFIG,
    ):
        self.config = config
        self.sink = sink if sink is not None else CollectingSink()
        self.window = LineWindow(capacity=2)
        self.detector = DiagnosticDetector(config)
        self.emitter = Emitter(self.sink)
        self.assembler = ContinuationAssembler(self.emitter, config.wrap_width)
        self._held: Optional[str] = None

    @property
    def wrap_width(self) -> int:
        return self.config.wrap_width

    @property
    def state(self) -> ParserState:
        return self.assembler.state

    def on_text_available(
        self, text: str, channel: OutputChannel = OutputChannel.STDOUT
    ) -> Optional[Diagnostic]:
        """Entry point for the process reader; non process output is ignored."""
        if not channel.is_process_output:
            return None
        return self.feed_line(text)

    def feed_line(self, text: str) -> Optional[Diagnostic]:
        """Consume one physical line, returning the diagnostic it completed."""
        line = strip_line_ending(text)
        self.window.push(line)

        if self.assembler.is_collecting:
            return self.assembler.feed(line)
        return self._detect(line)

    def feed_lines(self, lines: Iterable[str]) -> List[Diagnostic]:
        """Consume many lines, returning the diagnostics completed on the way."""
        completed = []
        for line in lines:
            if (diagnostic := self.feed_line(line)) is not None:
                completed.append(diagnostic)
        return completed

    def parse(self, text: str, flush: bool = True) -> List[Diagnostic]:
        """Parse a complete log held in memory."""
        diagnostics = self.feed_lines(split_lines(text))
        if flush and (diagnostic := self.finalize()) is not None:
            diagnostics.append(diagnostic)
        return diagnostics

    def finalize(self) -> Optional[Diagnostic]:
        """
        Signal the end of the stream.

        A message still being collected is emitted with the text gathered so
        far. A line held back after an empty line is examined on its own. Not
        calling this drops whatever is pending.
        """
        if self.assembler.is_collecting:
            return self.assembler.finalize()

        held, self._held = self._held, None
        if held is not None and (detection := self.detector.match(held)):
            return self.emitter.emit(detection.kind, detection.message)
        return None

    def reset(self) -> None:
        """Forget all buffered lines and any message in progress."""
        self.window.clear()
        self.assembler.reset()
        self._held = None

    def _detect(self, line: str) -> Optional[Diagnostic]:
        held, self._held = self._held, None
        if held is not None and (detection := self.detector.match(held)):
            if len(held) >= self.wrap_width:
                self.assembler.start(detection.kind, detection.message, held)
                return self.assembler.feed(line)
            self._held = line
            return self.emitter.emit(detection.kind, detection.message)

        if self.window.is_oldest_empty():
            self._held = line
            return None

        detection = self._match_window(line)
        if detection is None:
            return None
        return self.assembler.start(detection.kind, detection.message, line)

    def _match_window(self, line: str) -> Optional[Detection]:
        # A full-width previous line may be continued by this one, so the
        # pattern can straddle the two.
        previous = self.window.previous
        if previous is not None and len(previous) >= self.wrap_width:
            if detection := self.detector.match(self.window.text()):
                return detection
        return self.detector.match(line)
