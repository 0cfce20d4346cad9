"""
Streaming parser components.

The window buffer, diagnostic detector, continuation assembler and emitter are
composed by ``LatexLogParser`` into a line-at-a-time pipeline.
"""

from .window import LineWindow
from .detector import Detection, DiagnosticDetector
from .emitter import CallbackSink, CollectingSink, DiagnosticSink, Emitter
from .assembler import Collecting, ContinuationAssembler, Idle, ParserState
from .log_parser import LatexLogParser, strip_line_ending

__all__ = [
    "LineWindow",
    "Detection",
    "DiagnosticDetector",
    "CallbackSink",
    "CollectingSink",
    "DiagnosticSink",
    "Emitter",
    "Collecting",
    "ContinuationAssembler",
    "Idle",
    "ParserState",
    "LatexLogParser",
    "strip_line_ending",
]
