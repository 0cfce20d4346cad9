import pytest

from .core.config import ParserConfig
from .core.data_structures import Diagnostic
from .core.enums import DiagnosticKind, OutputChannel
from .parsers.assembler import Collecting, Idle
from .parsers.emitter import CollectingSink
from .parsers.log_parser import LatexLogParser, strip_line_ending

WRAP = 79
REFERENCE_WARNING = (
    "LaTeX Warning: Reference `eq:1' on page 2 undefined on input line 10."
)


def pad(text: str, width: int = WRAP, fill: str = "x") -> str:
    """Pad ``text`` to exactly ``width`` characters."""
    return (text + fill * width)[:width]


# --- Fixtures ---


@pytest.fixture
def sink():
    return CollectingSink()


@pytest.fixture
def parser(sink):
    return LatexLogParser(sink=sink)


# --- Single lines ---


def test_short_error_line_is_emitted_immediately(parser, sink):
    diagnostic = parser.feed_line("foo.tex:12: Undefined control sequence.")
    assert diagnostic == Diagnostic(DiagnosticKind.ERROR, "Undefined control sequence.")
    assert sink.diagnostics == [diagnostic]
    assert isinstance(parser.state, Idle)


def test_short_warning_line_is_emitted_immediately(parser, sink):
    diagnostic = parser.feed_line(REFERENCE_WARNING)
    assert diagnostic == Diagnostic(DiagnosticKind.WARNING, REFERENCE_WARNING)
    assert len(sink) == 1


def test_unrelated_lines_produce_nothing(parser, sink):
    lines = [
        "This is pdfTeX, Version 3.141592653-2.6-1.40.25 (TeX Live 2023)",
        " restricted \\write18 enabled.",
        "(./main.aux)",
        "",
        "Output written on main.pdf (1 page, 12345 bytes).",
    ]
    assert parser.feed_lines(lines) == []
    assert parser.finalize() is None
    assert len(sink) == 0


def test_line_endings_are_stripped(parser):
    diagnostic = parser.feed_line("foo.tex:1: Oops\r\n")
    assert diagnostic.message == "Oops"


@pytest.mark.parametrize(
    "text, expected",
    [("a\n", "a"), ("a\r\n", "a"), ("a\n\r", "a"), ("a ", "a "), ("", "")],
)
def test_strip_line_ending(text, expected):
    assert strip_line_ending(text) == expected


# --- Wrapped messages ---


def test_full_width_chatter_does_not_hide_next_warning(parser, sink):
    assert parser.feed_line("x" * WRAP) is None
    diagnostic = parser.feed_line(REFERENCE_WARNING)
    assert diagnostic == Diagnostic(DiagnosticKind.WARNING, REFERENCE_WARNING)
    assert len(sink) == 1


def test_wrapped_warning_is_joined(parser, sink):
    first = pad("LaTeX Warning: Label `sec:intro' multiply defined and then some ")
    second = "0123456789"
    assert parser.feed_line(first) is None
    assert isinstance(parser.state, Collecting)
    diagnostic = parser.feed_line(second)
    assert diagnostic.kind is DiagnosticKind.WARNING
    assert diagnostic.message == first + second
    assert len(diagnostic.message) == 89
    assert len(sink) == 1


def test_wrapped_error_is_joined(parser, sink):
    prefix = "main.tex:7: "
    first = pad(prefix + "Package inputenc Error: Unicode character ")
    second = "(U+2212) not set up for use with LaTeX."
    assert parser.feed_line(first) is None
    diagnostic = parser.feed_line(second)
    assert diagnostic == Diagnostic(
        DiagnosticKind.ERROR, first[len(prefix):] + second
    )
    assert sink.diagnostics == [diagnostic]


def test_message_wrapped_over_three_lines(parser, sink):
    first = pad("Overfull \\hbox (42.0pt too wide) in paragraph at lines ")
    second = "y" * WRAP
    third = "end"
    assert parser.feed_lines([first, second, third]) == [
        Diagnostic(DiagnosticKind.WARNING, first + second + third)
    ]
    assert len(sink) == 1


def test_error_location_straddling_two_lines(parser):
    first = "y" * 70 + "foo.tex:1"
    assert len(first) == WRAP
    assert parser.feed_line(first) is None
    diagnostic = parser.feed_line("2: Undefined control sequence.")
    assert diagnostic == Diagnostic(DiagnosticKind.ERROR, "Undefined control sequence.")


def test_line_after_wrapped_message_is_examined(parser, sink):
    first = pad("LaTeX Warning: ")
    parser.feed_lines([first, "tail", "foo.tex:3: Missing $ inserted."])
    assert [d.kind for d in sink.diagnostics] == [
        DiagnosticKind.WARNING,
        DiagnosticKind.ERROR,
    ]
    assert sink.diagnostics[1].message == "Missing $ inserted."


def test_custom_wrap_width():
    sink = CollectingSink()
    parser = LatexLogParser(sink=sink, config=ParserConfig(wrap_width=20))
    first = pad("LaTeX Warning: ", width=20)
    assert parser.feed_line(first) is None
    assert parser.feed_line("short").message == first + "short"


# --- Blank lines ---


def test_line_after_blank_line_is_not_examined_immediately(parser, sink):
    assert parser.feed_line("") is None
    assert parser.feed_line("LaTeX Warning: something") is None
    assert len(sink) == 0


def test_line_after_blank_line_is_examined_on_next_call(parser, sink):
    parser.feed_lines(["", "LaTeX Warning: something"])
    diagnostic = parser.feed_line("(./main.aux)")
    assert diagnostic == Diagnostic(DiagnosticKind.WARNING, "LaTeX Warning: something")
    assert len(sink) == 1


def test_held_line_followed_by_diagnostic(parser, sink):
    parser.feed_lines(
        [
            "",
            "LaTeX Warning: first",
            "foo.tex:2: second",
            "(./main.aux)",
        ]
    )
    assert [d.message for d in sink.diagnostics] == [
        "LaTeX Warning: first",
        "second",
    ]


def test_wrapped_message_after_blank_line(parser, sink):
    first = pad("LaTeX Warning: ")
    parser.feed_lines(["", first, "rest"])
    assert sink.diagnostics == [Diagnostic(DiagnosticKind.WARNING, first + "rest")]


def test_finalize_examines_held_line(parser, sink):
    parser.feed_lines(["", "LaTeX Warning: something"])
    diagnostic = parser.finalize()
    assert diagnostic == Diagnostic(DiagnosticKind.WARNING, "LaTeX Warning: something")
    assert parser.finalize() is None


# --- Ordering ---


def test_diagnostics_keep_arrival_order(parser, sink):
    lines = [
        "a.tex:1: first",
        "LaTeX Warning: second",
        "b.tex:2: third",
    ]
    parser.feed_lines(lines)
    assert [d.message for d in sink.diagnostics] == [
        "first",
        "LaTeX Warning: second",
        "third",
    ]
    parser.reset()
    sink.clear()
    parser.feed_lines(list(reversed(lines)))
    assert [d.message for d in sink.diagnostics] == [
        "third",
        "LaTeX Warning: second",
        "first",
    ]


# --- End of stream ---


def test_unterminated_message_is_dropped_without_finalize(parser, sink):
    assert parser.parse(pad("main.tex:1: Runaway "), flush=False) == []
    assert isinstance(parser.state, Collecting)
    assert len(sink) == 0


def test_finalize_flushes_unterminated_message(parser, sink):
    first = pad("main.tex:1: Undefined control sequence ")
    parser.feed_line(first)
    diagnostic = parser.finalize()
    assert diagnostic == Diagnostic(DiagnosticKind.ERROR, first[len("main.tex:1: "):])
    assert isinstance(parser.state, Idle)


def test_parse_flushes_by_default(parser):
    first = pad("LaTeX Warning: ")
    assert parser.parse(first + "\n") == [Diagnostic(DiagnosticKind.WARNING, first)]


def test_reset_clears_everything(parser, sink):
    parser.feed_line(pad("LaTeX Warning: "))
    parser.reset()
    assert isinstance(parser.state, Idle)
    assert len(parser.window) == 0
    assert parser.finalize() is None


# --- Channels ---


def test_non_process_channels_are_ignored(parser, sink):
    assert parser.on_text_available("foo.tex:1: x\n", OutputChannel.SYSTEM) is None
    assert len(parser.window) == 0
    assert len(sink) == 0


@pytest.mark.parametrize("channel", [OutputChannel.STDOUT, OutputChannel.STDERR])
def test_process_channels_are_parsed(parser, channel):
    diagnostic = parser.on_text_available("foo.tex:1: x\n", channel)
    assert diagnostic == Diagnostic(DiagnosticKind.ERROR, "x")


def test_independent_parsers_do_not_share_state():
    first, second = LatexLogParser(), LatexLogParser()
    first.feed_line(pad("LaTeX Warning: "))
    assert isinstance(first.state, Collecting)
    assert isinstance(second.state, Idle)
    assert second.feed_line("foo.tex:1: x").message == "x"


def test_parse_keeps_form_feeds_inside_lines(parser):
    first = "LaTeX Warning: \x0c" + "x" * 63
    assert parser.parse(first + "\r\ntail\n") == [
        Diagnostic(DiagnosticKind.WARNING, first + "tail")
    ]
