from curtainsdrawn.text import (
    LOG_WIDTH,
    Color,
    Line,
    Span,
    Style,
    pad_log,
    styled_line,
)


def test_pad_log_expands_tabs():
    assert pad_log("a\tb").rstrip() == "a    b"


def test_pad_log_pads_to_width():
    assert len(pad_log("short")) == 100
    assert LOG_WIDTH == 100


def test_pad_log_keeps_long_content():
    content = "x" * 150
    assert pad_log(content) == content


def test_styled_line_text_and_style():
    line = styled_line("hello", Color.GREEN, Color.BLACK)
    assert line.text() == pad_log("hello")
    assert len(line.spans) == 1
    assert line.spans[0].style == Style(fg=Color.GREEN, bg=Color.BLACK)


def test_line_text_joins_spans():
    line = Line([Span("ab"), Span("cd", Style(fg=Color.RED))])
    assert line.text() == "abcd"


def test_empty_line_text():
    assert Line().text() == ""


def test_brown_rgb():
    brown_line = styled_line("door", Color.BROWN, Color.RESET)
    red_line = styled_line("door", Color.RED, Color.RESET)
    assert brown_line.spans[0].style.fg.rgb == (150, 75, 0)
    assert red_line.spans[0].style.fg.rgb is None


def test_style_defaults():
    style = Style()
    assert style.fg is Color.RESET
    assert style.bg is Color.RESET
    assert style.bold is False