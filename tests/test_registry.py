import pytest

from chordline.exceptions import ChordlineError, UnsupportedFormatError
from chordline.formatters.json_lines import JsonFormatter
from chordline.formatters.markup import HtmlFormatter
from chordline.formatters.text import ChordsOverLyricsFormatter
from chordline.registry import available_formats, get_formatter


@pytest.mark.parametrize(
    "name, cls",
    [
        ("text", ChordsOverLyricsFormatter),
        ("html", HtmlFormatter),
        ("json", JsonFormatter),
        ("JSON", JsonFormatter),
    ],
)
def test_get_formatter(name, cls):
    assert isinstance(get_formatter(name), cls)


def test_get_formatter_returns_new_instance():
    assert get_formatter("text") is not get_formatter("text")


def test_unknown_format_raises():
    with pytest.raises(UnsupportedFormatError) as excinfo:
        get_formatter("pdf")
    assert excinfo.value.format_name == "pdf"
    assert "pdf" in str(excinfo.value)


def test_unsupported_format_is_chordline_error():
    with pytest.raises(ChordlineError):
        get_formatter("")


def test_available_formats():
    assert available_formats() == ["text", "html", "json"]
