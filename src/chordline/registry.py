from .exceptions import UnsupportedFormatError
from .formatters.base import SegmentFormatter
from .formatters.json_lines import JsonFormatter
from .formatters.markup import HtmlFormatter
from .formatters.text import ChordsOverLyricsFormatter

# Searched in order by get_formatter, and listed in this order by available_formats().
_FORMATTERS: list[type[SegmentFormatter]] = [
    ChordsOverLyricsFormatter,
    HtmlFormatter,
    JsonFormatter,
]


def get_formatter(name: str) -> SegmentFormatter:
    """Return an instantiated formatter for the given format name.

    Raises UnsupportedFormatError if no formatter matches.
    """
    for cls in _FORMATTERS:
        if cls.can_handle(name):
            return cls()
    raise UnsupportedFormatError(name)


def available_formats() -> list[str]:
    """Names of all registered formats, in registration order."""
    return [cls.name for cls in _FORMATTERS]
