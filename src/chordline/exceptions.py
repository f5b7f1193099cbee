class ChordlineError(Exception):
    """Base exception for chordline."""


class UnsupportedFormatError(ChordlineError):
    """Raised when no formatter matches the requested output format."""

    def __init__(self, format_name: str):
        self.format_name = format_name
        super().__init__(f"No formatter found for format: {format_name}")
