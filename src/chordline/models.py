from dataclasses import dataclass


@dataclass(frozen=True)
class Segment:
    """One piece of a lyric line: an optional chord and the text it precedes.

    Example: "[Am]Hello [G]world" yields Segment("Am", "Hello ") and
    Segment("G", "world").  Text before the first chord (or a line with no
    chords at all) is carried by a segment whose chord is None.
    """

    chord: str | None  # e.g. "Am", "F#m7", "Bb/D"; None for unattached lyric text
    text: str = ""
