"""Chords-over-lyrics plain text formatter.

The reverse of the chord-line/lyric-line merge done when importing tabs: each
inline chord is lifted onto its own row above the lyric, at the column where
it takes effect.

Example::

    "I [D]pulled into Nazareth, was feelin' about [G]half past [D]dead"

renders as::

      D                                       G         D
    I pulled into Nazareth, was feelin' about half past dead

A chord label wider than the text under it pushes the lyric right (padding
with spaces) so consecutive chords never run together.
"""

from ..models import Segment
from .base import SegmentFormatter


class ChordsOverLyricsFormatter(SegmentFormatter):
    """Render lines as a chord row above a lyric row."""

    name = "text"

    def render_line(self, segments: list[Segment]) -> str:
        if all(s.chord is None for s in segments):
            # No chords: just the lyric, no empty chord row
            return "".join(s.text for s in segments)

        chord_row = ""
        lyric_row = ""

        for seg in segments:
            if seg.chord is not None:
                # One space minimum between the previous chord and this one
                column = len(lyric_row)
                if chord_row:
                    column = max(column, len(chord_row) + 1)
                lyric_row = lyric_row.ljust(column)
                chord_row = chord_row.ljust(column) + seg.chord
            lyric_row += seg.text

        chord_row = chord_row.rstrip()
        lyric_row = lyric_row.rstrip()

        if not lyric_row:
            # Chord-only passage (instrumental / intro)
            return chord_row
        return f"{chord_row}\n{lyric_row}"
