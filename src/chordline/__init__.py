"""Inline ChordPro lyric-line parsing for the band-page song sheets."""

from .models import Segment
from .segmenter import chords, join_segments, lyrics, segment

__all__ = [
    "Segment",
    "chords",
    "join_segments",
    "lyrics",
    "segment",
]
