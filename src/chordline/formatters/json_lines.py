"""JSON Lines formatter: one JSON array of segment records per lyric line.

    [{"chord": "Am", "text": "Hello "}, {"chord": "G", "text": "world"}]

Chord-less segments carry ``"chord": null``; an empty input line renders as
``[]``.
"""

import json
from dataclasses import asdict

from ..models import Segment
from .base import SegmentFormatter


class JsonFormatter(SegmentFormatter):
    """Render lines as JSON arrays of ``{chord, text}`` records."""

    name = "json"

    def render_line(self, segments: list[Segment]) -> str:
        return json.dumps([asdict(s) for s in segments], ensure_ascii=False)
