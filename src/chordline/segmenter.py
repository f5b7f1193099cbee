"""Inline ChordPro line segmenter.

Splits a single lyric line with bracketed chords into ordered
:class:`~chordline.models.Segment` objects:

    "Oh [Am]baby [G]please"
    → Segment(None, "Oh "), Segment("Am", "baby "), Segment("G", "please")

Matching is non-greedy and non-nested: an annotation runs from a ``[`` to the
first ``]`` after it.  Anything that does not match (a lone ``[``, an empty
``[]``) is left in the lyric text untouched.
"""

import logging
import re

from .models import Segment

logger = logging.getLogger(__name__)

# A chord annotation: [Am], [F#m7], [Bb/D], [N.C.]
# Label is everything up to the first "]"; an empty "[]" is not an annotation.
ANNOTATION_RE = re.compile(r"\[([^\]]+)\]")


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------


def segment(line: str | None) -> list[Segment]:
    """Return the ``(chord, text)`` segments of *line* in left-to-right order.

    Joining ``s.text`` over the result gives *line* with every annotation
    removed.  Never raises; ``None`` and ``""`` both give an empty list.

    Args:
        line: One line of lyrics, e.g. ``"[Am]Hello [G]world"``.

    Returns:
        A fresh list of :class:`~chordline.models.Segment` objects.
    """
    if not line:
        return []

    matches = list(ANNOTATION_RE.finditer(line))
    logger.debug("Found %d chord annotation(s) in %r", len(matches), line)

    if not matches:
        return [Segment(chord=None, text=line)]

    segments: list[Segment] = []
    cursor = 0

    for i, match in enumerate(matches):
        # Lyric text with no chord over it: before the first chord
        if match.start() > cursor:
            segments.append(Segment(chord=None, text=line[cursor:match.start()]))

        text_end = matches[i + 1].start() if i + 1 < len(matches) else len(line)
        segments.append(Segment(chord=match.group(1), text=line[match.end():text_end]))
        cursor = text_end

    return segments


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def chords(line: str | None) -> list[str]:
    """Return the chord labels of *line* in the order they appear."""
    return [s.chord for s in segment(line) if s.chord is not None]


def lyrics(line: str | None) -> str:
    """Return *line* with all chord annotations removed."""
    return "".join(s.text for s in segment(line))


def join_segments(segments: list[Segment]) -> str:
    """Rebuild an inline ChordPro line from *segments*.

    The inverse of :func:`segment`: ``join_segments(segment(s)) == s``.
    """
    return "".join(
        f"[{s.chord}]{s.text}" if s.chord is not None else s.text for s in segments
    )
