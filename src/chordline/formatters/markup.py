"""HTML formatter for the band-page song sheets.

Markup per lyric line::

    <div class="line">
      <span class="segment"><span class="chord">Am</span><span class="lyric">Hello </span></span>
      <span class="segment"><span class="lyric">world</span></span>
    </div>

(shown indented for readability; the real output has no whitespace between
tags, since whitespace inside lyric spans is significant).

Chord-less segments omit the ``chord`` span.  Stylesheets position
``.chord`` above ``.lyric``; an empty lyric span is still emitted so a chord
at the end of a line keeps its width.
"""

from bs4 import BeautifulSoup, Tag

from ..models import Segment
from .base import SegmentFormatter


class HtmlFormatter(SegmentFormatter):
    """Render lines as HTML ``<div class="line">`` blocks."""

    name = "html"

    def render_line(self, segments: list[Segment]) -> str:
        soup = BeautifulSoup("", "html.parser")
        div = soup.new_tag("div", attrs={"class": "line"})
        for seg in segments:
            div.append(_segment_tag(soup, seg))
        soup.append(div)
        # str() escapes &, < and > in text nodes
        return str(soup)


def _segment_tag(soup: BeautifulSoup, seg: Segment) -> Tag:
    span = soup.new_tag("span", attrs={"class": "segment"})
    if seg.chord is not None:
        chord = soup.new_tag("span", attrs={"class": "chord"})
        chord.string = seg.chord
        span.append(chord)
    lyric = soup.new_tag("span", attrs={"class": "lyric"})
    lyric.string = seg.text
    span.append(lyric)
    return span
