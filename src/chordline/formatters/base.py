from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..models import Segment
from ..segmenter import segment


class SegmentFormatter(ABC):
    """Abstract base class for all output formatters."""

    name: str = ""

    @classmethod
    def can_handle(cls, name: str) -> bool:
        """Return True if this formatter renders the named format."""
        return name.strip().lower() == cls.name

    @abstractmethod
    def render_line(self, segments: list[Segment]) -> str:
        """Render the segments of one lyric line.

        May return several physical lines (joined with ``\\n``) but never a
        trailing newline.
        """

    def render(self, lines: Iterable[str]) -> str:
        """Convenience method: segment + render every line.

        The result ends with a single newline, or is empty when *lines* is.
        """
        rendered = [self.render_line(segment(line.rstrip("\r\n"))) for line in lines]
        if not rendered:
            return ""
        return "\n".join(rendered) + "\n"
