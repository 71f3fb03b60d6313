"""Catalog loading from pipe-separated text files."""

import logging
from pathlib import Path

from vidplayer.config import settings
from vidplayer.models import Video
from vidplayer.storage.memory import InMemoryVideoCatalog

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Raised when a catalog file cannot be read or parsed."""


class CatalogLoader:
    """Builds an in-memory catalog from a text file.

    One video per line, fields separated by ``|``::

        Funny Dogs | funny_dogs_video_id | #dog , #animal

    The tag column is optional. Surrounding whitespace is ignored and
    blank lines are skipped.
    """

    _FIELD_SEP = "|"
    _TAG_SEP = ","

    def load(self, path: Path | str | None = None) -> InMemoryVideoCatalog:
        """Read and parse a catalog file.

        Args:
            path: Catalog file. Defaults to settings.resolved_catalog_path.

        Returns:
            Catalog holding every video in the file.

        Raises:
            CatalogLoadError: If the file is unreadable or malformed.
        """
        path = Path(path) if path else settings.resolved_catalog_path
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogLoadError(f"Cannot read catalog {path}: {e}") from e

        videos = self.parse(text, source=str(path))
        logger.info("Loaded %d videos from %s", len(videos), path)
        return InMemoryVideoCatalog(videos)

    @classmethod
    def parse(cls, text: str, source: str = "<catalog>") -> list[Video]:
        """Parse catalog text into videos, in file order.

        Raises:
            CatalogLoadError: On a malformed line or a repeated video ID.
        """
        videos: list[Video] = []
        seen: set[str] = set()
        for lineno, line in enumerate(text.splitlines(), 1):
            if not line.strip():
                continue
            video = cls.parse_line(line, where=f"{source}:{lineno}")
            if video.video_id in seen:
                raise CatalogLoadError(f"{source}:{lineno}: duplicate video id {video.video_id!r}")
            seen.add(video.video_id)
            videos.append(video)
        return videos

    @classmethod
    def parse_line(cls, line: str, where: str = "<catalog>") -> Video:
        """Parse a single ``title | id | tags`` line.

        Raises:
            CatalogLoadError: If the title or ID is missing, or there are
                              more than three fields.
        """
        fields = [f.strip() for f in line.split(cls._FIELD_SEP)]
        if len(fields) < 2 or len(fields) > 3:
            raise CatalogLoadError(f"{where}: expected 'title | id | tags', got {line!r}")

        title, video_id = fields[0], fields[1]
        if not title or not video_id:
            raise CatalogLoadError(f"{where}: title and video id are required")

        tags: list[str] = []
        if len(fields) == 3:
            tags = [t.strip() for t in fields[2].split(cls._TAG_SEP) if t.strip()]

        return Video(video_id=video_id, title=title, tags=tags)
