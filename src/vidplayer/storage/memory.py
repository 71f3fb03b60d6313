"""In-memory implementation of the video catalog."""

from collections.abc import Iterable

from vidplayer.models import Video
from vidplayer.storage.repository import VideoCatalog


class InMemoryVideoCatalog(VideoCatalog):
    """Dict-backed catalog built once from a collection of videos."""

    def __init__(self, videos: Iterable[Video] = ()) -> None:
        """Initialize the catalog.

        Args:
            videos: Videos to index. IDs must be unique.

        Raises:
            ValueError: If two videos share an ID.
        """
        self._videos: dict[str, Video] = {}
        for video in videos:
            if video.video_id in self._videos:
                raise ValueError(f"Duplicate video id: {video.video_id}")
            self._videos[video.video_id] = video

    def get(self, video_id: str) -> Video | None:
        return self._videos.get(video_id)

    def list_all(self) -> list[Video]:
        return list(self._videos.values())

    def exists(self, video_id: str) -> bool:
        return video_id in self._videos

    def count(self) -> int:
        return len(self._videos)
