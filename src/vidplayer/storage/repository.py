"""Abstract catalog interface for video lookup."""

from abc import ABC, abstractmethod

from vidplayer.models import Video


class VideoCatalog(ABC):
    """Abstract base class defining the read-only video catalog contract.

    Membership is fixed once the catalog is built; the only state that
    changes afterwards is each Video's own moderation flag.
    """

    @abstractmethod
    def get(self, video_id: str) -> Video | None:
        """Look up a video by ID. Returns None if not found."""

    @abstractmethod
    def list_all(self) -> list[Video]:
        """Snapshot of every video in the catalog, in no particular order."""

    @abstractmethod
    def exists(self, video_id: str) -> bool:
        """Check whether a video with the given ID is in the catalog."""

    @abstractmethod
    def count(self) -> int:
        """Number of videos in the catalog."""
