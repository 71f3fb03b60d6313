"""Core business logic for vidplayer."""

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from vidplayer.config import settings
from vidplayer.errors import (
    InvalidStateError,
    PlaylistNotFoundError,
    VideoNotFoundError,
)
from vidplayer.models import Playlist, Video
from vidplayer.playlists import PlaylistRegistry
from vidplayer.storage.repository import VideoCatalog

logger = logging.getLogger(__name__)

SELECTION_PROMPT = (
    "Would you like to play any of the above? If yes, specify the number of the video.",
    "If your answer is not a valid number, we will assume it's a no.",
)


@dataclass
class SearchResults:
    """Matches for a title or tag search, sorted by title."""

    term: str
    videos: list[Video] = field(default_factory=list)

    def lines(self) -> list[str]:
        """Numbered listing followed by the selection prompt."""
        if not self.videos:
            return [f"No search results for {self.term}"]
        lines = [f"Here are the results for {self.term}:"]
        lines += [f"{i}) {v.display}" for i, v in enumerate(self.videos, 1)]
        lines += SELECTION_PROMPT
        return lines


def parse_selection(answer: str | None, count: int) -> int | None:
    """Try-parse a 1-based result number.

    Anything that is not an integer between 1 and count means the user
    declined, so None is returned rather than raising.
    """
    if answer is None:
        return None
    try:
        index = int(answer.strip())
    except ValueError:
        return None
    return index if 1 <= index <= count else None


class VideoPlayerService:
    """Playback controller: single owner of the player state.

    Holds the catalog, the playlist registry and the currently playing
    slot. Every public method is one user command: it either returns the
    text to show, or raises a PlayerError subclass whose message is the
    rejection, in which case nothing was changed.
    """

    def __init__(
        self,
        catalog: VideoCatalog,
        playlists: PlaylistRegistry | None = None,
        rng: random.Random | None = None,
        default_flag_reason: str | None = None,
    ) -> None:
        self._catalog = catalog
        self._playlists = playlists if playlists is not None else PlaylistRegistry()
        self._rng = rng or random.Random(settings.random_seed)
        self._default_flag_reason = default_flag_reason or settings.default_flag_reason
        self._current: Video | None = None
        self._paused = False

    @property
    def currently_playing(self) -> Video | None:
        return self._current

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def playlists(self) -> PlaylistRegistry:
        return self._playlists

    def number_of_videos(self) -> str:
        return f"{self._catalog.count()} videos in the library"

    def show_all_videos(self) -> str:
        lines = ["Here's a list of all available videos:"]
        lines += [v.display for v in self._sorted_videos()]
        return "\n".join(lines)

    def play(self, video_id: str) -> str:
        """Start playing a video, stopping whatever was playing before.

        Raises:
            VideoNotFoundError: If the video is not in the catalog.
            InvalidStateError: If the video is flagged.
        """
        video = self._catalog.get(video_id)
        if video is None:
            raise VideoNotFoundError("Cannot play video: Video does not exist")
        if video.flagged:
            raise InvalidStateError(
                f"Cannot play video: Video is currently flagged (reason: {video.flag_reason})"
            )

        lines = []
        if self._current is not None:
            lines.append(self.stop())
        self._current = video
        self._paused = False
        logger.info("Playing video: %s", video.video_id)
        lines.append(f"Playing video: {video.title}")
        return "\n".join(lines)

    def stop(self) -> str:
        video = self._require_playing("Cannot stop video")
        self._current = None
        self._paused = False
        logger.info("Stopped video: %s", video.video_id)
        return f"Stopping video: {video.title}"

    def play_random(self) -> str:
        """Play a uniformly chosen unflagged video.

        Raises:
            InvalidStateError: If every video is flagged or the catalog is empty.
        """
        candidates = [v for v in self._catalog.list_all() if not v.flagged]
        if not candidates:
            raise InvalidStateError("No videos available")
        return self.play(self._rng.choice(candidates).video_id)

    def pause(self) -> str:
        video = self._require_playing("Cannot pause video")
        if self._paused:
            raise InvalidStateError(f"Video already paused: {video.title}")
        self._paused = True
        logger.info("Paused video: %s", video.video_id)
        return f"Pausing video: {video.title}"

    def resume(self) -> str:
        video = self._require_playing("Cannot continue video")
        if not self._paused:
            raise InvalidStateError("Cannot continue video: Video is not paused")
        self._paused = False
        logger.info("Resumed video: %s", video.video_id)
        return f"Continuing video: {video.title}"

    def show_playing(self) -> str:
        if self._current is None:
            return "No video is currently playing"
        text = f"Currently playing: {self._current.display}"
        if self._paused:
            text += " - PAUSED"
        return text

    def create_playlist(self, name: str) -> str:
        self._playlists.create(name)
        return f"Successfully created new playlist: {name}"

    def add_to_playlist(self, name: str, video_id: str) -> str:
        action = f"Cannot add video to {name}"
        playlist = self._require_playlist(name, action)
        video = self._require_video(video_id, action)
        if video.flagged:
            raise InvalidStateError(
                f"{action}: Video is currently flagged (reason: {video.flag_reason})"
            )
        if playlist.contains(video_id):
            raise InvalidStateError(f"{action}: Video already added")

        playlist.add(video_id)
        logger.info("Added %s to playlist %s", video_id, playlist.name)
        return f"Added video to {name}: {video.title}"

    def show_all_playlists(self) -> str:
        playlists = self._playlists.list_all()
        if not playlists:
            return "No playlists exist yet"
        lines = ["Showing all playlists:"]
        lines += [p.name for p in sorted(playlists, key=lambda p: p.key)]
        return "\n".join(lines)

    def show_playlist(self, name: str) -> str:
        playlist = self._require_playlist(name, f"Cannot show playlist {name}")
        lines = [f"Showing playlist: {name}"]
        if playlist.is_empty:
            lines.append("No videos here yet")
        else:
            for video_id in playlist.entries():
                lines.append(self._catalog.get(video_id).display)
        return "\n".join(lines)

    def remove_from_playlist(self, name: str, video_id: str) -> str:
        action = f"Cannot remove video from {name}"
        playlist = self._require_playlist(name, action)
        video = self._require_video(video_id, action)
        if not playlist.contains(video_id):
            raise InvalidStateError(f"{action}: Video is not in playlist")

        playlist.remove(video_id)
        logger.info("Removed %s from playlist %s", video_id, playlist.name)
        return f"Removed video from {name}: {video.title}"

    def clear_playlist(self, name: str) -> str:
        playlist = self._require_playlist(name, f"Cannot clear playlist {name}")
        playlist.clear()
        logger.info("Cleared playlist %s", playlist.name)
        return f"Successfully removed all videos from {name}"

    def delete_playlist(self, name: str) -> str:
        self._playlists.delete(name)
        return f"Deleted playlist: {name}"

    def search(self, term: str) -> SearchResults:
        """Case-insensitive title substring search over unflagged videos."""
        needle = term.lower()
        return self._collect(term, lambda v: needle in v.title.lower())

    def search_by_tag(self, tag: str) -> SearchResults:
        """Exact tag search over unflagged videos. Tags must start with '#'."""
        if not tag.startswith("#"):
            return SearchResults(term=tag)
        return self._collect(tag, lambda v: tag in v.tags)

    def play_selection(self, results: SearchResults, answer: str | None) -> str | None:
        """Play the result numbered by answer, if it names one.

        Returns:
            The play output, or None when the user made no valid selection.
        """
        index = parse_selection(answer, len(results.videos))
        if index is None:
            return None
        return self.play(results.videos[index - 1].video_id)

    def flag(self, video_id: str, reason: str | None = None) -> str:
        """Flag a video, stopping it first if it is the one playing.

        Args:
            video_id: Catalog video ID.
            reason: Why the video is flagged. Defaults to settings.default_flag_reason.

        Raises:
            VideoNotFoundError: If the video is not in the catalog.
            InvalidStateError: If the video is already flagged.
        """
        video = self._require_video(video_id, "Cannot flag video")
        if video.flagged:
            raise InvalidStateError("Cannot flag video: Video is already flagged")

        lines = []
        if self._current is not None and self._current.video_id == video_id:
            lines.append(self.stop())
        video.flag(reason or self._default_flag_reason)
        logger.info("Flagged video %s: %s", video_id, video.flag_reason)
        lines.append(f"Successfully flagged video: {video.title} (reason: {video.flag_reason})")
        return "\n".join(lines)

    def unflag(self, video_id: str) -> str:
        video = self._require_video(video_id, "Cannot remove flag from video")
        if not video.flagged:
            raise InvalidStateError("Cannot remove flag from video: Video is not flagged")
        video.unflag()
        logger.info("Unflagged video %s", video_id)
        return f"Successfully removed flag from video: {video.title}"

    def _sorted_videos(self) -> list[Video]:
        return sorted(self._catalog.list_all(), key=lambda v: v.title)

    def _collect(self, term: str, match: Callable[[Video], bool]) -> SearchResults:
        videos = [v for v in self._sorted_videos() if not v.flagged and match(v)]
        return SearchResults(term=term, videos=videos)

    def _require_playing(self, action: str) -> Video:
        if self._current is None:
            raise InvalidStateError(f"{action}: No video is currently playing")
        return self._current

    def _require_video(self, video_id: str, action: str) -> Video:
        video = self._catalog.get(video_id)
        if video is None:
            raise VideoNotFoundError(f"{action}: Video does not exist")
        return video

    def _require_playlist(self, name: str, action: str) -> Playlist:
        playlist = self._playlists.get(name)
        if playlist is None:
            raise PlaylistNotFoundError(f"{action}: Playlist does not exist")
        return playlist
