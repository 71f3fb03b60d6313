"""Case-insensitive registry of named playlists."""

import logging

from vidplayer.errors import PlaylistAlreadyExistsError, PlaylistNotFoundError
from vidplayer.models import Playlist

logger = logging.getLogger(__name__)


class PlaylistRegistry:
    """Maps lowercased playlist names to playlists, in creation order.

    Names are normalised with ``str.lower()`` on every insert and lookup;
    each Playlist keeps the casing it was created with.
    """

    def __init__(self) -> None:
        self._playlists: dict[str, Playlist] = {}

    def create(self, name: str) -> Playlist:
        """Register a new empty playlist.

        Raises:
            PlaylistAlreadyExistsError: If the name is taken, ignoring case.
        """
        key = name.lower()
        if key in self._playlists:
            raise PlaylistAlreadyExistsError(
                "Cannot create playlist: A playlist with the same name already exists"
            )
        playlist = Playlist(name=name)
        self._playlists[key] = playlist
        logger.info("Playlist created: %s", name)
        return playlist

    def get(self, name: str) -> Playlist | None:
        return self._playlists.get(name.lower())

    def delete(self, name: str) -> None:
        """Remove a playlist.

        Raises:
            PlaylistNotFoundError: If no playlist matches the name.
        """
        playlist = self._playlists.pop(name.lower(), None)
        if playlist is None:
            raise PlaylistNotFoundError(f"Cannot delete playlist {name}: Playlist does not exist")
        logger.info("Playlist deleted: %s", playlist.name)

    def list_all(self) -> list[Playlist]:
        """All playlists in creation order."""
        return list(self._playlists.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._playlists

    def __len__(self) -> int:
        return len(self._playlists)
