"""Exceptions raised when a player command is rejected.

Every rejection leaves the player state untouched. The message of the
exception is the text shown to the user.
"""


class PlayerError(Exception):
    """Base class for rejected player commands."""


class NotFoundError(PlayerError):
    """Raised when a referenced video or playlist does not exist."""


class VideoNotFoundError(NotFoundError):
    """Raised when a video ID is not in the catalog."""


class PlaylistNotFoundError(NotFoundError):
    """Raised when no playlist matches the given name."""


class InvalidStateError(PlayerError):
    """Raised when a command does not apply to the current flag or playback state."""


class PlaylistAlreadyExistsError(InvalidStateError):
    """Raised when creating a playlist whose name is already taken (case-insensitive)."""
