"""Domain models for vidplayer."""

from pydantic import BaseModel, Field, model_validator


class Video(BaseModel):
    """A catalog entry. Only the moderation flag changes after load."""

    video_id: str = Field(frozen=True)
    title: str = Field(frozen=True)
    tags: tuple[str, ...] = Field(default=(), frozen=True)
    flagged: bool = False
    flag_reason: str | None = None  # non-empty iff flagged

    @model_validator(mode="after")
    def _check_flag_reason(self) -> "Video":
        if self.flagged != bool(self.flag_reason):
            raise ValueError("flag_reason must be non-empty if and only if the video is flagged")
        return self

    @property
    def display(self) -> str:
        """Human-readable form: ``title (id) [tags]`` plus the flag suffix."""
        text = f"{self.title} ({self.video_id}) [{' '.join(self.tags)}]"
        if self.flagged:
            text += f" - FLAGGED (reason: {self.flag_reason})"
        return text

    def flag(self, reason: str) -> None:
        if not reason:
            raise ValueError("A flag reason is required")
        self.flagged = True
        self.flag_reason = reason

    def unflag(self) -> None:
        self.flagged = False
        self.flag_reason = None


class Playlist(BaseModel):
    """A named, ordered list of video IDs.

    The name keeps the casing it was created with; lookups by name are
    the registry's concern. Duplicate rejection happens before ``add``.
    """

    name: str = Field(frozen=True)
    video_ids: list[str] = Field(default_factory=list)

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return self.name.lower()

    @property
    def is_empty(self) -> bool:
        return not self.video_ids

    def add(self, video_id: str) -> None:
        self.video_ids.append(video_id)

    def remove(self, video_id: str) -> None:
        """Remove the first occurrence of video_id. No-op if absent."""
        if video_id in self.video_ids:
            self.video_ids.remove(video_id)

    def clear(self) -> None:
        self.video_ids.clear()

    def contains(self, video_id: str) -> bool:
        return video_id in self.video_ids

    def entries(self) -> list[str]:
        """Snapshot of the video IDs in playlist order."""
        return list(self.video_ids)

    def __contains__(self, video_id: object) -> bool:
        return video_id in self.video_ids

    def __len__(self) -> int:
        return len(self.video_ids)
