"""Text command front end: parses command lines and dispatches to the player."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from vidplayer.errors import PlayerError
from vidplayer.service import SearchResults, VideoPlayerService

logger = logging.getLogger(__name__)

INVALID_COMMAND = "Please enter a valid command, type HELP for a list of available commands."

# Receives the rendered search results, returns the user's raw answer (or None).
SelectionPrompt = Callable[[list[str]], str | None]


@dataclass(frozen=True)
class Command:
    """One entry of the command table."""

    name: str
    handler: str  # CommandParser method name
    usage: str
    help: str
    min_args: int = 0
    max_args: int | None = 0  # None = unbounded

    def accepts(self, nargs: int) -> bool:
        if nargs < self.min_args:
            return False
        return self.max_args is None or nargs <= self.max_args


COMMANDS: dict[str, Command] = {
    c.name: c
    for c in (
        Command("NUMBER_OF_VIDEOS", "_number_of_videos", "NUMBER_OF_VIDEOS", "Shows how many videos are in the library."),
        Command("SHOW_ALL_VIDEOS", "_show_all_videos", "SHOW_ALL_VIDEOS", "Lists all videos from the library."),
        Command("PLAY", "_play", "PLAY <video_id>", "Plays specified video.", 1, 1),
        Command("PLAY_RANDOM", "_play_random", "PLAY_RANDOM", "Plays a random video from the library."),
        Command("STOP", "_stop", "STOP", "Stop the current video."),
        Command("PAUSE", "_pause", "PAUSE", "Pause the current video."),
        Command("CONTINUE", "_continue", "CONTINUE", "Resume the current paused video."),
        Command("SHOW_PLAYING", "_show_playing", "SHOW_PLAYING", "Displays the title, id and tags of the current video."),
        Command("CREATE_PLAYLIST", "_create_playlist", "CREATE_PLAYLIST <playlist_name>", "Creates a new (empty) playlist with the provided name.", 1, 1),
        Command("ADD_TO_PLAYLIST", "_add_to_playlist", "ADD_TO_PLAYLIST <playlist_name> <video_id>", "Adds the requested video to the playlist.", 2, 2),
        Command("REMOVE_FROM_PLAYLIST", "_remove_from_playlist", "REMOVE_FROM_PLAYLIST <playlist_name> <video_id>", "Removes the specified video from the specified playlist.", 2, 2),
        Command("CLEAR_PLAYLIST", "_clear_playlist", "CLEAR_PLAYLIST <playlist_name>", "Removes all videos from the playlist.", 1, 1),
        Command("DELETE_PLAYLIST", "_delete_playlist", "DELETE_PLAYLIST <playlist_name>", "Deletes the playlist.", 1, 1),
        Command("SHOW_PLAYLIST", "_show_playlist", "SHOW_PLAYLIST <playlist_name>", "List all videos in this playlist.", 1, 1),
        Command("SHOW_ALL_PLAYLISTS", "_show_all_playlists", "SHOW_ALL_PLAYLISTS", "Display all the available playlists."),
        Command("SEARCH_VIDEOS", "_search_videos", "SEARCH_VIDEOS <search_term>", "Display all the videos whose titles contain the search_term.", 1, 1),
        Command("SEARCH_VIDEOS_WITH_TAG", "_search_videos_with_tag", "SEARCH_VIDEOS_WITH_TAG <tag_name>", "Display all videos whose tags contains the provided tag.", 1, 1),
        Command("FLAG_VIDEO", "_flag_video", "FLAG_VIDEO <video_id> <flag_reason>", "Mark a video as flagged with a supplied reason (optional).", 1, None),
        Command("ALLOW_VIDEO", "_allow_video", "ALLOW_VIDEO <video_id>", "Removes a flag from a video.", 1, 1),
        Command("HELP", "_help", "HELP", "Displays help."),
    )
}


class CommandParser:
    """Turns command lines like ``PLAY funny_dogs_video_id`` into player calls.

    Command names are case-insensitive; arguments are whitespace-separated.
    Rejections from the player are rendered as output, never raised.

    Search commands with results call ``prompt`` with the rendered listing
    and feed its answer to the player. Without a prompt the listing is
    returned as output and no selection is made.
    """

    def __init__(self, service: VideoPlayerService, prompt: SelectionPrompt | None = None) -> None:
        self._service = service
        self._prompt = prompt

    def execute(self, line: str) -> list[str]:
        """Run one command line and return the output lines."""
        tokens = line.split()
        if not tokens:
            return []

        name, args = tokens[0].upper(), tokens[1:]
        command = COMMANDS.get(name)
        if command is None or not command.accepts(len(args)):
            logger.debug("Invalid command line: %r", line)
            return [INVALID_COMMAND]

        try:
            output = getattr(self, command.handler)(*args)
        except PlayerError as e:
            logger.debug("%s rejected: %s", name, e)
            return str(e).splitlines()

        if isinstance(output, str):
            return output.splitlines()
        return output

    def _number_of_videos(self) -> str:
        return self._service.number_of_videos()

    def _show_all_videos(self) -> str:
        return self._service.show_all_videos()

    def _play(self, video_id: str) -> str:
        return self._service.play(video_id)

    def _play_random(self) -> str:
        return self._service.play_random()

    def _stop(self) -> str:
        return self._service.stop()

    def _pause(self) -> str:
        return self._service.pause()

    def _continue(self) -> str:
        return self._service.resume()

    def _show_playing(self) -> str:
        return self._service.show_playing()

    def _create_playlist(self, name: str) -> str:
        return self._service.create_playlist(name)

    def _add_to_playlist(self, name: str, video_id: str) -> str:
        return self._service.add_to_playlist(name, video_id)

    def _remove_from_playlist(self, name: str, video_id: str) -> str:
        return self._service.remove_from_playlist(name, video_id)

    def _clear_playlist(self, name: str) -> str:
        return self._service.clear_playlist(name)

    def _delete_playlist(self, name: str) -> str:
        return self._service.delete_playlist(name)

    def _show_playlist(self, name: str) -> str:
        return self._service.show_playlist(name)

    def _show_all_playlists(self) -> str:
        return self._service.show_all_playlists()

    def _search_videos(self, term: str) -> list[str]:
        return self._select(self._service.search(term))

    def _search_videos_with_tag(self, tag: str) -> list[str]:
        return self._select(self._service.search_by_tag(tag))

    def _flag_video(self, video_id: str, *reason: str) -> str:
        return self._service.flag(video_id, " ".join(reason) or None)

    def _allow_video(self, video_id: str) -> str:
        return self._service.unflag(video_id)

    def _help(self) -> list[str]:
        lines = ["Available commands:"]
        lines += [f"    {c.usage} - {c.help}" for c in COMMANDS.values()]
        lines.append("    EXIT - Terminates the program execution.")
        return lines

    def _select(self, results: SearchResults) -> list[str]:
        if not results.videos or self._prompt is None:
            return results.lines()
        answer = self._prompt(results.lines())
        played = self._service.play_selection(results, answer)
        return played.splitlines() if played else []
