"""CLI interface: thin wrapper over VideoPlayerService and CommandParser."""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import typer

from vidplayer.commands import INVALID_COMMAND, CommandParser
from vidplayer.config import settings
from vidplayer.ingestion.catalog import CatalogLoader, CatalogLoadError
from vidplayer.service import VideoPlayerService

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="vidplayer",
    help="Simulated video player with playlists, search and moderation flags.",
    no_args_is_help=True,
)

_PROMPT = "VP> "
_EXIT = "EXIT"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging."),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _get_service(catalog: Path | None) -> VideoPlayerService:
    """Load the catalog and build a player, or exit with an error."""
    try:
        video_catalog = CatalogLoader().load(catalog)
    except CatalogLoadError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)
    return VideoPlayerService(video_catalog)


def _read_line(text: str = "") -> str | None:
    """Prompt for one line of input. Returns None at end of input."""
    try:
        return typer.prompt(text, default="", show_default=False, prompt_suffix="")
    except typer.Abort:
        return None


def _interactive_lines() -> Iterator[tuple[int, str]]:
    lineno = 0
    while (line := _read_line(_PROMPT)) is not None:
        lineno += 1
        yield lineno, line


def _run_session(
    service: VideoPlayerService,
    lines: Iterator[tuple[int, str]],
    read_answer: Callable[[], str | None],
) -> None:
    """Execute numbered command lines until EXIT or end of input."""

    def prompt(listing: list[str]) -> str | None:
        for out in listing:
            typer.echo(out)
        return read_answer()

    parser = CommandParser(service, prompt=prompt)
    for lineno, line in lines:
        if line.strip().upper() == _EXIT:
            break
        output = parser.execute(line)
        if output == [INVALID_COMMAND]:
            logger.warning("Line %d: unrecognised command %r", lineno, line.strip())
        for out in output:
            typer.echo(out)


@app.command()
def shell(
    catalog: Path | None = typer.Option(None, "--catalog", "-c", help="Catalog file to load."),
) -> None:
    """Start an interactive player session."""
    svc = _get_service(catalog)
    typer.echo("Hello and welcome to vidplayer, what would you like to do?")
    typer.echo(f"Enter HELP for list of available commands or {_EXIT} to terminate.")
    _run_session(svc, _interactive_lines(), _read_line)
    typer.echo("vidplayer has now terminated its execution. Thank you and goodbye!")


@app.command()
def run(
    script: Path = typer.Argument(..., help="File with one command per line."),
    catalog: Path | None = typer.Option(None, "--catalog", "-c", help="Catalog file to load."),
) -> None:
    """Execute a command script. Search selections are read from the next line."""
    try:
        text = script.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"❌ Cannot read script {script}: {e}", err=True)
        raise typer.Exit(code=1)

    svc = _get_service(catalog)
    lines = (
        (lineno, line)
        for lineno, line in enumerate(text.splitlines(), 1)
        if not line.lstrip().startswith("#")
    )
    _run_session(svc, lines, lambda: next(lines, (0, None))[1])


@app.command()
def videos(
    catalog: Path | None = typer.Option(None, "--catalog", "-c", help="Catalog file to load."),
) -> None:
    """List every video in the catalog."""
    svc = _get_service(catalog)
    typer.echo(svc.number_of_videos())
    typer.echo(svc.show_all_videos())
