"""CLI entry point for s3-podcast."""

import asyncio
import os
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from s3podcast.config.logging import setup_logging
from s3podcast.config.manager import ConfigManager, load_descriptor
from s3podcast.config.precedence import resolve_config_value
from s3podcast.feeds.formats import mime_type_for
from s3podcast.media.probe import FFprobeProber, MediaProbe
from s3podcast.storage.keys import slugify
from s3podcast.storage.s3 import S3Bucket
from s3podcast.sync.orchestrator import SyncOrchestrator
from s3podcast.utils.errors import (
    ConfigError,
    InvalidConfigError,
    S3PodcastError,
    UnsupportedFormatError,
)
from s3podcast.utils.events import LoggingEventLogger

BUCKET_ENV_VAR = "S3PODCAST_BUCKET"

app = typer.Typer(
    name="s3podcast",
    help="Publish local podcast episodes and their RSS feed to S3",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """s3-podcast - Push podcast episodes and feed.rss to a public bucket."""
    # Initialize logging before any command runs
    setup_logging(verbose=verbose, log_file=log_file)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from s3podcast import __version__

    console.print(f"[bold cyan]s3-podcast[/bold cyan] v{__version__}")


@app.command("sync")
def sync_command(
    descriptor: Path = typer.Argument(..., help="Podcast descriptor (.yaml, .yml or .json)"),
    bucket: str | None = typer.Option(
        None, "--bucket", "-b", help=f"Bucket name (default: ${BUCKET_ENV_VAR} or config)"
    ),
    base_url: str | None = typer.Option(
        None, "--base-url", help="Public URL prefix (default: https://s3.amazonaws.com)"
    ),
    region: str | None = typer.Option(None, "--region", help="AWS region"),
    endpoint_url: str | None = typer.Option(
        None, "--endpoint-url", help="Endpoint for S3-compatible services"
    ),
) -> None:
    """Upload every episode and publish feed.rss.

    Creates the bucket if needed, uploads episodes in descriptor order and
    writes the feed last. Safe to rerun: identical input converges to the
    same objects and feed.

    Examples:
        s3podcast sync podcast.yaml --bucket my-podcast

        S3PODCAST_BUCKET=my-podcast s3podcast sync podcast.json
    """

    async def run_sync() -> None:
        try:
            config = ConfigManager().load_config()
            podcast = load_descriptor(descriptor)

            bucket_name = resolve_config_value(
                bucket, os.environ.get(BUCKET_ENV_VAR), config.storage.bucket, default=None
            )
            if not bucket_name:
                raise InvalidConfigError(
                    f"No bucket given. Use --bucket, set ${BUCKET_ENV_VAR}, "
                    "or set storage.bucket in the config file"
                )

            s3_bucket = S3Bucket(
                bucket_name,
                acl=config.storage.acl,
                region=resolve_config_value(region, config.storage.region, default=None),
                endpoint_url=resolve_config_value(
                    endpoint_url, config.storage.endpoint_url, default=None
                ),
            )
            orchestrator = SyncOrchestrator(
                s3_bucket,
                probe=MediaProbe(FFprobeProber(config.probe.ffprobe_path)),
                events=LoggingEventLogger(),
                base_url=resolve_config_value(base_url, default=config.storage.base_url),
            )

            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                task = progress.add_task(
                    f"Syncing {len(podcast.items)} episode(s) to {bucket_name}...",
                    total=None,
                )
                result = await orchestrator.run(podcast)
                progress.update(task, completed=True)

            console.print("\n[green]✓[/green] Sync complete")
            if result.bucket_created:
                console.print(f"[dim]  Created bucket {result.bucket}[/dim]")

            table = Table(title="[bold]Uploaded Episodes[/bold]")
            table.add_column("#", justify="right", style="dim")
            table.add_column("Title", style="cyan")
            table.add_column("Key", style="green")
            for i, (item, key) in enumerate(zip(podcast.items, result.uploaded_keys), 1):
                table.add_row(str(i), item.title, key)
            console.print(table)

            console.print(f"\n[cyan]→[/cyan] Feed: {result.feed_url}")

        except ConfigError as e:
            console.print(f"[red]✗[/red] {e}")
            sys.exit(1)
        except S3PodcastError as e:
            console.print(f"[red]✗[/red] Sync failed: {e}")
            sys.exit(1)
        except OSError as e:
            console.print(f"[red]✗[/red] Could not read episode file: {e}")
            sys.exit(1)

    asyncio.run(run_sync())


@app.command("slug")
def slug_command(
    text: str = typer.Argument(..., help="Text to normalize"),
) -> None:
    """Print the storage-safe slug used for episode keys.

    Examples:
        s3podcast slug "Episode One!"
    """
    console.print(slugify(text), markup=False, highlight=False)


@app.command("probe")
def probe_command(
    audio_file: Path = typer.Argument(..., help="Local audio file"),
) -> None:
    """Show the duration, format and feed MIME type of an audio file."""

    async def run_probe() -> None:
        try:
            config = ConfigManager().load_config()
            probe = MediaProbe(FFprobeProber(config.probe.ffprobe_path))
            metadata = await probe.extract(audio_file)

            table = Table(show_header=False, box=None)
            table.add_column("Key", style="cyan")
            table.add_column("Value", style="white")
            table.add_row("File", str(audio_file))
            table.add_row("Duration", f"{metadata.duration}s")
            table.add_row("Format", metadata.format)

            try:
                table.add_row("MIME type", mime_type_for(metadata.format))
                supported = True
            except UnsupportedFormatError:
                table.add_row("MIME type", "[red]unsupported[/red]")
                supported = False

            console.print(table)
            if not supported:
                console.print("[yellow]⚠[/yellow] Only mp3 and ogg can be published")
                sys.exit(1)

        except S3PodcastError as e:
            console.print(f"[red]✗[/red] {e}")
            sys.exit(1)

    asyncio.run(run_probe())


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="Action: show or path"),
) -> None:
    """Inspect s3-podcast configuration.

    Actions:
        show: Display current configuration
        path: Print the config file location

    Examples:
        s3podcast config show
    """
    try:
        manager = ConfigManager()

        if action == "path":
            console.print(str(manager.config_file), markup=False, highlight=False)

        elif action == "show":
            config = manager.load_config()

            console.print("\n[bold]s3-podcast Configuration[/bold]\n")

            table = Table(show_header=False, box=None)
            table.add_column("Key", style="cyan")
            table.add_column("Value", style="white")

            table.add_row("Config file", str(manager.config_file))
            table.add_row("", "")
            table.add_row("Log level", config.log_level)
            table.add_row("Bucket", config.storage.bucket or "(not set)")
            table.add_row("ACL", config.storage.acl)
            table.add_row("Region", config.storage.region or "(not set)")
            table.add_row("Endpoint", config.storage.endpoint_url or "(not set)")
            table.add_row("Base URL", config.storage.base_url)
            table.add_row("ffprobe", config.probe.ffprobe_path)

            console.print(table)

        else:
            console.print(f"[red]✗[/red] Unknown action: {action}")
            console.print("Available actions: show, path")
            sys.exit(1)

    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    app()
