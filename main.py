#!/usr/bin/env python3
"""Command-line entry point: download the best video from a tweet."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from api.twitter_client import TwitterClient
from config import ENV_FILE, settings
from downloader.video_downloader import VideoDownloader
from errors import EXIT_CODES, ErrorKind
from pipeline import MediaDownloadPipeline, PipelineResult
from selector.variant_selector import VariantSelector

USAGE = "Usage: get-media-twitter [tweet-url]"

logger = logging.getLogger(__name__)

# stdout is reserved for the result lines
console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def setup_logging():
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_pipeline() -> MediaDownloadPipeline:
    """Wire the concrete components into a pipeline."""
    return MediaDownloadPipeline(
        TwitterClient(settings),
        VariantSelector(),
        VideoDownloader(settings),
    )


async def run_pipeline(
    pipeline: MediaDownloadPipeline, tweet_url: str, env_path: Path
) -> PipelineResult:
    """Run the pipeline with a spinner on stderr."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    ) as progress:
        task = progress.add_task("🚀 Starting...", total=None)

        def update_progress(message: str):
            progress.update(task, description=message)

        return await pipeline.run(tweet_url, env_path, progress_callback=update_progress)


def report(result: PipelineResult) -> int:
    """Print the outcome and map it to an exit code."""
    if result.error is not None:
        err_console.print(f"[red]Error ({result.error.kind.value}):[/red] {escape(result.error.message)}", highlight=False)
        return result.error.exit_code

    if result.no_video:
        logger.info("No video found, nothing to download")
        return 0

    console.print(result.video_url, markup=False)
    console.print(f"file saved [{result.download.path}]", markup=False)
    return 0


def run(argv: List[str], pipeline: Optional[MediaDownloadPipeline] = None, env_path: Path = Path(ENV_FILE)) -> int:
    """Run the CLI with argv (excluding the program name) and return the exit code."""
    if not argv:
        console.print(USAGE, markup=False)
        return EXIT_CODES[ErrorKind.USAGE]

    pipeline = pipeline or build_pipeline()
    result = asyncio.run(run_pipeline(pipeline, argv[0], env_path))
    return report(result)


def main():
    """Main CLI entry point."""
    setup_logging()
    try:
        sys.exit(run(sys.argv[1:]))
    except KeyboardInterrupt:
        err_console.print("\n[yellow]⚠ Interrupted by user[/yellow]")
        sys.exit(1)
    except Exception as e:
        err_console.print(f"\n[red]❌ Unexpected failure: {str(e)}[/red]")
        logger.error(f"Unexpected error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
