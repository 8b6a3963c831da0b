"""CLI module for ctranscode."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from ctranscode.cli.exit_codes import ExitCode
from ctranscode.config import build_logging_config, get_config
from ctranscode.core.exceptions import ConfigError, LaunchFailure
from ctranscode.core.spinner import Spinner
from ctranscode.domain.models import CodecDecision, InvocationConfig
from ctranscode.executor.transcode import TranscodeExecutor
from ctranscode.introspector import FFmpegIntrospector, ProbeResult, inspect_media
from ctranscode.logging import configure_logging
from ctranscode.policy import decide_codecs
from ctranscode.tools import resolve_tool

logger = logging.getLogger(__name__)


def _is_interactive() -> bool:
    """Check if the spinner's output stream is a terminal.

    This is extracted as a function to allow easier mocking in tests.
    """
    return sys.stderr.isatty()


def _same_file(a: Path, b: Path) -> bool:
    """True if both paths name the same file."""
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return False


def _fail(ctx: click.Context, message: str, code: ExitCode) -> NoReturn:
    """Report an error on stderr and exit."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(code)


def _require_value(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> str | None:
    """Reject an empty file name."""
    if value is not None and not value.strip():
        raise click.BadParameter("file name must not be empty")
    return value


def _exit_status(returncode: int) -> int:
    """Map a signal-terminated child (negative code) to the shell's 128 + N."""
    if returncode < 0:
        return 128 + abs(returncode)
    return returncode


def _echo_dry_run(result: ProbeResult, decision: CodecDecision) -> None:
    """Print what was found and what would be done."""
    if not result.streams:
        click.echo("  no video or audio streams found")
    for stream in result.streams:
        click.echo(f"  {stream.kind.name.lower()}: {stream.codec or 'unknown'}")
    click.echo(f"Video codec: {decision.video_codec}")
    click.echo(f"Audio codec: {decision.audio_codec}")
    if decision.is_passthrough:
        click.echo("  all streams copied")
    for reason in decision.reasons:
        click.echo(f"  re-encode: {reason.message}")
    click.echo("Dry run: transcode skipped.")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="ctranscode")
@click.option(
    "-i",
    "--input",
    "input_file",
    required=True,
    metavar="FILE",
    type=click.Path(dir_okay=False),
    callback=_require_value,
    help="Input filename.",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    default=None,
    metavar="FILE",
    type=click.Path(dir_okay=False),
    callback=_require_value,
    help="Output filename (default: input name with .mp4 extension).",
)
@click.option(
    "--ffmpeg",
    "ffmpeg_path",
    default=None,
    type=click.Path(path_type=Path, dir_okay=False),
    help="Path to the ffmpeg executable.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Probe and decide, print the ffmpeg command, but do not transcode.",
)
@click.option(
    "--no-spinner",
    is_flag=True,
    help="Do not show the activity indicator while probing.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    input_file: str,
    output_file: str | None,
    ffmpeg_path: Path | None,
    dry_run: bool,
    no_spinner: bool,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Chromecast Transcoder - remux or transcode a media file to MP4.

    Streams the device already plays (H.264 video other than High 10,
    AAC or MP3 audio) are copied; everything else is re-encoded.
    """
    try:
        config = get_config(ffmpeg_path=ffmpeg_path)
        configure_logging(
            build_logging_config(
                config.logging,
                level=log_level,
                file=log_file,
                format="json" if log_json else None,
            )
        )
    except ConfigError as e:
        _fail(ctx, str(e), ExitCode.CONFIG_ERROR)

    invocation = InvocationConfig.from_paths(input_file, output_file)
    click.echo(f"Input file: {invocation.input_path}")
    click.echo(f"Output file: {invocation.output_path}")
    if _same_file(invocation.input_path, invocation.output_path):
        logger.warning(
            "Output file is the same as the input file: %s", invocation.output_path
        )

    ffmpeg = resolve_tool("ffmpeg", config.tools.ffmpeg, config.tools.search_dirs)
    spinner = None if no_spinner or not _is_interactive() else Spinner()

    try:
        result = inspect_media(
            FFmpegIntrospector(ffmpeg), invocation.input_path, spinner=spinner
        )
    except LaunchFailure as e:
        logger.debug("Probe failed: %s", e)
        _fail(ctx, str(e), ExitCode.TOOL_NOT_AVAILABLE)

    decision = decide_codecs(result.classification)
    executor = TranscodeExecutor(ffmpeg)
    click.echo(executor.command_line(invocation, decision))

    if dry_run:
        _echo_dry_run(result, decision)
        ctx.exit(ExitCode.SUCCESS)

    try:
        returncode = executor.execute(invocation, decision)
    except LaunchFailure as e:
        logger.debug("Transcode failed: %s", e)
        _fail(ctx, str(e), ExitCode.TOOL_NOT_AVAILABLE)

    ctx.exit(_exit_status(returncode))
