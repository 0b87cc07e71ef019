"""Click CLI entry point for audio-core."""

from __future__ import annotations

import json
import logging
import os
import time

import click

from audio_core.config import load_config
from audio_core.errors import AudioCoreError
from audio_core.metadata import analyze_audio_metadata, format_duration
from audio_core.models import AudioMetadata, RecordingInfo
from audio_core.store import RecordingStore


@click.group()
@click.version_option(package_name="audio-core")
@click.option("--store", "store_root", default=None, type=click.Path(file_okay=False),
              help="Recordings directory (overrides the config file)")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False),
              help="Path to audio-core.yml")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, store_root: str | None, config_path: str | None, verbose: bool):
    """Analyze audio + SRT metadata and manage saved recordings."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = load_config(config_path)
    ctx.obj = RecordingStore(store_root or config.store_root)


@cli.command()
@click.argument("audio_path", type=click.Path())
@click.argument("srt_path", type=click.Path())
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def analyze(audio_path: str, srt_path: str, as_json: bool):
    """Analyze AUDIO_PATH and its subtitle file SRT_PATH."""
    try:
        metadata = analyze_audio_metadata(audio_path, srt_path)
    except AudioCoreError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(metadata.to_dict(), indent=2))
        return
    _print_audio_metadata(metadata)


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--name", default=None,
              help="Filename in the store (default: saved_<stem>_<epoch><ext>)")
@click.pass_obj
def save(store: RecordingStore, source: str, name: str | None):
    """Copy the audio file SOURCE into the recordings store."""
    if name is None:
        stem, ext = os.path.splitext(os.path.basename(source))
        name = "saved_{}_{}{}".format(stem, int(time.time()), ext)

    with open(source, "rb") as f:
        data = f.read()

    try:
        message = store.save(data, name)
    except (AudioCoreError, ValueError) as e:
        raise click.ClickException(str(e))
    click.echo(message)


@cli.command(name="list")
@click.pass_obj
def list_cmd(store: RecordingStore):
    """List saved recordings, newest first."""
    try:
        recordings = store.list()
    except AudioCoreError as e:
        raise click.ClickException(str(e))

    if not recordings:
        click.echo("No recordings found.")
        return

    click.echo("Found {} recording(s):".format(len(recordings)))
    for i, name in enumerate(recordings, 1):
        click.echo("  {}. {}".format(i, name))


@cli.command()
@click.argument("name")
@click.pass_obj
def delete(store: RecordingStore, name: str):
    """Delete the recording NAME."""
    try:
        message = store.delete(name)
    except (AudioCoreError, ValueError) as e:
        raise click.ClickException(str(e))
    click.echo(message)


@cli.command()
@click.argument("name", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_obj
def info(store: RecordingStore, name: str | None, as_json: bool):
    """Show size and creation time of NAME (default: the latest recording)."""
    try:
        if name is None:
            recording = store.latest()
            if recording is None:
                click.echo("No recordings available to analyze.")
                return
        else:
            recording = store.stat(name)
    except (AudioCoreError, ValueError) as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(recording.to_dict(), indent=2))
        return
    _print_recording_info(recording)


def _print_audio_metadata(metadata: AudioMetadata) -> None:
    click.echo("Audio Metadata Analysis:")
    click.echo("  Duration:             {:.2f} seconds ({})".format(
        metadata.duration_seconds, format_duration(metadata.duration_seconds)))
    click.echo("  Sample Rate:          {} Hz".format(metadata.sample_rate))
    click.echo("  Bitrate:              {} kbps".format(metadata.bitrate))
    click.echo("  Channels:             {}".format(metadata.channels))

    click.echo("\nSRT Subtitle Analysis:")
    click.echo("  Total Segments:       {}".format(metadata.srt_segments))
    click.echo("  Speech Duration:      {:.2f} seconds ({})".format(
        metadata.srt_speech_duration, format_duration(metadata.srt_speech_duration)))
    click.echo("  Avg Segment Duration: {:.2f} seconds".format(
        metadata.srt_avg_segment_duration))

    density = metadata.speech_density
    if density is not None:
        click.echo("  Speech Density:       {:.2f}%".format(density))


def _print_recording_info(recording: RecordingInfo) -> None:
    click.echo("Recording: {}".format(recording.filename))
    click.echo("  Size (bytes):    {}".format(recording.size_bytes))
    click.echo("  Size (KB):       {:.2f} KB".format(recording.size_kb))
    click.echo("  Size (MB):       {:.4f} MB".format(recording.size_mb))
    click.echo("  Created:         {}".format(recording.created_date))
    click.echo("  Timestamp:       {}".format(recording.created_timestamp))
