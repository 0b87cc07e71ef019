"""YAML configuration for the recordings store location."""

from __future__ import annotations

import os
from dataclasses import dataclass

import click
import yaml

from audio_core.store import DEFAULT_STORE_ROOT

CONFIG_FILENAMES = ("audio-core.yml", "audio-core.yaml")


@dataclass
class AudioCoreConfig:
    """Settings read from audio-core.yml."""

    store_root: str = DEFAULT_STORE_ROOT


def find_config(directory: str) -> str | None:
    """Look for a config file in a directory."""
    for name in CONFIG_FILENAMES:
        path = os.path.join(directory, name)
        if os.path.isfile(path):
            return path
    return None


def load_config(path: str | None = None) -> AudioCoreConfig:
    """Load settings from PATH, or from audio-core.yml in the working directory.

    A relative store_root is resolved against the config file's directory.
    Without any config file the defaults apply.
    """
    if path is None:
        path = find_config(os.getcwd())
        if path is None:
            return AudioCoreConfig()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise click.ClickException("Cannot read config {}: {}".format(path, e))
    except yaml.YAMLError as e:
        raise click.ClickException("Invalid YAML in config {}: {}".format(path, e))

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise click.ClickException(
            "Config {} must be a mapping, got {}".format(path, type(data).__name__)
        )

    store_root = str(data.get("store_root") or DEFAULT_STORE_ROOT)
    if not os.path.isabs(store_root):
        config_dir = os.path.dirname(os.path.abspath(path))
        store_root = os.path.join(config_dir, store_root)

    return AudioCoreConfig(store_root=store_root)
