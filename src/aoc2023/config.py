from __future__ import annotations

import os
from pathlib import Path


INPUT_DIR_ENV = "AOC2023_INPUT_DIR"
DEFAULT_INPUT_DIR = "inputs"


def input_dir(override: str | Path | None = None) -> Path:
    """Directory holding ``day_NN.txt`` inputs: explicit override, then env, then ./inputs."""
    if override is not None:
        return Path(override).expanduser()
    env = os.environ.get(INPUT_DIR_ENV)
    if env:
        return Path(env).expanduser()
    return Path(DEFAULT_INPUT_DIR)


def input_path(day: int, override_dir: str | Path | None = None) -> Path:
    return input_dir(override_dir) / f"day_{day:02d}.txt"
