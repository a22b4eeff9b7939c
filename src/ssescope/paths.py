from __future__ import annotations

from pathlib import Path

CONFIG_FILENAME = "ssescope.yaml"


def find_config_file(start: Path | None = None) -> Path | None:
    """Find ssescope.yaml by walking up from `start` (defaults to cwd).

    Lets `ssescope` pick up project settings when invoked from subdirectories.
    """

    cur = (start or Path.cwd()).resolve()
    for p in [cur, *cur.parents]:
        candidate = p / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
