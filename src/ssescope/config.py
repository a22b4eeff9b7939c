from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .paths import find_config_file

logger = logging.getLogger(__name__)

JSON_MODES = ("auto", "on", "off")
ENV_JSON_MODE = "SSESCOPE_JSON_MODE"


@dataclass
class ViewerConfig:
    # auto|on|off; auto defers to the JSON-prevalence check.
    json_mode: str = "auto"

    # Shown for absent fields.
    placeholder: str = "-"

    # Data column is truncated past this many characters.
    max_data_width: int = 80

    source_path: Path | None = None


def _as_str(v: Any) -> str | None:
    return v if isinstance(v, str) and v else None


def _as_mode(v: Any) -> str | None:
    s = _as_str(v)
    if s is None:
        return None
    s = s.strip().lower()
    return s if s in JSON_MODES else None


def _as_positive_int(v: Any) -> int | None:
    # bool is an int subclass; reject it explicitly.
    if isinstance(v, bool) or not isinstance(v, int):
        return None
    return v if v > 0 else None


def load_viewer_config(path: Path | None = None, *, start: Path | None = None) -> ViewerConfig:
    """Load ssescope.yaml if present; otherwise return defaults.

    Invalid values are ignored one field at a time. SSESCOPE_JSON_MODE
    overrides the file's json_mode.
    """

    if path is not None and not path.exists():
        raise FileNotFoundError(str(path))

    yaml_path = path if path is not None else find_config_file(start)

    data: dict[str, Any] = {}
    if yaml_path is not None:
        loaded = yaml.safe_load(yaml_path.read_text(encoding="utf-8"))
        if isinstance(loaded, dict):
            data = loaded
        elif loaded is not None:
            logger.warning("ignoring %s: expected a mapping", yaml_path)

    cfg = ViewerConfig(source_path=yaml_path)

    cfg.json_mode = _as_mode(data.get("json_mode")) or cfg.json_mode
    placeholder = data.get("placeholder")
    cfg.placeholder = placeholder if isinstance(placeholder, str) else cfg.placeholder
    cfg.max_data_width = _as_positive_int(data.get("max_data_width")) or cfg.max_data_width

    env_mode = os.environ.get(ENV_JSON_MODE)
    if env_mode is not None:
        mode = _as_mode(env_mode)
        if mode is None:
            logger.warning("ignoring %s=%r: expected one of %s", ENV_JSON_MODE, env_mode, ", ".join(JSON_MODES))
        else:
            cfg.json_mode = mode

    return cfg
