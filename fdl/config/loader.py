"""Helpers for loading FDLConfig from TOML/JSON sources.

``load_config`` accepts:

* None -> default FDLConfig
* dict -> FDLConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from fdl.config.schema import FDLConfig
from fdl.errors import ConfigurationError

logger = logging.getLogger("fdl.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _detect_format(text: str) -> str:
    # TOML tables also open with "[", so only an object means JSON.
    return "json" if text.lstrip().startswith("{") else "toml"


def _read_source(source: Union[str, Path]) -> Dict[str, Any]:
    path = Path(source)
    if path.is_file():
        text = path.read_text(encoding="utf-8")
        suffix = path.suffix.lower()
        if suffix in {".toml", ".tml"}:
            fmt = "toml"
        elif suffix == ".json":
            fmt = "json"
        else:
            fmt = _detect_format(text)
        logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
    else:
        text = str(source)
        fmt = _detect_format(text)
        logger.info("Loading configuration from inline %s string", fmt)

    if fmt == "json":
        data = json.loads(text)
    else:
        data = tomllib.loads(text)

    if not isinstance(data, dict):
        raise ConfigurationError("Top-level configuration must be a mapping/dict")
    return data


def load_config(source: ConfigSource = None) -> FDLConfig:
    """Load FDLConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns FDLConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        FDLConfig instance.

    Raises:
        ConfigurationError: The source cannot be read, decoded or validated.
    """
    if source is None:
        logger.debug("No config source provided; using default FDLConfig")
        return FDLConfig.default()

    if isinstance(source, dict):
        data = source
    elif isinstance(source, (str, Path)):
        try:
            data = _read_source(source)
        except (OSError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
            raise ConfigurationError(f"Could not read configuration: {exc}") from exc
    else:
        raise TypeError(f"Unsupported config source type: {type(source)!r}")

    try:
        return FDLConfig.from_dict(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


__all__ = ["ConfigSource", "load_config"]
