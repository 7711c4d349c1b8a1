"""Configuration schema and loading for fdl."""

from .schema import DecodeConfig, FDLConfig, ReaderConfig
from .loader import ConfigSource, load_config

__all__ = [
    "DecodeConfig",
    "FDLConfig",
    "ReaderConfig",
    "ConfigSource",
    "load_config",
]
