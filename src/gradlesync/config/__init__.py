"""Configuration loading entrypoints."""

from gradlesync.config.loader import load_config

__all__ = ["load_config"]
