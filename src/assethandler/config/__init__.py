"""Configuration utilities for the asset handler."""

from .loader import Config, ContainerSettings, LoggingSettings, load_config

__all__ = ["Config", "ContainerSettings", "LoggingSettings", "load_config"]
