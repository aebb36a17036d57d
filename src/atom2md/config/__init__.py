"""Configuration loading and logging setup for atom2md."""

from atom2md.config.logging import setup_logging
from atom2md.config.manager import load_config
from atom2md.config.schema import CollisionPolicy, ConvertConfig, LogLevel

__all__ = ["CollisionPolicy", "ConvertConfig", "LogLevel", "load_config", "setup_logging"]
