"""Configuration system for selection operators."""

from config.config_loader import load_config, Config
from config.selection_factory import create_selection_from_config

__all__ = ['load_config', 'Config', 'create_selection_from_config']
