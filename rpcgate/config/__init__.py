"""Configuration module for rpcgate."""

from rpcgate.config.loader import load_config, get_config_path, save_config
from rpcgate.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path", "save_config"]
