"""
Command-line interface module.
"""

from .argument_parser import create_parser, parse_args
from .config import Configuration, load_config, save_config

__all__ = ["create_parser", "parse_args", "Configuration", "load_config", "save_config"]
