"""
Utility modules for the tag builder.
"""

from tag_builder.utils.config import Config
from tag_builder.utils.logging import get_default_log_file, setup_logging, setup_logging_from_config

__all__ = [
    'Config',
    'setup_logging',
    'setup_logging_from_config',
    'get_default_log_file',
]
