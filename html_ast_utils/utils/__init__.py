"""
Utility modules for configuration and logging.
"""

from html_ast_utils.utils.config import Config, get_default_config
from html_ast_utils.utils.logging import setup_logging, setup_logging_from_config, log_exception

__all__ = [
    'Config',
    'get_default_config',
    'setup_logging',
    'setup_logging_from_config',
    'log_exception',
]
