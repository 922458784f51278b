"""
Logging utilities for the booking gateway

Provides centralized logging configuration: stdlib handlers through
dictConfig (optionally loaded from a YAML file) with structlog on top for
key/value event logging.
"""

import copy
import logging
import logging.config
import os
from typing import Optional

import structlog
import yaml

# Default logging configuration
DEFAULT_LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        },
        'detailed': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(lineno)d - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        },
        'json': {
            'format': '%(message)s'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'default',
            'stream': 'ext://sys.stdout'
        }
    },
    'root': {
        'level': 'INFO',
        'handlers': ['console']
    },
    'loggers': {
        'booking_gateway': {
            'level': 'INFO'
        }
    }
}


def configure_structlog(log_format: str = 'default') -> None:
    """Route structlog events through stdlib logging"""
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == 'json'
        else structlog.processors.KeyValueRenderer(key_order=['event'])
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def load_logging_config(config_path: Optional[str]) -> Optional[dict]:
    """Load a dictConfig mapping from a YAML file, None when unavailable"""
    if not config_path or not os.path.exists(config_path):
        return None
    try:
        with open(config_path, 'r') as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logging.getLogger(__name__).warning(f"Failed to load logging config from {config_path}: {e}")
        return None


def setup_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None
) -> None:
    """
    Setup logging configuration

    Args:
        config_path: Path to a YAML logging configuration file
        log_level: Override log level
        log_format: Override log format ('default', 'detailed', 'json')
    """
    config = load_logging_config(config_path) or copy.deepcopy(DEFAULT_LOGGING_CONFIG)

    # Override log level if specified
    if log_level:
        log_level = log_level.upper()
        for logger_config in config.get('loggers', {}).values():
            logger_config['level'] = log_level
        for handler_config in config.get('handlers', {}).values():
            handler_config['level'] = log_level
        if 'root' in config:
            config['root']['level'] = log_level

    # Override log format if specified
    if log_format and log_format in config.get('formatters', {}):
        for handler_config in config.get('handlers', {}).values():
            handler_config['formatter'] = log_format

    try:
        logging.config.dictConfig(config)
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        # Fallback to basic configuration
        logging.basicConfig(
            level=getattr(logging, log_level or 'INFO', logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        logging.getLogger(__name__).error(f"Failed to configure logging: {e}")

    configure_structlog(log_format or 'default')


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get logger instance

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog logger bound to the stdlib logger of that name
    """
    return structlog.get_logger(name)


# Key/value rendering through stdlib until setup_logging runs
configure_structlog()
