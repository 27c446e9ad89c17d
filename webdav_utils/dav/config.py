"""
WebDAV Configuration - Directory Share Config

Configures the WsgiDAV application that serves the shared directory.
"""

import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)


def create_webdav_config(filesystem_provider, host="0.0.0.0", port=8011, verbose=1, dir_browser=False) -> Dict[str, Any]:
    """
    Create WsgiDAV configuration dictionary.

    Args:
        filesystem_provider: Instance of wsgidav FilesystemProvider
        host: Host to bind to (default: 0.0.0.0)
        port: Port to bind to (default: 8011)
        verbose: WsgiDAV verbosity level (0-5)
        dir_browser: Serve HTML listings for GET on collections

    Returns:
        dict: WsgiDAV configuration
    """
    config = {
        # Server settings
        "host": host,
        "port": port,

        # Logging is set up once by the entry point via dictConfig
        "logging": {
            "enable": False,
        },

        # Provider mapping - the whole share lives at "/"
        "provider_mapping": {
            "/": filesystem_provider,
        },

        # No authentication: None selects SimpleDomainController
        "http_authenticator": {
            "domain_controller": None,
            "accept_basic": True,
            "accept_digest": False,
            "default_to_digest": False,
        },

        # Anonymous access everywhere
        "simple_dc": {
            "user_mapping": {"*": True},
        },

        "verbose": verbose,

        "dir_browser": {
            "enable": dir_browser,
            "response_trailer": "webdav-utils",
            "davmount": False,
        },

        # In-memory lock manager, lost on restart
        "lock_storage": True,

        # In-memory dead property storage
        "property_manager": True,

        "add_header_MS_Author_Via": False,

        # CORS is handled by CorsHeadersMiddleware in front of the app
        "cors": {
            "allow_origin": None,
        },
    }

    logger.debug(f"📋 WebDAV config created: host={host}, port={port}")
    logger.debug(f"📁 Provider mapping: / -> {filesystem_provider!r}")

    return config


def get_logging_config(verbose_level=1, log_level="INFO") -> Dict[str, Any]:
    """
    Create logging configuration for the server process.

    Args:
        verbose_level: WsgiDAV verbosity level (0-5)
        log_level: Level name for the application loggers

    Returns:
        dict: Configuration for logging.config.dictConfig
    """
    # Map verbose level to Python logging level
    level_map = {
        0: logging.ERROR,
        1: logging.WARNING,
        2: logging.INFO,
        3: logging.DEBUG,
        4: logging.DEBUG,
        5: logging.DEBUG,
    }

    wsgidav_level = level_map.get(verbose_level, logging.INFO)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            "wsgidav": {
                "handlers": ["console"],
                "level": wsgidav_level,
                "propagate": False,
            },
            "webdav_utils": {
                "handlers": ["console"],
                "level": log_level.upper(),
                "propagate": False,
            },
        },
        "root": {
            "level": logging.WARNING,
            "handlers": ["console"],
        },
    }
