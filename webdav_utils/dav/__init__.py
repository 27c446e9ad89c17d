"""
WebDAV Module - WsgiDAV wiring

Components:
- config: WsgiDAV configuration and logging dictionaries
- cors_middleware: WSGI middleware adding CORS headers and answering preflights
"""

from webdav_utils.dav.config import create_webdav_config, get_logging_config
from webdav_utils.dav.cors_middleware import CorsHeadersMiddleware

__all__ = ["create_webdav_config", "get_logging_config", "CorsHeadersMiddleware"]
