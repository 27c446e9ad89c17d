"""
webdav-utils - Directory over WebDAV with permissive CORS

Serves a local directory through WsgiDAV behind a small CORS middleware so
browser-based clients on any origin can browse, edit and lock files.

Components:
- config: Environment-driven application settings
- dav.config: WsgiDAV configuration and logging dictionaries
- dav.cors_middleware: WSGI middleware injecting CORS headers
- server: App wiring and the cheroot entry point
"""

from webdav_utils.version import __version__
