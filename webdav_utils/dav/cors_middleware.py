"""
CORS Middleware - Cross-origin access to the WebDAV share

Wraps the WsgiDAV application so that every response carries the configured
CORS headers and preflight OPTIONS requests never reach WsgiDAV.
"""

import logging

logger = logging.getLogger(__name__)


class CorsHeadersMiddleware:
    """
    WSGI middleware that sets CORS response headers.

    OPTIONS requests are answered here with an empty 200 response. Every
    other request is passed to the wrapped app, and its response headers are
    rewritten so the CORS headers replace any same-named ones.
    """

    def __init__(self, next_app, cors_headers):
        self.next_app = next_app
        self.cors_headers = list(cors_headers)
        self._cors_names = {name.lower() for name, _ in self.cors_headers}

    def __call__(self, environ, start_response):
        method = environ.get("REQUEST_METHOD", "GET").upper()

        if method == "OPTIONS":
            logger.debug(f"Answering OPTIONS {environ.get('PATH_INFO', '/')}")
            headers = self.cors_headers + [("Content-Length", "0")]
            start_response("200 OK", headers)
            return [b""]

        def wrapped_start_response(status, headers, exc_info=None):
            headers = [
                (name, value) for name, value in headers
                if name.lower() not in self._cors_names
            ]
            headers.extend(self.cors_headers)
            return start_response(status, headers, exc_info)

        return self.next_app(environ, wrapped_start_response)
