"""
Pytest configuration and shared fixtures.

Provides settings, a served directory and a small WSGI request helper so the
application can be exercised without opening sockets.
"""

import io
from pathlib import Path
from wsgiref.util import setup_testing_defaults

import pytest

from webdav_utils.config import Settings
from webdav_utils.server import create_wsgi_app


class WSGIResponse:
    """Captured status, headers and body of a WSGI call."""

    def __init__(self, status, headers, body):
        self.status = status
        self.headers = headers
        self.body = body

    @property
    def status_code(self) -> int:
        return int(self.status.split(" ", 1)[0])

    def header(self, name):
        for key, value in self.headers:
            if key.lower() == name.lower():
                return value
        return None

    def header_values(self, name):
        return [value for key, value in self.headers if key.lower() == name.lower()]


def call_wsgi(app, method, path="/", body=b"", headers=None) -> WSGIResponse:
    """Send one request through a WSGI app and collect the response."""
    environ = {}
    setup_testing_defaults(environ)
    environ["REQUEST_METHOD"] = method
    environ["PATH_INFO"] = path
    environ["wsgi.input"] = io.BytesIO(body)
    environ["CONTENT_LENGTH"] = str(len(body))
    for name, value in (headers or {}).items():
        key = name.upper().replace("-", "_")
        if key not in ("CONTENT_TYPE", "CONTENT_LENGTH"):
            key = "HTTP_" + key
        environ[key] = value

    captured = {}

    def start_response(status, response_headers, exc_info=None):
        captured["status"] = status
        captured["headers"] = list(response_headers)
        return lambda data: None

    result = app(environ, start_response)
    try:
        data = b"".join(result)
    finally:
        if hasattr(result, "close"):
            result.close()
    return WSGIResponse(captured["status"], captured["headers"], data)


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    """Directory path to serve; not created yet."""
    return tmp_path / "data"


@pytest.fixture
def app_settings(root_dir: Path) -> Settings:
    """Settings pointing at the temporary root directory."""
    return Settings(WEBDAV_ROOT_DIR=str(root_dir), WEBDAV_VERBOSE=0)


@pytest.fixture
def readonly_settings(root_dir: Path) -> Settings:
    """Read-only settings pointing at the temporary root directory."""
    return Settings(WEBDAV_ROOT_DIR=str(root_dir), WEBDAV_VERBOSE=0, WEBDAV_READONLY=True)


# ============================================================================
# Application Fixtures
# ============================================================================

@pytest.fixture
def dav_app(app_settings: Settings):
    """Full application: CORS middleware in front of WsgiDAV."""
    return create_wsgi_app(app_settings)


@pytest.fixture
def wsgi_call():
    """Helper that sends one request through a WSGI app."""
    return call_wsgi
