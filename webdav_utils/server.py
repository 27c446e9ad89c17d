"""
WebDAV Server Startup - Directory share with CORS

Main entry point for the WsgiDAV server that exposes a local directory over
WebDAV to browser clients on any origin.

Run with:
    webdav-utils --root ./data --port 8011
    python -m webdav_utils
"""

import argparse
import logging
import logging.config
import os
import sys
import traceback

from cheroot import wsgi
from wsgidav import util
from wsgidav.fs_dav_provider import FilesystemProvider
from wsgidav.wsgidav_app import WsgiDAVApp

from webdav_utils.config import Settings, settings as default_settings
from webdav_utils.dav.config import create_webdav_config, get_logging_config
from webdav_utils.dav.cors_middleware import CorsHeadersMiddleware
from webdav_utils.version import __version__

logger = logging.getLogger(__name__)


def ensure_root_directory(path):
    """Create the served directory if absent and return its absolute path"""
    root = os.path.abspath(path)
    if os.path.exists(root) and not os.path.isdir(root):
        raise NotADirectoryError(f"Not a directory: {root}")
    os.makedirs(root, mode=0o755, exist_ok=True)
    return root


def create_wsgi_app(app_settings: Settings):
    """Create the WsgiDAV application wrapped in the CORS middleware"""
    logger.info("📝 Creating WebDAV application...")

    root_dir = ensure_root_directory(app_settings.WEBDAV_ROOT_DIR)
    logger.info(f"📂 Using root directory: {root_dir}")

    provider = FilesystemProvider(root_dir, readonly=app_settings.WEBDAV_READONLY)

    config = create_webdav_config(
        filesystem_provider=provider,
        host=app_settings.WEBDAV_HOST,
        port=app_settings.WEBDAV_PORT,
        verbose=app_settings.WEBDAV_VERBOSE,
        dir_browser=app_settings.WEBDAV_DIR_BROWSER,
    )
    dav_app = WsgiDAVApp(config)

    logger.info("✅ WebDAV application created")
    return CorsHeadersMiddleware(dav_app, app_settings.cors_headers())


def run_server(app, host="0.0.0.0", port=8011, numthreads=10):
    """Run the WSGI app using the Cheroot WSGI server"""
    version = f"webdav-utils/{__version__} {util.public_wsgidav_info} {wsgi.Server.version}"

    server = wsgi.Server(
        bind_addr=(host, port),
        wsgi_app=app,
        numthreads=numthreads,
        server_name=version,
    )

    logger.info(f"🚀 WebDAV server running on {host}:{port}")
    try:
        server.start()
    except KeyboardInterrupt:
        logger.info("🛑 Shutting down WebDAV server...")
    finally:
        server.stop()
        logger.info("✅ WebDAV server stopped")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="webdav-utils",
        description="Serve a directory over WebDAV with permissive CORS headers",
    )
    parser.add_argument('--host', type=str, help='Interface to bind')
    parser.add_argument('--port', type=int, help='Port to listen on')
    parser.add_argument('--root', type=str, help='Directory to serve (created if missing)')
    parser.add_argument('--readonly', action='store_true', default=None, help='Reject write methods')
    parser.add_argument('--verbose', type=int, choices=range(0, 6), help='WsgiDAV verbosity (0-5)')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def apply_overrides(base: Settings, args) -> Settings:
    """Return a copy of the settings with command line values applied"""
    overrides = {
        "WEBDAV_HOST": args.host,
        "WEBDAV_PORT": args.port,
        "WEBDAV_ROOT_DIR": args.root,
        "WEBDAV_READONLY": args.readonly,
        "WEBDAV_VERBOSE": args.verbose,
    }
    return base.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    app_settings = apply_overrides(default_settings, args)

    try:
        logging.config.dictConfig(
            get_logging_config(app_settings.WEBDAV_VERBOSE, app_settings.LOG_LEVEL)
        )

        logger.info("=" * 60)
        logger.info(f"📡 webdav-utils {__version__}")
        logger.info("=" * 60)

        app = create_wsgi_app(app_settings)

        logger.info(f"📂 Serving: {os.path.abspath(app_settings.WEBDAV_ROOT_DIR)}")
        logger.info(f"🔒 Locks: in-memory, readonly={app_settings.WEBDAV_READONLY}")

        run_server(
            app,
            host=app_settings.WEBDAV_HOST,
            port=app_settings.WEBDAV_PORT,
            numthreads=app_settings.WEBDAV_THREADS,
        )
    except Exception as e:
        logger.error(f"❌ Fatal error starting WebDAV server: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
