"""
Configuration settings for the webdav-utils server
"""

from typing import List, Tuple
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # WebDAV server
    WEBDAV_HOST: str = "0.0.0.0"  # All interfaces
    WEBDAV_PORT: int = 8011
    WEBDAV_ROOT_DIR: str = "./data"  # Created at startup if missing
    WEBDAV_READONLY: bool = False
    WEBDAV_DIR_BROWSER: bool = False  # HTML listing for GET on collections
    WEBDAV_THREADS: int = 10  # Cheroot worker threads
    WEBDAV_VERBOSE: int = 1  # WsgiDAV verbosity (0-5)

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS - Allow all origins so browser clients can talk to the share
    CORS_ALLOW_ORIGIN: str = "*"
    CORS_ALLOW_METHODS: List[str] = [
        "GET", "POST", "PUT", "DELETE", "OPTIONS",
        "PROPFIND", "PROPPATCH", "MKCOL", "COPY", "MOVE", "LOCK", "UNLOCK",
    ]
    CORS_ALLOW_HEADERS: List[str] = [
        "Authorization", "Content-Type", "Depth", "Destination",
        "If", "Lock-Token", "Overwrite", "Timeout",
    ]
    CORS_EXPOSE_HEADERS: List[str] = ["DAV", "ETag", "Lock-Token"]

    def cors_headers(self) -> List[Tuple[str, str]]:
        """CORS response headers as (name, value) pairs"""
        return [
            ("Access-Control-Allow-Origin", self.CORS_ALLOW_ORIGIN),
            ("Access-Control-Allow-Methods", ", ".join(self.CORS_ALLOW_METHODS)),
            ("Access-Control-Allow-Headers", ", ".join(self.CORS_ALLOW_HEADERS)),
            ("Access-Control-Expose-Headers", ", ".join(self.CORS_EXPOSE_HEADERS)),
        ]

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get global settings instance"""
    return settings
