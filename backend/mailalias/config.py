"""Service configuration with CLI > env var > defaults precedence."""

import os
from dataclasses import dataclass
from pathlib import Path


MAILALIAS_DIR = Path.home() / ".mailalias"
DEFAULT_BASE_URL = "https://mail.haltman.io"
DEFAULT_DICTIONARY = Path(__file__).parent / "data" / "dictionary.json"
DEFAULT_PORT = 8420


@dataclass
class ServiceConfig:
    """Configuration for the alias background service."""
    base_url: str = ""
    dictionary_path: str = ""
    store_path: str = ""
    host: str = ""
    port: int = DEFAULT_PORT
    # None means no timeout: a hung provider call hangs its own task only
    http_timeout: float | None = None

    def __post_init__(self):
        # Apply env var defaults before CLI overrides
        if not self.base_url:
            self.base_url = os.getenv("MAILALIAS_BASE_URL", DEFAULT_BASE_URL)
        self.base_url = self.base_url.rstrip("/")
        if not self.dictionary_path:
            self.dictionary_path = os.getenv("MAILALIAS_DICTIONARY", str(DEFAULT_DICTIONARY))
        if not self.store_path:
            self.store_path = os.getenv(
                "MAILALIAS_STORE", str(MAILALIAS_DIR / "storage.json")
            )
        if not self.host:
            self.host = os.getenv("MAILALIAS_HOST", "127.0.0.1")
        if self.port == DEFAULT_PORT:
            env_port = os.getenv("MAILALIAS_PORT")
            if env_port:
                self.port = int(env_port)
