"""Entry point for the mailalias background service.

Usage:
    python -m mailalias [options]

Options:
    --base-url URL        Provider base URL (default: MAILALIAS_BASE_URL or https://mail.haltman.io)
    --store PATH          Credential store file (default: MAILALIAS_STORE or ~/.mailalias/storage.json)
    --dictionary PATH     Word list JSON (default: bundled data/dictionary.json)
    --host HOST           Listen address (default: 127.0.0.1)
    --port PORT           Listen port (default: 8420)
    --log-dir DIR         Also write log files to DIR
"""

import argparse
import asyncio

import uvicorn

from .config import DEFAULT_PORT, ServiceConfig
from .dispatcher import Dispatcher
from .logging import get_logger, setup_logging
from .provider import AliasClient
from .server import create_app
from .vault import JsonFileCredentialStore, session_keys

logger = get_logger("main")


def parse_args() -> tuple[ServiceConfig, str]:
    parser = argparse.ArgumentParser(description="mailalias background service")
    parser.add_argument("--base-url", default="", help="Provider base URL")
    parser.add_argument("--store", default="", help="Credential store file")
    parser.add_argument("--dictionary", default="", help="Word list JSON file")
    parser.add_argument("--host", default="", help="Listen address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Listen port")
    parser.add_argument("--log-dir", default="", help="Directory for log files")

    args = parser.parse_args()

    config = ServiceConfig(
        base_url=args.base_url,
        store_path=args.store,
        dictionary_path=args.dictionary,
        host=args.host,
        port=args.port,
    )
    return config, args.log_dir


async def run(config: ServiceConfig):
    store = JsonFileCredentialStore(config.store_path)
    client = AliasClient(config)
    dispatcher = Dispatcher(config, store, session_keys, client)

    logger.info("mailalias starting")
    logger.info(f"  Provider:   {config.base_url}")
    logger.info(f"  Store:      {config.store_path}")
    logger.info(f"  Dictionary: {config.dictionary_path}")
    logger.info(f"  Listening:  http://{config.host}:{config.port}")

    server = uvicorn.Server(uvicorn.Config(
        create_app(dispatcher),
        host=config.host,
        port=config.port,
        log_level="warning",
    ))
    try:
        await server.serve()
    finally:
        await client.close()
        logger.info("mailalias stopped")


def main():
    config, log_dir = parse_args()
    if log_dir:
        setup_logging(log_dir)
    try:
        asyncio.run(run(config))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
