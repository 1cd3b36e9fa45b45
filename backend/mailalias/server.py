"""Local HTTP surface: the runtime message channel for extension UI pages."""

import json
import time

from fastapi import FastAPI, Request

from . import __version__
from .dispatcher import INVALID_MESSAGE, Dispatcher
from .vault.resolver import is_locked

_start_time = time.monotonic()


def create_app(dispatcher: Dispatcher) -> FastAPI:
    """Create the service's FastAPI app around one dispatcher."""
    app = FastAPI(title="mailalias", version=__version__)

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "locked": await is_locked(dispatcher.store),
            "unlocked": dispatcher.session.is_unlocked,
            "uptime_seconds": round(time.monotonic() - _start_time, 1),
        }

    @app.post("/message")
    async def message(request: Request):
        # Always 200: failures travel inside the envelope
        try:
            raw = json.loads(await request.body())
        except ValueError:
            return {"ok": False, "error": INVALID_MESSAGE}
        return await dispatcher.handle(raw)

    return app
