"""HTTP surface for the invitation page.

One URL, two verbs, as the page expects:
    - `GET /rsvp?guest=<guest_id>` returns the guest lookup envelope.
    - `POST /rsvp` with a JSON body stores the answer and returns the submission envelope.

Envelopes are always sent with status 200; the page reads `success`, not the status code.
"""

from __future__ import annotations

import logging

from aiohttp import web

from src.app import App
from src.rsvp.endpoint import get_guest, post_rsvp

logger = logging.getLogger(__name__)

RSVP_PATH = "/rsvp"

APP_KEY = web.AppKey("rsvp_app", App)

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@web.middleware
async def cors_middleware(request: web.Request, handler) -> web.StreamResponse:
    if request.method == "OPTIONS":
        return web.Response(headers=_CORS_HEADERS)

    response = await handler(request)
    response.headers.update(_CORS_HEADERS)
    return response


async def handle_get_guest(request: web.Request) -> web.Response:
    app = request.app[APP_KEY]
    return web.json_response(await get_guest(app.pool, request.query.get("guest")))


async def handle_post_rsvp(request: web.Request) -> web.Response:
    app = request.app[APP_KEY]
    return web.json_response(await post_rsvp(app.pool, await request.read()))


def create_web_app(app: App) -> web.Application:
    """Build the aiohttp application serving the RSVP envelopes."""

    web_app = web.Application(middlewares=[cors_middleware])
    web_app[APP_KEY] = app
    web_app.router.add_get(RSVP_PATH, handle_get_guest)
    web_app.router.add_post(RSVP_PATH, handle_post_rsvp)
    return web_app


async def start_web(app: App, host: str, port: int) -> web.AppRunner:
    """Start serving in the current event loop. Call `await runner.cleanup()` on shutdown."""

    runner = web.AppRunner(create_web_app(app))
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    logger.info("rsvp http listening host=%s port=%d path=%s", host, port, RSVP_PATH)
    return runner
