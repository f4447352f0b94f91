# pastebin/main.py

import logging
from pathlib import Path
from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from pastebin.api import auth, comments, pastes
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send
from pastebin.core.config import LOG_LEVEL, MAX_FORM_BYTES, SECRET_KEY_GENERATED
from pastebin.database import init_db


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


init_db()

app = FastAPI(title="pastebin")


def warn_if_ephemeral_secret():
    if SECRET_KEY_GENERATED:
        logger.warning(
            "JWT_SECRET_KEY is not set; sessions are signed with a per-process key "
            "and are only valid on the worker that issued them"
        )


warn_if_ephemeral_secret()


class BodySizeLimitMiddleware:
    """
    Rejects request bodies larger than MAX_FORM_BYTES with 413.
    A declared Content-Length is checked up front; bodies without one
    are counted as they stream in.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit = MAX_FORM_BYTES
        path = scope.get("path", "")
        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None:
            try:
                size = int(content_length)
            except ValueError:
                await PlainTextResponse("Invalid Content-Length", status_code=400)(scope, receive, send)
                return
            if size > limit:
                logger.warning("Rejected %d byte body on %s", size, path)
                await PlainTextResponse("Request body too large", status_code=413)(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    logger.warning("Rejected streamed body over %d bytes on %s", limit, path)
                    # Raised inside body parsing; FastAPI re-raises HTTPException as is.
                    raise HTTPException(status_code=413, detail="Request body too large")
            return message

        await self.app(scope, limited_receive, send)


app.add_middleware(BodySizeLimitMiddleware)


app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(auth.router)
app.include_router(pastes.router)
app.include_router(comments.router)


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8080)
