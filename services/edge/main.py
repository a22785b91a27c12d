"""
Edge Service
Handles: the chat UI's static files and the /api/chat proxy to the AI service
Port: 8000

One inbound chat request means exactly one upstream call. Nothing is retried,
cached or kept between requests.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

import config
from assets import get_index_page, get_static_asset
from exceptions import (
    ChatAPIException,
    InvalidBodyException,
    InvalidMessageException,
    MessageTooLongException,
    UnexpectedErrorException,
)
from middleware import cors
from models import ChatRequest, ChatResponse, ErrorResponse, HealthResponse
from upstream import extract_reply, send_to_ai

# ── Logging ───────────────────────────────────────────────────────────────────
logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

# ── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(title="ChatBGD Edge", version="1.0.0")

app.middleware("http")(cors)


@app.exception_handler(ChatAPIException)
async def chat_api_error(request: Request, exc: ChatAPIException):
    return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=exc.detail).model_dump())


# ── Helpers ───────────────────────────────────────────────────────────────────

def message_length(text: str) -> int:
    """Length in UTF-16 code units, the way the browser counts it."""
    return len(text.encode("utf-16-le")) // 2


async def parse_chat_request(request: Request) -> ChatRequest:
    try:
        body = await request.json()
    except ValueError:
        raise InvalidBodyException()
    if not isinstance(body, dict):
        raise InvalidBodyException()

    message = body.get("message")
    if not message or not isinstance(message, str):
        raise InvalidMessageException()
    if message_length(message) > config.MAX_MESSAGE_LENGTH:
        raise MessageTooLongException(config.MAX_MESSAGE_LENGTH)

    system_prompt = body.get("systemPrompt")
    if system_prompt is not None and not isinstance(system_prompt, str):
        raise InvalidMessageException("Invalid request: systemPrompt must be a string")

    return ChatRequest(message=message, systemPrompt=system_prompt)


# ── Endpoints ─────────────────────────────────────────────────────────────────

@app.post("/api/chat")
async def chat(request: Request):
    chat_request = await parse_chat_request(request)
    logger.info("Chat request from %s (%d chars)", request.url.hostname, len(chat_request.message))

    try:
        data = await send_to_ai(chat_request.message, chat_request.systemPrompt)
        text, reasoning = extract_reply(data)
    except ChatAPIException:
        raise
    except Exception:
        logger.exception("Chat request failed")
        raise UnexpectedErrorException()

    return ChatResponse(response=text, reasoning=reasoning).model_dump(exclude_none=True)


@app.get("/debug")
async def debug(request: Request):
    """Which settings are configured. Names only, never values."""
    return {
        "domain": request.url.hostname,
        "allEnvKeys": config.configured_keys(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/health")
async def health():
    return HealthResponse(status="ok", service="edge")


@app.get("/{path:path}")
async def static_files(path: str):
    asset = get_static_asset("/" + path)
    if asset:
        content, content_type = asset
        return Response(
            content=content,
            media_type=content_type,
            headers={"Cache-Control": "public, max-age=86400"},
        )

    # Unknown paths get the chat page
    index = get_index_page()
    if index is not None:
        return Response(
            content=index,
            media_type="text/html; charset=UTF-8",
            headers={"Cache-Control": "public, max-age=3600"},
        )

    return PlainTextResponse("Not Found", status_code=404)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
