"""
Upstream AI client.

One POST per chat message. Upstream status codes are mapped to the errors the
browser understands (429 stays 429, everything else becomes 500), and the
reply text is dug out of whichever response shape the upstream returned.
"""

import logging
from typing import Optional

import httpx

import config
from exceptions import RateLimitedException, UnexpectedErrorException, UpstreamFailedException

logger = logging.getLogger(__name__)

NO_RESPONSE_TEXT = "No response received"


def build_payload(message: str, system_prompt: Optional[str] = None) -> dict:
    payload = {"input": message, "model": config.AI_MODEL}
    if system_prompt:
        payload["instructions"] = system_prompt
    return payload


def get_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=config.AI_TIMEOUT_SECONDS)


async def send_to_ai(message: str, system_prompt: Optional[str] = None) -> dict:
    """Call the AI service and return the JSON result."""
    headers = {"Content-Type": "application/json"}
    if config.AI_API_KEY:
        headers["Authorization"] = f"Bearer {config.AI_API_KEY}"

    logger.info("Calling AI service at %s", config.AI_SERVICE_URL)
    try:
        async with get_client() as client:
            response = await client.post(
                config.AI_SERVICE_URL,
                headers=headers,
                json=build_payload(message, system_prompt),
            )
    except httpx.TimeoutException:
        logger.warning("AI service timed out after %ss", config.AI_TIMEOUT_SECONDS)
        raise UpstreamFailedException()
    except httpx.HTTPError as e:
        logger.warning("AI service unreachable: %s", e)
        raise UpstreamFailedException()

    logger.info("AI service responded with %s", response.status_code)

    if response.status_code == 429:
        raise RateLimitedException()
    if response.status_code >= 500:
        raise UpstreamFailedException("AI service error. Please try again later.")
    if not response.is_success:
        logger.warning("AI service rejected the request: %s", response.status_code)
        raise UpstreamFailedException()

    try:
        return response.json()
    except ValueError:
        logger.error("AI service returned a non-JSON body")
        raise UnexpectedErrorException()


# --------------- Response shapes ---------------

def _first(items, **match):
    if not isinstance(items, list):
        return None
    for item in items:
        if isinstance(item, dict) and all(item.get(k) == v for k, v in match.items()):
            return item
    return None


def _non_empty(value) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def _output_text(data: dict) -> Optional[str]:
    message = _first(data.get("output"), type="message", role="assistant")
    if not message:
        return None
    content = message.get("content")
    if not isinstance(content, list):
        return None
    for part in content:
        if isinstance(part, dict) and part.get("type") == "output_text" and _non_empty(part.get("text")):
            return part["text"]
    return None


def _plain_text(data: dict) -> Optional[str]:
    text = _non_empty(data.get("response"))
    if text:
        return text
    result = data.get("result")
    if isinstance(result, dict):
        return _non_empty(result.get("response"))
    return None


def _choice_message(data: dict) -> dict:
    choices = data.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        message = choices[0].get("message")
        if isinstance(message, dict):
            return message
    return {}


def _output_reasoning(data: dict) -> Optional[str]:
    item = _first(data.get("output"), type="reasoning")
    if not item:
        return None
    for key, part_type in (("content", "reasoning_text"), ("summary", "summary_text")):
        parts = item.get(key)
        if not isinstance(parts, list):
            continue
        texts = [
            p["text"] for p in parts
            if isinstance(p, dict) and p.get("type") == part_type and _non_empty(p.get("text"))
        ]
        if texts:
            return "\n\n".join(texts)
    return None


def extract_reply(data) -> tuple[str, Optional[str]]:
    """
    Returns (text, reasoning) from an upstream payload.

    Tries the Responses-style `output` list first, then a bare `response`
    string (or `result.response`), then OpenAI-style `choices`. Anything
    malformed just falls through to the next shape.
    """
    if not isinstance(data, dict):
        return NO_RESPONSE_TEXT, None

    choice = _choice_message(data)
    text = (
        _output_text(data)
        or _plain_text(data)
        or _non_empty(choice.get("content"))
        or NO_RESPONSE_TEXT
    )
    reasoning = (
        _output_reasoning(data)
        or _non_empty(choice.get("reasoning_content"))
        or _non_empty(choice.get("reasoning"))
    )
    return text, reasoning
