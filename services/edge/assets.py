"""Edge Service — static assets for the chat UI."""

import logging
import os
from typing import Optional

import config

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    ".html": "text/html; charset=UTF-8",
    ".css": "text/css; charset=UTF-8",
    ".js": "application/javascript; charset=UTF-8",
    ".json": "application/json; charset=UTF-8",
}
DEFAULT_CONTENT_TYPE = "text/plain"


def load_static_assets(directory: str) -> dict:
    """Read every file under `directory` into a {url_path: text} map."""
    assets = {}
    if not os.path.isdir(directory):
        logger.warning("Static directory %s not found, serving no assets", directory)
        return assets

    for root, _dirs, files in os.walk(directory):
        for name in files:
            full_path = os.path.join(root, name)
            rel_path = os.path.relpath(full_path, directory).replace(os.sep, "/")
            try:
                with open(full_path, encoding="utf-8") as f:
                    assets["/" + rel_path] = f.read()
            except UnicodeDecodeError:
                logger.warning("Skipping non-text static file %s", full_path)

    logger.info("Loaded %d static assets from %s", len(assets), directory)
    return assets


STATIC_ASSETS = load_static_assets(config.STATIC_DIR)


def content_type_for(path: str) -> str:
    _, ext = os.path.splitext(path)
    return CONTENT_TYPES.get(ext.lower(), DEFAULT_CONTENT_TYPE)


def get_static_asset(path: str) -> Optional[tuple[str, str]]:
    """Returns (content, content_type), or None for paths we don't ship."""
    if path in ("", "/"):
        path = "/index.html"

    content = STATIC_ASSETS.get(path)
    if content is None:
        return None
    return content, content_type_for(path)


def get_index_page() -> Optional[str]:
    return STATIC_ASSETS.get("/index.html")
