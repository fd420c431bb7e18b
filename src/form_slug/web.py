"""FastAPI integration: serves the slug control's client-side script."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .config import STATIC_DIR, SlugSettings

logger = logging.getLogger(__name__)

SCRIPT_NAME = "form-slug.js"


def mount_static(app: FastAPI, path: Optional[str] = None, settings: Optional[SlugSettings] = None) -> str:
    """Mount the packaged static files on ``app``.

    Returns:
        URL of the client script
    """
    settings = settings or SlugSettings()
    path = (path or settings.static_url).rstrip("/")

    app.mount(path, StaticFiles(directory=str(STATIC_DIR)), name="form_slug_static")
    logger.info(f"Slug control assets mounted at {path}")

    return f"{path}/{SCRIPT_NAME}"
