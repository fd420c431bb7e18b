"""Slug control configuration

Defaults can be overridden from a YAML file and from FORM_SLUG_* environment
variables, in that order.
"""

import os
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .exceptions import FormSlugError

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).parent
TEMPLATE_DIR = PACKAGE_DIR / "controls" / "template"
STATIC_DIR = PACKAGE_DIR / "static"

DEFAULT_TOGGLE_BOX = ".ipub-slug-box"
DEFAULT_TEMPLATE = "default.html"
DEFAULT_METHOD_NAME = "add_slug"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class SlugSettings:
    """Settings applied to newly created slug controls."""

    # Client-side behaviour
    toggle_box_selector: str = DEFAULT_TOGGLE_BOX
    onetime_auto_update: bool = True
    force_edit_update: bool = False

    # Templates
    template_dir: Path = field(default_factory=lambda: TEMPLATE_DIR)
    default_template: str = DEFAULT_TEMPLATE

    # Registration
    method_name: str = DEFAULT_METHOD_NAME

    # Assets
    static_url: str = "/form-slug"

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        self.template_dir = Path(self.template_dir)

    @property
    def default_template_path(self) -> Path:
        path = self.template_dir / self.default_template
        if not path.is_file():
            # Custom template dirs need not ship their own default
            return TEMPLATE_DIR / DEFAULT_TEMPLATE
        return path

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlugSettings":
        """Build settings from a plain mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in (data or {}).items():
            if key in known:
                values[key] = value
            else:
                logger.warning(f"Ignoring unknown slug setting: {key}")
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SlugSettings":
        """Load settings from a YAML file.

        The file may either hold the settings at top level or under a
        ``form_slug`` key.
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if isinstance(data, dict) and "form_slug" in data:
            data = data["form_slug"] or {}

        if not isinstance(data, dict):
            logger.error(f"Slug settings in {path} are not a mapping")
            raise FormSlugError(f'Slug settings file "{path}" must contain a mapping.')

        logger.debug(f"Loaded slug settings from {path}")
        return cls.from_dict(data)

    def load_from_env(self) -> "SlugSettings":
        """Override settings from FORM_SLUG_* environment variables."""
        self.toggle_box_selector = os.getenv("FORM_SLUG_TOGGLE_BOX", self.toggle_box_selector)
        self.onetime_auto_update = _env_bool("FORM_SLUG_ONETIME_AUTO_UPDATE", self.onetime_auto_update)
        self.force_edit_update = _env_bool("FORM_SLUG_FORCE_EDIT_UPDATE", self.force_edit_update)

        template_dir = os.getenv("FORM_SLUG_TEMPLATE_DIR")
        if template_dir:
            self.template_dir = Path(template_dir)
        self.default_template = os.getenv("FORM_SLUG_DEFAULT_TEMPLATE", self.default_template)

        self.method_name = os.getenv("FORM_SLUG_METHOD_NAME", self.method_name)
        self.static_url = os.getenv("FORM_SLUG_STATIC_URL", self.static_url)
        self.log_level = os.getenv("FORM_SLUG_LOG_LEVEL", self.log_level)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "toggle_box_selector": self.toggle_box_selector,
            "onetime_auto_update": self.onetime_auto_update,
            "force_edit_update": self.force_edit_update,
            "template_dir": str(self.template_dir),
            "default_template": self.default_template,
            "method_name": self.method_name,
            "static_url": self.static_url,
            "log_level": self.log_level,
        }


def load_settings(path: Optional[Union[str, Path]] = None) -> SlugSettings:
    """Load settings: defaults, then the YAML file (if any), then env vars."""
    if path is None:
        env_path = os.getenv("FORM_SLUG_CONFIG")
        path = Path(env_path) if env_path else None

    if path is not None and Path(path).exists():
        settings = SlugSettings.from_yaml(path)
    else:
        if path is not None:
            logger.warning(f"Slug settings file not found: {path}, using defaults")
        settings = SlugSettings()

    return settings.load_from_env()
