"""Launcher C source template."""

import re
from pathlib import Path
from typing import Optional, Union

from .errors import TemplateLoadFailure

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
DEFAULT_TEMPLATE = "main-dynamic.c"

IMAGE_NAME_TOKEN = "{{IMAGE_NAME}}"
METHOD_NAME_TOKEN = "{{METHOD_NAME}}"
PLACEHOLDER_PATTERN = re.compile(re.escape(IMAGE_NAME_TOKEN) + "|" + re.escape(METHOD_NAME_TOKEN))


def load_template(path: Optional[Union[str, Path]] = None) -> str:
    """Read a template, the bundled main-dynamic.c by default."""
    if path is None:
        path = TEMPLATES_DIR / DEFAULT_TEMPLATE
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateLoadFailure(f"Resource not found: {path} ({e})") from e


def render(template: str, image_name: str, method_name: str) -> str:
    """Substitute both placeholders in a single pass; substituted text is never rescanned."""
    values = {IMAGE_NAME_TOKEN: image_name, METHOD_NAME_TOKEN: method_name}
    return PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(0)], template)


def conventional_name(name: str) -> str:
    """Entry point symbol for a launcher, e.g. "my-app" -> "run_my_app"."""
    return "run_" + re.sub(r"[^A-Za-z0-9_]", "_", name)
