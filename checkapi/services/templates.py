"""
EPP request templates.

The Jinja2 environment is built once per process and only read afterwards.
"""

import threading
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class TemplateKey(str, Enum):
    DOMAIN_CHECK_FEE = "domain_check_fee.xml"


class TemplateRenderer:
    """Renders named templates into request bytes."""

    def __init__(self, templates_dir: Path = _TEMPLATES_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["xml"]),
            undefined=StrictUndefined,
        )
        # Compile everything up front so no request pays for it
        self._templates = {key: self.env.get_template(key.value) for key in TemplateKey}

    def render(self, key: TemplateKey, data: Dict[str, Any]) -> bytes:
        return self._templates[key].render(**data).encode("utf-8")


_renderer: Optional[TemplateRenderer] = None
_renderer_lock = threading.Lock()


def get_template_renderer() -> TemplateRenderer:
    """Return the process-wide renderer, creating it on first use."""
    global _renderer
    if _renderer is None:
        with _renderer_lock:
            if _renderer is None:
                _renderer = TemplateRenderer()
    return _renderer
