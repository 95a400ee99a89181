"""
Rendering gateway.

Two renderers:
- Mustache (chevron) for community templates, fed with the variables
  derived from a scheme plus navigation metadata.
- Jinja2 for the service's own HTML pages (index and scheme preview).

Template sources are trusted input; nothing is sandboxed and failures are
raised to the caller, never retried.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import chevron
from chevron.tokenizer import ChevronError
from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from base16_sh.core.colors import hex_to_rgb
from base16_sh.core.errors import RenderError, TemplateReadError
from base16_sh.core.models import TemplateRecord
from base16_sh.core.variables import TemplateVariables

logger = logging.getLogger(__name__)

# HTML page templates shipped with the package
PAGES_DIR = Path(__file__).parent / "templates"


# =============================================================================
# Mustache templates
# =============================================================================


def read_template_source(record: TemplateRecord) -> str:
    """Read the mustache source behind a template record.

    Raises:
        TemplateReadError: If the file cannot be read.
    """
    path = Path(record.path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateReadError(f"Failed to read template: {e}", path) from e


def render_source(source: str, variables: Mapping[str, str]) -> str:
    """Render mustache ``source`` with ``variables``.

    Raises:
        RenderError: If the template does not compile.
    """
    try:
        return chevron.render(template=source, data=dict(variables))
    except ChevronError as e:
        raise RenderError(f"Template failed to render: {e}") from e


def render_template(
    record: TemplateRecord,
    variables: TemplateVariables,
    extra: Mapping[str, str | None] | None = None,
) -> str:
    """Render a catalog template for a scheme.

    Args:
        record: Template to render.
        variables: Scheme variables (see ``derive_variables``).
        extra: Additional metadata such as ``scheme-prev``/``scheme-next``;
            ``None`` values are left out.

    Raises:
        TemplateReadError: If the source cannot be read.
        RenderError: If rendering fails.
    """
    data: dict[str, str] = dict(variables)
    data["template-key"] = record.key
    data["template-repo"] = record.source_repo
    if extra:
        data.update({k: v for k, v in extra.items() if v is not None})

    source = read_template_source(record)
    try:
        return render_source(source, data)
    except RenderError as e:
        logger.error(f"Template '{record.key}' failed to render: {e}")
        raise RenderError(e.message, Path(record.path)) from e


# =============================================================================
# HTML pages
# =============================================================================


def _swatch_text_filter(hex_value: Any) -> str:
    """Black or white text, whichever reads better on the given background."""
    r, g, b = hex_to_rgb(str(hex_value or ""))
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return "#000000" if luminance > 140 else "#ffffff"


def create_jinja_env(pages_dir: Path | None = None) -> Environment:
    """Create the Jinja2 environment for HTML pages."""
    env = Environment(
        loader=FileSystemLoader(str(pages_dir or PAGES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )

    from base16_sh import __version__

    env.globals["_version"] = __version__
    env.filters["swatch_text"] = _swatch_text_filter
    return env


# Module-level singleton
_env: Environment | None = None


def get_jinja_env() -> Environment:
    """Get the shared Jinja2 environment (lazy singleton)."""
    global _env
    if _env is None:
        _env = create_jinja_env()
    return _env


def render_page(template_name: str, **context: Any) -> str:
    """Render one of the service's HTML pages.

    Raises:
        RenderError: If the page template fails.
    """
    env = get_jinja_env()
    try:
        return env.get_template(template_name).render(**context)
    except TemplateError as e:
        raise RenderError(f"Page '{template_name}' failed to render: {e}") from e
