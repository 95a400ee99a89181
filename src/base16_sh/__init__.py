"""
base16-sh - color scheme index and template rendering service.

Indexes base16/base24 scheme definitions and community templates, resolves
misspelled scheme names, orders schemes by visual similarity and renders
templates against scheme palettes.
"""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core.errors import (
    Base16Error,
    CatalogError,
    NotFoundError,
    RenderError,
    SchemeNotFoundError,
    SchemeParseError,
    SourceReadError,
    TemplateNotFoundError,
)


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("base16-sh")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "Base16Error",
    "CatalogError",
    "NotFoundError",
    "SchemeNotFoundError",
    "TemplateNotFoundError",
    "SchemeParseError",
    "SourceReadError",
    "RenderError",
]
