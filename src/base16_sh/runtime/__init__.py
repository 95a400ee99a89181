"""
HTTP runtime (FastAPI + uvicorn) for the scheme index.

Example usage:
    >>> from pathlib import Path
    >>> from base16_sh.core import Catalogs
    >>> from base16_sh.runtime import create_app
    >>>
    >>> catalogs = Catalogs.build(Path("data/schemes"), Path("data/templates"))
    >>> app = create_app(catalogs)
    >>> # Run with uvicorn, or: base16-sh serve
"""

from base16_sh.runtime.logging import log_with_context, setup_logging
from base16_sh.runtime.rendering import render_page, render_source, render_template
from base16_sh.runtime.server import build_app, create_app, run_server

__all__ = [
    "build_app",
    "create_app",
    "log_with_context",
    "render_page",
    "render_source",
    "render_template",
    "run_server",
    "setup_logging",
]
