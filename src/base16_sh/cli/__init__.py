"""
base16-sh CLI package.

- main.py: the typer application and its commands
- utils.py: shared helpers (version, configuration, catalog loading)
"""

from base16_sh.cli.main import app, main
from base16_sh.cli.utils import get_version, version_callback

__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]
