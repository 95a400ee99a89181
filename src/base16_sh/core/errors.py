"""
Error types for scheme/template indexing, resolution and rendering.
"""

from pathlib import Path


class Base16Error(Exception):
    """Base exception for all base16-sh errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the source path if available."""
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class CatalogError(Base16Error):
    """
    Raised when a catalog cannot be built at all.

    Examples:
    - Scheme root directory missing
    - Scheme root is not a directory
    """

    pass


class ConfigError(Base16Error):
    """Raised when the server configuration is invalid."""

    pass


class NotFoundError(Base16Error):
    """Raised when no exact or fuzzy match exists for a requested name."""

    kind = "resource"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{self.kind.capitalize()} '{name}' not found")


class SchemeNotFoundError(NotFoundError):
    kind = "scheme"


class TemplateNotFoundError(NotFoundError):
    kind = "template"


class SchemeParseError(Base16Error):
    """
    Raised when a scheme definition cannot be parsed.

    Examples:
    - Invalid YAML
    - Missing name, author or palette
    - Palette that is not a mapping
    """

    pass


class SourceReadError(Base16Error):
    """Raised when an indexed file cannot be read at request time."""

    pass


class SchemeReadError(SourceReadError):
    pass


class TemplateReadError(SourceReadError):
    pass


class RenderError(Base16Error):
    """Raised when a template fails to compile or render."""

    pass
