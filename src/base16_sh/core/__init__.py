"""Core indexing: color math, scheme/template catalogs, name resolution, variable derivation."""

from .catalogs import Catalogs
from .colors import distance, hex_to_rgb, is_greyscale, rgb_to_hex, saturation
from .config import ServerConfig, load_config
from .errors import (
    Base16Error,
    CatalogError,
    ConfigError,
    NotFoundError,
    RenderError,
    SchemeNotFoundError,
    SchemeParseError,
    SchemeReadError,
    SourceReadError,
    TemplateNotFoundError,
    TemplateReadError,
)
from .models import (
    SchemeDefinition,
    SchemeOrder,
    SchemeRecord,
    SchemeSystem,
    TemplateRecord,
    Variant,
)
from .names import canonical_name, sanitize_name
from .resolver import Resolution, find_exact, find_fuzzy, resolve_scheme, resolve_template
from .schemes import SchemeCatalog
from .templates import TemplateCatalog, template_key
from .variables import derive_variables

__all__ = [
    "Catalogs",
    "SchemeCatalog",
    "TemplateCatalog",
    "ServerConfig",
    "load_config",
    # Models
    "SchemeDefinition",
    "SchemeOrder",
    "SchemeRecord",
    "SchemeSystem",
    "TemplateRecord",
    "Variant",
    # Errors
    "Base16Error",
    "CatalogError",
    "ConfigError",
    "NotFoundError",
    "RenderError",
    "SchemeNotFoundError",
    "SchemeParseError",
    "SchemeReadError",
    "SourceReadError",
    "TemplateNotFoundError",
    "TemplateReadError",
    # Operations
    "Resolution",
    "canonical_name",
    "derive_variables",
    "distance",
    "find_exact",
    "find_fuzzy",
    "hex_to_rgb",
    "is_greyscale",
    "resolve_scheme",
    "resolve_template",
    "rgb_to_hex",
    "sanitize_name",
    "saturation",
    "template_key",
]
