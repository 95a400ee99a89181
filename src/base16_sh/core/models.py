"""
Catalog record and scheme definition types.

Records are created once while a catalog is built and are frozen.
Definitions are parsed on demand from the file a record points at.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Enums
# =============================================================================


class SchemeSystem(StrEnum):
    """Palette system a scheme belongs to."""

    BASE16 = "base16"
    BASE24 = "base24"


class Variant(StrEnum):
    """Scheme brightness variant."""

    DARK = "dark"
    LIGHT = "light"
    OTHER = "other"


class SchemeOrder(StrEnum):
    """Orderings available for scheme listing and navigation."""

    ALPHA = "alpha"
    COLOR = "color"


# Slots every scheme of a system is expected to define
SYSTEM_SLOTS: dict[SchemeSystem, tuple[str, ...]] = {
    SchemeSystem.BASE16: tuple(f"base0{d}" for d in "0123456789ABCDEF"),
    SchemeSystem.BASE24: tuple(f"base0{d}" for d in "0123456789ABCDEF")
    + tuple(f"base1{d}" for d in "01234567"),
}

DEFAULT_SLOT_COLOR = "#000000"

_SLOT_KEY = re.compile(r"(?i)base([0-9a-f]{2})")


def normalize_slot_key(key: str) -> str:
    """Normalize a palette key: ``base0a`` / ``BASE0A`` -> ``base0A``.

    Keys that do not look like a slot are returned unchanged.
    """
    match = _SLOT_KEY.fullmatch(key)
    if match is None:
        return key
    return f"base{match.group(1).upper()}"


# =============================================================================
# Records
# =============================================================================


class SchemeRecord(BaseModel):
    """A scheme entry in the catalog."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Canonical (lowercase, sanitized) name")
    path: str = Field(description="Path of the scheme definition file")
    system: SchemeSystem


class TemplateRecord(BaseModel):
    """A template entry in the catalog."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Lookup key, e.g. 'vim' or 'foo-extra'")
    path: str = Field(description="Path of the mustache source file")
    source_repo: str = Field(description="Repository directory name")


# =============================================================================
# Scheme definition
# =============================================================================


class SchemeDefinition(BaseModel):
    """Parsed contents of a scheme YAML file."""

    model_config = ConfigDict(frozen=True)

    system: str | None = None
    name: str
    author: str
    variant: Variant | None = None
    palette: dict[str, str]

    @field_validator("name", "author", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        # YAML happily turns names like "1984" or "Yes" into non-strings
        if isinstance(value, (int, float, bool)):
            return str(value)
        return value

    @field_validator("system", mode="before")
    @classmethod
    def _coerce_system(cls, value: Any) -> Any:
        if value is None:
            return None
        return str(value)

    @field_validator("variant", mode="before")
    @classmethod
    def _coerce_variant(cls, value: Any) -> Any:
        if value is None:
            return None
        text = str(value).strip().lower()
        if text in (Variant.DARK, Variant.LIGHT):
            return text
        return Variant.OTHER

    @field_validator("palette", mode="before")
    @classmethod
    def _normalize_palette(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {normalize_slot_key(str(k)): "" if v is None else str(v) for k, v in value.items()}

    def system_or(self, fallback: SchemeSystem = SchemeSystem.BASE16) -> SchemeSystem:
        """The declared system if it is a known one, else ``fallback``."""
        try:
            return SchemeSystem(self.system) if self.system else fallback
        except ValueError:
            return fallback

    def with_default_slots(self, system: SchemeSystem | None = None) -> dict[str, str]:
        """Palette with any missing standard slot filled with black."""
        palette = dict(self.palette)
        for slot in SYSTEM_SLOTS[system or self.system_or()]:
            palette.setdefault(slot, DEFAULT_SLOT_COLOR)
        return palette
