"""
Scheme definition loading.

Schemes are YAML files of the form::

    system: "base16"
    name: "Monokai"
    author: "Wimer Hazenberg"
    variant: "dark"
    palette:
      base00: "#272822"
      ...

Every scalar is read as text (``yaml.BaseLoader``), so unquoted colors such
as ``000000`` keep their digits instead of becoming integers.

``load_scheme_file`` raises on failure and is used at request time.
``try_load_scheme`` returns a ``LoadResult`` instead, for catalog builds
where a broken file is logged and skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import SchemeParseError, SchemeReadError
from .models import SchemeDefinition, SchemeRecord

logger = logging.getLogger(__name__)

SCHEME_EXTENSION = ".yaml"


def parse_scheme(content: str, path: Path | None = None) -> SchemeDefinition:
    """Parse scheme YAML text into a SchemeDefinition.

    Raises:
        SchemeParseError: If the YAML is invalid or misses required fields.
    """
    try:
        data = yaml.load(content, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise SchemeParseError(f"Invalid YAML: {e}", path) from e

    if not isinstance(data, dict):
        raise SchemeParseError("Scheme must be a YAML mapping", path)

    try:
        return SchemeDefinition.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise SchemeParseError(f"Invalid scheme ({fields})", path) from e


def load_scheme_file(path: Path) -> SchemeDefinition:
    """Read and parse a scheme file.

    Raises:
        SchemeReadError: If the file cannot be read.
        SchemeParseError: If the contents are not a valid scheme.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemeReadError(f"Failed to read scheme: {e}", path) from e
    return parse_scheme(content, path)


def read_scheme_source(record: SchemeRecord) -> bytes:
    """Raw bytes of a scheme file, for serving it unmodified."""
    path = Path(record.path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise SchemeReadError(f"Failed to read scheme: {e}", path) from e


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a lenient scheme load: either a definition or an error."""

    record: SchemeRecord
    definition: SchemeDefinition | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.definition is not None


def try_load_scheme(record: SchemeRecord) -> LoadResult:
    """Load a scheme without raising; failures are captured in the result."""
    try:
        return LoadResult(record, definition=load_scheme_file(Path(record.path)))
    except (SchemeReadError, SchemeParseError) as e:
        return LoadResult(record, error=str(e))
