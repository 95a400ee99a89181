"""
Scheme and template name resolution.

Scheme names are resolved exact-then-fuzzy:

1. Sanitize the input (same whitelist as canonical names).
2. Case-insensitive exact lookup.
3. Jaro-Winkler similarity against every catalog name, best score at or
   above the threshold.

Anything other than an exact canonical hit is reported as a redirect so
callers always expose the canonical identity of a fuzzy match.
"""

from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz.distance import JaroWinkler

from .errors import SchemeNotFoundError, TemplateNotFoundError
from .models import SchemeRecord, TemplateRecord
from .names import sanitize_name
from .schemes import SchemeCatalog
from .templates import TemplateCatalog

DEFAULT_FUZZY_THRESHOLD = 0.8


def find_exact(catalog: SchemeCatalog, query: str) -> SchemeRecord | None:
    """Case-insensitive exact lookup."""
    return catalog.get(query.lower())


def find_fuzzy(
    catalog: SchemeCatalog,
    query: str,
    threshold: float = DEFAULT_FUZZY_THRESHOLD,
) -> SchemeRecord | None:
    """Most similar catalog name scoring at least ``threshold``.

    Scores are Jaro-Winkler similarities in [0, 1]. On equal scores the
    first name in alphabetical order wins.
    """
    query = query.lower()
    best_name: str | None = None
    best_score = threshold
    for name in catalog.names:
        score = JaroWinkler.similarity(query, name)
        if score < threshold:
            continue
        if best_name is None or score > best_score:
            best_name, best_score = name, score
    return catalog.get(best_name) if best_name is not None else None


@dataclass(frozen=True)
class Resolution:
    """A resolved scheme and whether the caller should redirect to it."""

    record: SchemeRecord
    redirect: bool

    @property
    def name(self) -> str:
        return self.record.name


def resolve_scheme(
    catalog: SchemeCatalog,
    raw_name: str,
    threshold: float = DEFAULT_FUZZY_THRESHOLD,
) -> Resolution:
    """Resolve user input to a scheme.

    Raises:
        SchemeNotFoundError: If neither exact nor fuzzy matching succeeds.
    """
    query = sanitize_name(raw_name)
    if not query:
        raise SchemeNotFoundError(raw_name)

    record = find_exact(catalog, query) or find_fuzzy(catalog, query, threshold)
    if record is None:
        raise SchemeNotFoundError(query)
    return Resolution(record=record, redirect=record.name != query)


def resolve_template(catalog: TemplateCatalog, raw_name: str) -> TemplateRecord:
    """Direct template lookup (no fuzzy matching).

    Raises:
        TemplateNotFoundError: If no template has this key.
    """
    key = sanitize_name(raw_name)
    record = (catalog.get(key) or catalog.get(key.lower())) if key else None
    if record is None:
        raise TemplateNotFoundError(key or raw_name)
    return record
