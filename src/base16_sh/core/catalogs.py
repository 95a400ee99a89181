"""
Catalog bundle handed to the service layer.

Both catalogs are built once at startup and passed explicitly to whatever
needs them (the FastAPI app keeps the bundle on ``app.state``).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .models import SchemeDefinition, SchemeOrder, SchemeRecord, TemplateRecord
from .resolver import DEFAULT_FUZZY_THRESHOLD, Resolution
from .resolver import resolve_scheme as _resolve_scheme
from .resolver import resolve_template as _resolve_template
from .schemes import SchemeCatalog
from .templates import TemplateCatalog
from .variables import TemplateVariables, derive_variables


@dataclass(frozen=True)
class Catalogs:
    """Scheme and template catalogs plus the fuzzy matching threshold."""

    schemes: SchemeCatalog
    templates: TemplateCatalog
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD

    @classmethod
    def build(
        cls,
        schemes_dir: Path,
        templates_dir: Path,
        fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
    ) -> Catalogs:
        """Scan both directory trees.

        Raises:
            CatalogError: If the scheme root does not exist.
        """
        return cls(
            schemes=SchemeCatalog.build(schemes_dir),
            templates=TemplateCatalog.build(templates_dir),
            fuzzy_threshold=fuzzy_threshold,
        )

    def resolve_scheme(self, name: str) -> Resolution:
        return _resolve_scheme(self.schemes, name, self.fuzzy_threshold)

    def resolve_template(self, name: str) -> TemplateRecord:
        return _resolve_template(self.templates, name)

    def list_scheme_names(self, order: SchemeOrder = SchemeOrder.ALPHA) -> tuple[str, ...]:
        return self.schemes.list_names(order)

    def list_template_names(self) -> tuple[str, ...]:
        return self.templates.list_names()

    def neighbors(
        self, name: str, order: SchemeOrder = SchemeOrder.ALPHA
    ) -> tuple[str | None, str | None]:
        return self.schemes.neighbors(name, order)

    def load_definition(self, record: SchemeRecord) -> SchemeDefinition:
        return self.schemes.load_definition(record)

    def derive_variables(self, record: SchemeRecord) -> TemplateVariables:
        """Variables for a scheme, re-read from disk, with default slots filled."""
        definition = self.load_definition(record)
        return derive_variables(
            definition,
            palette=definition.with_default_slots(definition.system_or(record.system)),
            system=record.system,
        )
