"""
Template catalog.

Each sub-directory of the templates root is a template repository laid
out the way tinted-theming repositories are::

    {templates_dir}/base16-vim/templates/config.yaml
    {templates_dir}/base16-vim/templates/default.mustache

``config.yaml`` maps template names to metadata (only the names are used).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

import yaml

from .models import TemplateRecord

logger = logging.getLogger(__name__)

MANIFEST_PATH = Path("templates") / "config.yaml"
TEMPLATE_SUBDIR = "templates"
TEMPLATE_EXTENSION = ".mustache"
DEFAULT_TEMPLATE = "default"
REPO_PREFIXES: tuple[str, ...] = ("base16-", "base24-")


def strip_repo_prefix(repo: str) -> str:
    """Drop a ``base16-``/``base24-`` prefix from a repository name."""
    for prefix in REPO_PREFIXES:
        if repo.startswith(prefix):
            return repo[len(prefix) :]
    return repo


def template_key(repo: str, template: str, template_count: int) -> str:
    """Catalog key for one template of a repository.

    Single-template repositories and ``default`` templates are addressed
    by the repository name alone; anything else gets a ``-{template}``
    suffix.
    """
    base = strip_repo_prefix(repo)
    if template_count == 1 or template == DEFAULT_TEMPLATE:
        return base
    return f"{base}-{template}"


@dataclass(frozen=True)
class ManifestResult:
    """Outcome of reading a repository manifest: template names or an error."""

    repo_dir: Path
    names: tuple[str, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_manifest(repo_dir: Path) -> ManifestResult:
    """Read the declared template names of a repository without raising."""
    manifest = repo_dir / MANIFEST_PATH
    try:
        data = yaml.safe_load(manifest.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        return ManifestResult(repo_dir, error=f"unreadable manifest: {e}")
    except yaml.YAMLError as e:
        return ManifestResult(repo_dir, error=f"invalid manifest YAML: {e}")

    if not isinstance(data, dict):
        return ManifestResult(repo_dir, error="manifest is not a mapping")
    return ManifestResult(repo_dir, names=tuple(str(name) for name in data))


def scan_template_records(templates_dir: Path) -> dict[str, TemplateRecord]:
    """Collect template records from every repository under ``templates_dir``."""
    records: dict[str, TemplateRecord] = {}
    try:
        repo_dirs = sorted(p for p in templates_dir.iterdir() if p.is_dir())
    except OSError as e:
        logger.warning(f"Cannot list template directory {templates_dir}: {e}")
        return records

    manifests = [read_manifest(repo_dir) for repo_dir in repo_dirs]
    for skipped in (m for m in manifests if not m.ok):
        logger.warning(f"Skipping template repository {skipped.repo_dir.name}: {skipped.error}")

    for manifest in (m for m in manifests if m.ok):
        repo = manifest.repo_dir.name
        for template in manifest.names:
            source = manifest.repo_dir / TEMPLATE_SUBDIR / f"{template}{TEMPLATE_EXTENSION}"
            if not source.is_file():
                logger.debug(f"Template source missing for {repo}/{template}: {source}")
                continue
            key = template_key(repo, template, len(manifest.names))
            if key in records:
                logger.warning(
                    f"Template key '{key}' from {repo} replaces {records[key].source_repo}"
                )
            records[key] = TemplateRecord(key=key, path=str(source), source_repo=repo)
    return records


class TemplateCatalog:
    """Immutable index of template records."""

    def __init__(self, records: Mapping[str, TemplateRecord]) -> None:
        self._records: Mapping[str, TemplateRecord] = MappingProxyType(dict(records))
        self._names: tuple[str, ...] = tuple(sorted(self._records))

    @classmethod
    def build(cls, templates_dir: Path) -> TemplateCatalog:
        """Scan ``templates_dir``; a missing directory yields an empty catalog."""
        if not templates_dir.is_dir():
            logger.warning(f"Template directory not found: {templates_dir}")
            return cls({})

        catalog = cls(scan_template_records(templates_dir))
        logger.info(f"Loaded {len(catalog)} templates into index")
        return catalog

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    @property
    def records(self) -> Mapping[str, TemplateRecord]:
        return self._records

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def get(self, key: str) -> TemplateRecord | None:
        return self._records.get(key)

    def list_names(self) -> tuple[str, ...]:
        return self._names
