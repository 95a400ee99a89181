"""Shared pytest fixtures for base16-sh tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from factories import (
    DEFAULT_DARK,
    DRACULA,
    GRAYSCALE_DARK,
    MONOKAI,
    SOLARIZED_LIGHT,
    VIM_TEMPLATE,
    write_scheme,
    write_template_repo,
)

from base16_sh.core.catalogs import Catalogs
from base16_sh.core.schemes import SchemeCatalog
from base16_sh.core.templates import TemplateCatalog


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A data directory with a handful of schemes and template repositories."""
    root = tmp_path / "data"
    base16 = root / "schemes" / "base16"
    base24 = root / "schemes" / "base24"

    write_scheme(base16, "monokai", name="Monokai", author="Wimer Hazenberg", palette=MONOKAI)
    write_scheme(
        base16,
        "solarized-light",
        name="Solarized Light",
        author="Ethan Schoonover",
        palette=SOLARIZED_LIGHT,
        variant="light",
    )
    write_scheme(base16, "grayscale-dark", name="Grayscale Dark", palette=GRAYSCALE_DARK)
    write_scheme(base16, "default-dark", name="Default Dark", palette=DEFAULT_DARK)
    write_scheme(base24, "dracula", name="Dracula", palette=DRACULA, system="base24")

    # Indexed by name, but unparsable: excluded from the color order
    (base16 / "broken.yaml").write_text("name: Broken\nauthor: nobody\n", encoding="utf-8")
    # Ignored: wrong extension
    (base16 / "README.md").write_text("# schemes\n", encoding="utf-8")

    templates = root / "templates"
    write_template_repo(templates, "base16-vim", {"default": VIM_TEMPLATE})
    write_template_repo(
        templates,
        "base24-foo",
        {"default": "foo {{scheme-slug}}\n", "extra": "extra {{base0D-hex-bgr}}\n"},
    )
    write_template_repo(
        templates,
        "tinted-shell",
        {"base16": "shell {{scheme-system}}\n", "base24": None},
    )
    # Invalid manifest: skipped entirely
    broken = templates / "base16-broken" / "templates"
    broken.mkdir(parents=True)
    (broken / "config.yaml").write_text("default: [unclosed\n", encoding="utf-8")
    (broken / "default.mustache").write_text("never\n", encoding="utf-8")
    # No manifest at all
    (templates / "base16-empty").mkdir()

    return root


@pytest.fixture
def scheme_catalog(data_dir: Path) -> SchemeCatalog:
    return SchemeCatalog.build(data_dir / "schemes")


@pytest.fixture
def template_catalog(data_dir: Path) -> TemplateCatalog:
    return TemplateCatalog.build(data_dir / "templates")


@pytest.fixture
def catalogs(data_dir: Path) -> Catalogs:
    return Catalogs.build(data_dir / "schemes", data_dir / "templates")
