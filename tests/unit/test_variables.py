"""Tests for template variable derivation."""

from __future__ import annotations

from base16_sh.core.catalogs import Catalogs
from base16_sh.core.models import SchemeDefinition
from base16_sh.core.variables import (
    derive_variables,
    scheme_variables,
    slot_variables,
    slugify,
    slugify_underscored,
)

from factories import MONOKAI


def make_definition(**overrides: object) -> SchemeDefinition:
    data: dict[str, object] = {
        "system": "base16",
        "name": "Monokai Pro",
        "author": "Wimer Hazenberg",
        "variant": "dark",
        "palette": MONOKAI,
    }
    data.update(overrides)
    return SchemeDefinition.model_validate(data)


class TestSlotVariables:
    def test_full_expansion(self) -> None:
        variables = slot_variables("base08", "#f92672")
        assert variables["base08-hex"] == "f92672"
        assert variables["base08-hex-bgr"] == "7226f9"
        assert (
            variables["base08-hex-r"],
            variables["base08-hex-g"],
            variables["base08-hex-b"],
        ) == ("f9", "26", "72")
        assert (
            variables["base08-rgb-r"],
            variables["base08-rgb-g"],
            variables["base08-rgb-b"],
        ) == ("249", "38", "114")
        assert (
            variables["base08-rgb16-r"],
            variables["base08-rgb16-g"],
            variables["base08-rgb16-b"],
        ) == ("63993", "9766", "29298")
        assert (
            variables["base08-dec-r"],
            variables["base08-dec-g"],
            variables["base08-dec-b"],
        ) == ("0.976471", "0.149020", "0.447059")

    def test_hash_is_optional(self) -> None:
        assert slot_variables("base00", "272822") == slot_variables("base00", "#272822")

    def test_malformed_value_only_gets_hex(self) -> None:
        assert slot_variables("base00", "#abc") == {"base00-hex": "abc"}

    def test_empty_value(self) -> None:
        assert slot_variables("base00", "") == {"base00-hex": ""}

    def test_extremes(self) -> None:
        white = slot_variables("base07", "#ffffff")
        assert white["base07-rgb16-r"] == "65535"
        assert white["base07-dec-g"] == "1.000000"
        black = slot_variables("base00", "#000000")
        assert black["base00-dec-b"] == "0.000000"


class TestSchemeVariables:
    def test_names_and_slugs(self) -> None:
        variables = scheme_variables(make_definition())
        assert variables["scheme-name"] == "Monokai Pro"
        assert variables["scheme-author"] == "Wimer Hazenberg"
        assert variables["scheme-slug"] == "monokai-pro"
        assert variables["scheme-slug-underscored"] == "monokai_pro"
        assert variables["scheme-system"] == "base16"

    def test_dark_variant_flag(self) -> None:
        variables = scheme_variables(make_definition())
        assert variables["scheme-variant"] == "dark"
        assert variables["scheme-is-dark-variant"] == "true"
        assert "scheme-is-light-variant" not in variables

    def test_light_variant_flag(self) -> None:
        variables = scheme_variables(make_definition(variant="Light"))
        assert variables["scheme-is-light-variant"] == "true"
        assert "scheme-is-dark-variant" not in variables

    def test_no_variant(self) -> None:
        variables = scheme_variables(make_definition(variant=None))
        assert "scheme-variant" not in variables
        assert "scheme-is-dark-variant" not in variables

    def test_system_fallback(self) -> None:
        variables = scheme_variables(make_definition(system=None), system="base24")
        assert variables["scheme-system"] == "base24"

    def test_slugify(self) -> None:
        assert slugify("Tomorrow Night Eighties") == "tomorrow-night-eighties"
        assert slugify_underscored("Tomorrow Night") == "tomorrow_night"


class TestDeriveVariables:
    def test_contains_scheme_and_palette(self) -> None:
        variables = derive_variables(make_definition())
        assert variables["scheme-name"] == "Monokai Pro"
        assert variables["base0D-hex"] == "66d9ef"
        assert "base10-hex" not in variables

    def test_palette_override(self) -> None:
        variables = derive_variables(make_definition(), palette={"base00": "#010203"})
        assert variables["base00-rgb-b"] == "3"
        assert "base08-hex" not in variables

    def test_catalog_fills_default_slots(self, catalogs: Catalogs) -> None:
        record = catalogs.resolve_scheme("dracula").record
        variables = catalogs.derive_variables(record)
        assert variables["scheme-system"] == "base24"
        assert variables["base17-hex"] == "ff92df"

    def test_catalog_variables_for_base16(self, catalogs: Catalogs) -> None:
        record = catalogs.resolve_scheme("monokai").record
        variables = catalogs.derive_variables(record)
        assert variables["base08-rgb-r"] == "249"
        assert "base10-hex" not in variables
