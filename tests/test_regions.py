from __future__ import annotations

import json
from pathlib import Path

import pytest

from zeitkapsl_i18n.core.errors import LocaleDataError
from zeitkapsl_i18n.core.i18n import I18N, base_of, chain, resolve, supported_locales
from zeitkapsl_i18n.infra.regions import add_region, default_base


def test_new_region_loads_as_overlay(tmp_path: Path) -> None:
    written = add_region("de-CH", tmp_path)
    assert sorted(p.name for p in written) == ["bases.json", "de-AT.json", "de-CH.json", "de-DE.json", "en-US.json"]
    assert json.loads((tmp_path / "de-CH.json").read_text(encoding="utf-8")) == {}

    I18N.load_locales(tmp_path, force=True)
    assert "de-CH" in supported_locales()
    assert base_of("de_ch") == "de-DE"
    assert chain("de-CH") == ["de-CH", "de-DE", "en-US"]
    assert resolve("de-CH", "login") == "Anmelden"
    assert resolve("de-CH", "months.long")[0] == "Januar"
    assert resolve("de-CH", "hero.heading") == "simple. secure. private."


def test_region_with_explicit_base(tmp_path: Path) -> None:
    add_region("de-LI", tmp_path, base="de_at")
    I18N.load_locales(tmp_path, force=True)
    assert resolve("de-LI", "months.long")[0] == "Jänner"


def test_existing_locale_files_are_kept(locale_dir) -> None:
    path = locale_dir(de_AT={"login": "Einloggen"})
    I18N.load_locales(path, force=True)

    written = add_region("de-CH", path, base="de-AT")
    assert sorted(p.name for p in written) == ["bases.json", "de-CH.json"]

    I18N.load_locales(path, force=True)
    assert resolve("de-CH", "login") == "Einloggen"


def test_default_base_is_first_locale_of_the_language() -> None:
    assert default_base("de-CH") == "de-DE"
    assert default_base("en-GB") == "en-US"
    with pytest.raises(LocaleDataError, match="pass a base"):
        default_base("fr-CA")


@pytest.mark.parametrize(
    "region, base, message",
    [
        ("deCH", None, "invalid region format"),
        ("de-ch", None, "invalid region format"),
        ("de-AT", None, "already exists"),
        ("de-CH", "fr-FR", "not declared"),
    ],
)
def test_add_region_rejects_bad_input(tmp_path: Path, region, base, message) -> None:
    with pytest.raises(LocaleDataError, match=message):
        add_region(region, tmp_path, base=base)
    assert not (tmp_path / "bases.json").exists()


def test_bases_file_must_be_valid(locale_dir) -> None:
    path = locale_dir()
    (path / "bases.json").write_text('{"en-US": null, "de-DE": 3}', encoding="utf-8")
    with pytest.raises(LocaleDataError, match="base locale or null"):
        I18N.load_locales(path, force=True)

    (path / "bases.json").write_text('{"en-US": null, "de-DE": "de-AT"}', encoding="utf-8")
    with pytest.raises(LocaleDataError, match="not declared"):
        I18N.load_locales(path, force=True)
