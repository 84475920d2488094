from __future__ import annotations

from zeitkapsl_i18n.core.i18n import I18N
from zeitkapsl_i18n.core.validation import ERROR, INFO, WARNING, Issue, check_table, has_errors


def _find(issues, level, locale, key=None):
    return [i for i in issues if i.level == level and i.locale == locale and (key is None or i.key == key)]


def test_shipped_table_has_no_errors() -> None:
    issues = check_table()
    assert not has_errors(issues), [str(i) for i in issues if i.level == ERROR]


def test_key_missing_from_reference_is_reported() -> None:
    issues = check_table()
    found = _find(issues, WARNING, "de-DE", "settings.change_email.detail")
    assert len(found) == 1
    assert "not defined in en-US" in found[0].message


def test_untranslated_keys_are_reported() -> None:
    issues = check_table()
    assert _find(issues, WARNING, "de-DE", "hero.heading")
    assert _find(issues, WARNING, "de-AT", "hero.heading")
    assert not _find(issues, WARNING, "en-US")


def test_inherited_keys_are_summarized() -> None:
    issues = check_table()
    (note,) = _find(issues, INFO, "de-AT")
    assert "de-AT -> de-DE -> en-US" in note.message
    assert not _find(issues, INFO, "de-DE")


def test_kind_mismatch_is_an_error(locale_dir) -> None:
    path = locale_dir(de_DE={"login": {"template": "Anmelden {value}"}})
    I18N.load_locales(path, force=True)
    issues = check_table()
    assert has_errors(issues)
    (issue,) = _find(issues, ERROR, "de-DE", "login")
    assert "template value, but en-US defines a literal" in issue.message


def test_empty_text_is_an_error(locale_dir) -> None:
    path = locale_dir(de_DE={"login": ""})
    I18N.load_locales(path, force=True)
    issues = check_table()
    assert _find(issues, ERROR, "de-DE", "login")
    assert _find(issues, ERROR, "de-AT", "login")


def test_issue_str() -> None:
    assert str(Issue(WARNING, "de-DE", "x", "boom")) == "[warning] de-DE x: boom"
