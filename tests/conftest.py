from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from zeitkapsl_i18n.core.config import settings
from zeitkapsl_i18n.core.i18n import I18N


@pytest.fixture(autouse=True)
def fresh_table(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "DEFAULT_LOCALE", "en-US")
    monkeypatch.setattr(settings, "MISSING_KEY_POLICY", "key")
    monkeypatch.setattr(settings, "LOCALE_DIR", "")
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "")
    I18N.reset()
    yield
    I18N.reset()


MONTHS = ["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"]


@pytest.fixture
def locale_dir(tmp_path: Path) -> Callable[..., Path]:
    """Write a small set of locale files; unspecified locales get a minimal default."""

    def _write(**tables: Dict[str, Any]) -> Path:
        defaults = {
            "en-US": {"login": "Sign in", "months.long": MONTHS, "settings.up.to.users": {"template": "Up to {value} users"}},
            "de-DE": {"login": "Anmelden"},
            "de-AT": {},
        }
        for code, table in tables.items():
            defaults[code.replace("_", "-")] = table
        for code, table in defaults.items():
            (tmp_path / f"{code}.json").write_text(json.dumps(table), encoding="utf-8")
        return tmp_path

    return _write
