"""Export the translation table to formats other tooling consumes."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from ..core.i18n import I18N, REFERENCE_LOCALE, supported_locales
from ..core.values import Template, TextList, Value

log = logging.getLogger(__name__)

DEFAULT_CSV_FILE = "translations.csv"


def _web_entries(key: str, value: Value) -> List[Tuple[str, Any]]:
    if isinstance(value, TextList):
        return [(key, list(value.items))]
    if isinstance(value, Template):
        if value.is_plural:
            return [(f"{key}.singular", value.one), (f"{key}.plural", value.other)]
        return [(key, value.one)]
    return [(key, value.text)]


def export_web_json(directory: Union[str, Path]) -> List[Path]:
    """Write one flattened ``<locale>.json`` per locale, inheritance resolved."""
    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for locale in supported_locales():
        data: Dict[str, Any] = {}
        for key, value in I18N.table(locale).items():
            data.update(_web_entries(key, value))
        path = target / f"{locale}.json"
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        log.info("Exported %s with %d translations", path.name, len(data))
        written.append(path)
    return written


def _csv_type(value: Value) -> str:
    if isinstance(value, Template) and value.is_plural:
        return "plural"
    return value.kind


def _csv_cells(value: Value) -> Tuple[str, str]:
    if isinstance(value, TextList):
        return ",".join(value.items), ""
    if isinstance(value, Template):
        return value.one, value.other or ""
    return value.text, ""


def export_csv(path: Union[str, Path] = DEFAULT_CSV_FILE) -> Path:
    """Write every key with each locale's own (not inherited) values.

    Columns: ``key, type, <locale>_one, <locale>_other`` for each locale in
    sorted order.
    """
    locales = sorted(supported_locales())
    keys = sorted({key for locale in locales for key in I18N.own(locale)})

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8", newline="") as fh:
        writer = csv.writer(fh)
        header = ["key", "type"]
        for locale in locales:
            header += [f"{locale}_one", f"{locale}_other"]
        writer.writerow(header)

        for key in keys:
            definitions = {locale: I18N.own(locale).get(key) for locale in locales}
            kind_source = definitions.get(REFERENCE_LOCALE) or next(v for v in definitions.values() if v is not None)
            row = [key, _csv_type(kind_source)]
            for locale in locales:
                value = definitions[locale]
                row += list(_csv_cells(value)) if value is not None else ["", ""]
            writer.writerow(row)

    log.info("Saved %d translations to %s", len(keys), out)
    return out
