"""Read the translation CSV back into per-locale JSON resources.

The CSV is the one ``export_csv`` writes: ``key, type`` followed by a
``<locale>_one, <locale>_other`` column pair per locale. Empty cells mean the
locale does not define the key itself. Copyright literals come back as the
stamped text, the ``{year}`` placeholder is not recovered.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from ..core.errors import LocaleDataError
from ..core.i18n import BASES_FILE, I18N
from ..core.values import decode_value

log = logging.getLogger(__name__)


def _locales_from_header(source: str, header: List[str]) -> List[str]:
    if header[:2] != ["key", "type"] or len(header) % 2:
        raise LocaleDataError(source, "header must be key,type followed by <locale>_one,<locale>_other pairs")
    locales = []
    for one, other in zip(header[2::2], header[3::2]):
        locale = one[: -len("_one")]
        if not one.endswith("_one") or other != f"{locale}_other":
            raise LocaleDataError(source, f"unexpected columns {one!r}, {other!r}")
        code = I18N.normalize(locale)
        if code is None:
            raise LocaleDataError(locale, "locale is not declared, add it with add-region first")
        locales.append(code)
    return locales


def _encode(kind: str, one: str, other: str) -> Any:
    if kind == "literal":
        return one
    if kind == "list":
        return one.split(",")
    if kind == "template":
        return {"template": one}
    if kind == "plural":
        return {"one": one, "other": other}
    raise ValueError(kind)


def import_csv(path: Union[str, Path]) -> Dict[str, Dict[str, Any]]:
    """Parse a translation CSV into ``{locale: {key: json value}}``.

    Every value is decoded once so a bad row fails here, not at the next load.
    """
    source = Path(path)
    tables: Dict[str, Dict[str, Any]] = {}
    try:
        fh = source.open(encoding="utf-8", newline="")
    except FileNotFoundError as e:
        raise LocaleDataError(source.name, "CSV file not found") from e
    with fh:
        reader = csv.reader(fh)
        header = next(reader, None)
        if header is None:
            raise LocaleDataError(source.name, "CSV file is empty")
        locales = _locales_from_header(source.name, header)
        for locale in locales:
            tables[locale] = {}

        for row in reader:
            if not row:
                continue
            if len(row) != len(header):
                raise LocaleDataError(source.name, f"line {reader.line_num}: expected {len(header)} columns")
            key, kind = row[0], row[1]
            for index, locale in enumerate(locales):
                one, other = row[2 + 2 * index], row[3 + 2 * index]
                if not one and not other:
                    continue
                if key in tables[locale]:
                    raise LocaleDataError(locale, f"{key}: defined twice")
                try:
                    raw = _encode(kind, one, other)
                except ValueError:
                    raise LocaleDataError(locale, f"{key}: unknown type {kind!r}") from None
                decode_value(locale, key, raw)
                tables[locale][key] = raw

    log.info(
        "Imported %s (%s)",
        source,
        ", ".join(f"{locale}={len(table)}" for locale, table in tables.items()),
    )
    return tables


def write_import(tables: Dict[str, Dict[str, Any]], directory: Union[str, Path]) -> List[Path]:
    """Write imported tables as ``<locale>.json`` plus the bases file, for review.

    The result can be loaded with ``--locale-dir``; the shipped resources are
    left alone.
    """
    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for locale, table in tables.items():
        path = target / f"{locale}.json"
        path.write_text(json.dumps(table, indent=2, ensure_ascii=False, sort_keys=True) + "\n", encoding="utf-8")
        written.append(path)

    bases = target / BASES_FILE
    bases.write_text(json.dumps(dict(I18N.bases()), indent=2) + "\n", encoding="utf-8")
    written.append(bases)

    missing = [locale for locale in I18N.bases() if locale not in tables]
    if missing:
        log.warning("CSV has no columns for %s, %s needs those files before it loads", ", ".join(missing), target)
    return written
