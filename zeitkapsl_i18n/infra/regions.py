"""Scaffold a regional overlay locale such as ``de-AT``."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from ..core.errors import LocaleDataError
from ..core.i18n import BASES_FILE, I18N, check_bases, read_resource

log = logging.getLogger(__name__)

REGION_RE = re.compile(r"^[a-z]{2}-[A-Z]{2}$")


def default_base(region: str) -> str:
    """First declared locale of the region's language, e.g. de-DE for de-CH."""
    language = region.split("-")[0].lower()
    for locale in I18N.bases():
        if locale.split("-")[0].lower() == language:
            return locale
    raise LocaleDataError(region, f"no declared locale for language {language!r}, pass a base locale")


def add_region(region: str, directory: Union[str, Path], base: Optional[str] = None) -> List[Path]:
    """Declare ``region`` as an overlay of ``base`` inside ``directory``.

    Writes an empty ``<region>.json``, copies resources of the declared locales
    that the directory does not hold yet, and writes the bases file with the
    new entry. Existing locale files are never overwritten. Returns the files
    written.
    """
    if not REGION_RE.match(region):
        raise LocaleDataError(region, "invalid region format, expected xx-YY (e.g. de-AT)")
    if I18N.normalize(region) is not None:
        raise LocaleDataError(region, "region already exists")

    if base is None:
        parent = default_base(region)
    else:
        parent = I18N.normalize(base)
        if parent is None:
            raise LocaleDataError(region, f"base locale {base!r} is not declared")

    bases = dict(I18N.bases())
    bases[region] = parent
    check_bases(bases)

    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    for locale in I18N.bases():
        path = target / f"{locale}.json"
        if path.exists():
            continue
        data = read_resource(locale, I18N.directory())
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        written.append(path)

    overlay = target / f"{region}.json"
    if overlay.exists():
        log.warning("%s already exists, keeping its contents", overlay)
    else:
        overlay.write_text("{}\n", encoding="utf-8")
        written.append(overlay)

    manifest = target / BASES_FILE
    manifest.write_text(json.dumps(bases, indent=2) + "\n", encoding="utf-8")
    written.append(manifest)

    log.info("Region %s added with base %s in %s", region, parent, target)
    return written
