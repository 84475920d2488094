from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..core.i18n import I18N, REFERENCE_LOCALE, base_of, chain, source_of, supported_locales


@dataclass(frozen=True)
class Coverage:
    locale: str
    base: Optional[str]
    defined: int  # reference keys the locale defines itself
    inherited: int  # reference keys taken from a base other than the reference
    untranslated: int  # reference keys only the reference locale provides
    total: int

    @property
    def percent(self) -> float:
        if not self.total:
            return 0.0
        return (self.defined + self.inherited) / self.total * 100


def coverage() -> List[Coverage]:
    reference = I18N.own(REFERENCE_LOCALE)
    result: List[Coverage] = []
    for locale in supported_locales():
        defined = inherited = untranslated = 0
        for key in reference:
            source = source_of(locale, key)
            if source == locale:
                defined += 1
            elif source == REFERENCE_LOCALE:
                untranslated += 1
            else:
                inherited += 1
        result.append(Coverage(locale, base_of(locale), defined, inherited, untranslated, len(reference)))
    return result


def format_coverage(rows: List[Coverage]) -> str:
    lines = ["Translation Statistics:", "======================",
             f"Total number of strings: {rows[0].total if rows else 0}", ""]
    for row in rows:
        indent = "  " * (len(chain(row.locale)) - 1)
        base = f" (extends {row.base})" if row.base else " (reference)"
        lines.append(
            f"{indent}{row.locale}{base}: {row.defined} own, {row.inherited} inherited, "
            f"{row.defined + row.inherited}/{row.total} ({row.percent:.1f}%) - {row.untranslated} untranslated"
        )
    return "\n".join(lines)
