"""Consistency checks for the loaded translation table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from .i18n import I18N, REFERENCE_LOCALE, chain, source_of, supported_locales
from .values import Literal, Template, TextList, Value

log = logging.getLogger(__name__)

ERROR = "error"
WARNING = "warning"
INFO = "info"


@dataclass(frozen=True)
class Issue:
    level: str
    locale: str
    key: str
    message: str

    def __str__(self) -> str:
        where = f"{self.locale} {self.key}".strip()
        return f"[{self.level}] {where}: {self.message}"


def _is_empty(value: Value) -> bool:
    if isinstance(value, Literal):
        return value.text == ""
    if isinstance(value, TextList):
        return any(item == "" for item in value.items)
    if isinstance(value, Template):
        return value.one == "" or value.other == ""
    return True


def check_table() -> List[Issue]:
    """Return every invariant violation and coverage note for the table.

    Month lists of the wrong length never get this far: the loader rejects
    them while decoding.
    """
    reference = I18N.own(REFERENCE_LOCALE)
    issues: List[Issue] = []

    for locale in supported_locales():
        if locale == REFERENCE_LOCALE:
            continue
        for key, value in I18N.own(locale).items():
            expected = reference.get(key)
            if expected is None:
                issues.append(Issue(WARNING, locale, key, f"key is not defined in {REFERENCE_LOCALE}"))
            elif expected.kind != value.kind:
                issues.append(Issue(
                    ERROR, locale, key,
                    f"{value.kind} value, but {REFERENCE_LOCALE} defines a {expected.kind}",
                ))

    for locale in supported_locales():
        table = I18N.table(locale)
        inherited = 0
        for key in reference:
            if _is_empty(table[key]):
                issues.append(Issue(ERROR, locale, key, "resolves to empty text"))
            source = source_of(locale, key)
            if source == locale:
                continue
            if source == REFERENCE_LOCALE:
                issues.append(Issue(WARNING, locale, key, f"not localized, falls back to {REFERENCE_LOCALE}"))
            else:
                inherited += 1
        if inherited:
            issues.append(Issue(
                INFO, locale, "",
                f"{inherited} keys inherited via {' -> '.join(chain(locale))}",
            ))

    log.debug("Table check found %d issues", len(issues))
    return issues


def has_errors(issues: List[Issue]) -> bool:
    return any(issue.level == ERROR for issue in issues)
