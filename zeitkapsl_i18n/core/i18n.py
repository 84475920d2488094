from __future__ import annotations

import json
import logging
import threading
from collections import Counter
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .config import settings
from .errors import LocaleDataError, TranslationTypeError
from .values import Template, TextList, Value, decode_value


log = logging.getLogger(__name__)

REFERENCE_LOCALE = "en-US"

# Locale -> the locale it inherits missing keys from. The reference has none.
LOCALE_BASES: Dict[str, Optional[str]] = {
    "en-US": None,
    "de-DE": "en-US",
    "de-AT": "de-DE",
}

MISSING_PLACEHOLDER = "⟦missing:{key}⟧"

# Optional file in a locale directory that replaces LOCALE_BASES
BASES_FILE = "bases.json"

# Distinct (locale, key) misses tracked before new ones are only logged
MISSING_LIMIT = 1000

# Distinguishes "no argument" from a legitimate None argument
_NO_ARG: Any = object()

Resolved = Union[str, Tuple[str, ...]]


def check_bases(bases: Mapping[str, Optional[str]]) -> None:
    """Reject undeclared bases, cycles and a root other than the reference locale."""
    for locale, base in bases.items():
        if base is not None and base not in bases:
            raise LocaleDataError(locale, f"base locale {base!r} is not declared")
        seen = {locale}
        current = base
        while current is not None:
            if current in seen:
                raise LocaleDataError(locale, "locale inheritance contains a cycle")
            seen.add(current)
            current = bases[current]
        root = _chain(bases, locale)[-1]
        if root != REFERENCE_LOCALE:
            raise LocaleDataError(locale, f"inheritance must end at {REFERENCE_LOCALE}, not {root}")


def _chain(bases: Mapping[str, Optional[str]], locale: str) -> List[str]:
    result = [locale]
    base = bases[locale]
    while base is not None:
        result.append(base)
        base = bases[base]
    return result


def read_resource(locale: str, directory: Optional[Path] = None) -> Dict[str, Any]:
    """Raw JSON object of one locale, from ``directory`` or the packaged resources."""
    try:
        if directory is not None:
            text = (directory / f"{locale}.json").read_text(encoding="utf-8")
        else:
            text = resources.files("zeitkapsl_i18n.locales").joinpath(f"{locale}.json").read_text(encoding="utf-8")
        data = json.loads(text)
    except FileNotFoundError as e:
        raise LocaleDataError(locale, "locale resource not found") from e
    except json.JSONDecodeError as e:
        raise LocaleDataError(locale, f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise LocaleDataError(locale, "locale resource must be a JSON object")
    return data


def read_bases(directory: Optional[Path]) -> Dict[str, Optional[str]]:
    """Inheritance declared by ``directory``'s bases file, else ``LOCALE_BASES``."""
    path = directory / BASES_FILE if directory is not None else None
    if path is None or not path.is_file():
        return dict(LOCALE_BASES)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise LocaleDataError(BASES_FILE, f"invalid JSON: {e}") from e
    if not isinstance(data, dict) or not all(
        isinstance(code, str) and (base is None or isinstance(base, str)) for code, base in data.items()
    ):
        raise LocaleDataError(BASES_FILE, "expected an object of locale -> base locale or null")
    return data


class I18N:
    """Process-wide translation table.

    Each locale's chain is flattened once at load time, so a lookup is a
    single dict access. Nothing is written to the table after loading; only
    the ``missing`` counter changes, as lookups miss.

    ``missing`` is best-effort telemetry: it holds at most ``MISSING_LIMIT``
    distinct ``(locale, key)`` pairs, later ones are logged but not counted.
    """

    _bases: Mapping[str, Optional[str]] = MappingProxyType(dict(LOCALE_BASES))
    _own: Dict[str, Mapping[str, Value]] = {}
    _flat: Dict[str, Mapping[str, Value]] = {}
    _directory: Optional[Path] = None
    missing: Counter = Counter()
    _missing_lock = threading.Lock()

    @classmethod
    def load_locales(cls, locale_dir: Union[str, Path, None] = None, force: bool = False) -> None:
        if cls._flat and not force:
            return
        if locale_dir is None and settings.LOCALE_DIR:
            locale_dir = settings.LOCALE_DIR
        directory = Path(locale_dir) if locale_dir else None

        bases = read_bases(directory)
        check_bases(bases)

        own: Dict[str, Mapping[str, Value]] = {}
        for locale in bases:
            raw = read_resource(locale, directory)
            own[locale] = MappingProxyType(
                {key: decode_value(locale, key, value) for key, value in raw.items()}
            )

        flat: Dict[str, Mapping[str, Value]] = {}
        for locale in bases:
            merged: Dict[str, Value] = {}
            for ancestor in reversed(_chain(bases, locale)):
                merged.update(own[ancestor])
            flat[locale] = MappingProxyType(merged)

        cls._bases = MappingProxyType(bases)
        cls._own = own
        cls._flat = flat
        cls._directory = directory
        log.info(
            "Loaded %d locales (%s) from %s",
            len(flat),
            ", ".join(f"{code}={len(own[code])}" for code in own),
            directory or "package resources",
        )

    @classmethod
    def reset(cls) -> None:
        cls._bases = MappingProxyType(dict(LOCALE_BASES))
        cls._own = {}
        cls._flat = {}
        cls._directory = None
        cls.missing = Counter()

    @classmethod
    def bases(cls) -> Mapping[str, Optional[str]]:
        """Declared inheritance of the loaded table, locale -> base."""
        cls.load_locales()
        return cls._bases

    @classmethod
    def directory(cls) -> Optional[Path]:
        """Directory the table was read from, None for the packaged resources."""
        cls.load_locales()
        return cls._directory

    @classmethod
    def count_miss(cls, locale: str, key: str) -> bool:
        """Count a miss; True the first time ``(locale, key)`` is seen."""
        with cls._missing_lock:
            pair = (locale, key)
            if pair in cls.missing:
                cls.missing[pair] += 1
                return False
            if len(cls.missing) < MISSING_LIMIT:
                cls.missing[pair] = 1
            return True

    @classmethod
    def own(cls, locale: str) -> Mapping[str, Value]:
        """Keys defined directly by ``locale``, without inherited ones."""
        cls.load_locales()
        return cls._own[locale]

    @classmethod
    def table(cls, locale: str) -> Mapping[str, Value]:
        """Fully populated, read-only mapping for ``locale``."""
        cls.load_locales()
        return cls._flat[locale]

    @classmethod
    def normalize(cls, code: Optional[str]) -> Optional[str]:
        if not code:
            return None
        wanted = code.strip().replace("_", "-").lower()
        for locale in cls.bases():
            if locale.lower() == wanted:
                return locale
        return None

    @classmethod
    def pick_locale(cls, requested: Optional[str]) -> str:
        code = cls.normalize(requested)
        if code is not None:
            return code
        fallback = cls.normalize(settings.DEFAULT_LOCALE) or REFERENCE_LOCALE
        log.debug("Unsupported locale %r, using %s", requested, fallback)
        return fallback


def supported_locales() -> List[str]:
    return list(I18N.bases())


# The helpers below accept any code resolve() accepts: unsupported codes
# answer for the default locale, as lookups do.

def base_of(locale: Optional[str]) -> Optional[str]:
    return I18N.bases()[I18N.pick_locale(locale)]


def chain(locale: Optional[str]) -> List[str]:
    """Lookup order for ``locale``: itself, then each base up to the reference."""
    return _chain(I18N.bases(), I18N.pick_locale(locale))


def source_of(locale: Optional[str], key: str) -> Optional[str]:
    """The locale in ``locale``'s chain that defines ``key``, if any."""
    for ancestor in chain(locale):
        if key in I18N.own(ancestor):
            return ancestor
    return None


def _on_missing(locale: str, key: str) -> str:
    if I18N.count_miss(locale, key):
        log.warning("Missing translation key %r for locale %s", key, locale)
    if settings.MISSING_KEY_POLICY == "placeholder":
        return MISSING_PLACEHOLDER.format(key=key)
    return key


def resolve(locale: Optional[str], key: str, arg: Any = _NO_ARG) -> Resolved:
    """Resolve ``key`` for ``locale``.

    Returns text for literal and template keys and a tuple of twelve strings
    for month lists. Unsupported locales fall back to the default locale; keys
    missing everywhere are reported and answered according to
    ``MISSING_KEY_POLICY``.
    """
    I18N.load_locales()
    code = I18N.pick_locale(locale)
    value = I18N._flat[code].get(key)
    if value is None:
        return _on_missing(code, key)

    if isinstance(value, Template):
        if arg is _NO_ARG:
            raise TranslationTypeError(key, "template requires an argument")
        return value.render(arg, key)

    if arg is not _NO_ARG:
        raise TranslationTypeError(key, f"{value.kind} value does not take an argument")
    if isinstance(value, TextList):
        return value.items
    return value.text


def t(locale: Optional[str], key: str, arg: Any = _NO_ARG) -> str:
    """Like ``resolve`` but only for keys that produce display text."""
    result = resolve(locale, key, arg)
    if isinstance(result, tuple):
        raise TranslationTypeError(key, "list value cannot be used as text")
    return result
