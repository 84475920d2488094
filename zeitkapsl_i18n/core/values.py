"""Tagged translation values.

A key maps to exactly one of three kinds of value, and the kind is decided by
the key alone:

* ``Literal``  - display text, possibly with inline markup the renderer trusts
* ``TextList`` - the twelve month names/abbreviations, January first
* ``Template`` - one-argument text with a ``{value}`` placeholder and an
  optional singular/plural pair
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Tuple, Union

from .errors import LocaleDataError, TemplateArgumentError

MONTHS_PER_YEAR = 12
PLACEHOLDER = "{value}"


@dataclass(frozen=True)
class Literal:
    text: str

    kind = "literal"


@dataclass(frozen=True)
class TextList:
    items: Tuple[str, ...]

    kind = "list"


@dataclass(frozen=True)
class Template:
    one: str
    other: Optional[str] = None

    kind = "template"

    @property
    def is_plural(self) -> bool:
        return self.other is not None

    def render(self, arg: Any, key: str = "") -> str:
        text = self.one
        if self.other is not None and _count(arg, key) > 1:
            text = self.other
        return text.replace(PLACEHOLDER, _display(arg))


Value = Union[Literal, TextList, Template]


def _display(arg: Any) -> str:
    # 2.0 reads as "2" in the rendered text
    if isinstance(arg, float) and arg.is_integer():
        return str(int(arg))
    return str(arg)


def _count(arg: Any, key: str) -> float:
    if isinstance(arg, bool):
        raise TemplateArgumentError(key, "expected a count, got a boolean")
    if isinstance(arg, (int, float)):
        return arg
    if isinstance(arg, str):
        try:
            return float(arg.strip())
        except ValueError:
            pass
    raise TemplateArgumentError(key, f"expected a count, got {arg!r}")


def decode_value(locale: str, key: str, raw: Any, today: date | None = None) -> Value:
    """Turn one JSON resource entry into its tagged value."""
    if isinstance(raw, str):
        return Literal(raw)

    if isinstance(raw, list):
        if not all(isinstance(item, str) for item in raw):
            raise LocaleDataError(locale, f"{key}: list entries must be strings")
        if len(raw) != MONTHS_PER_YEAR:
            raise LocaleDataError(
                locale, f"{key}: expected {MONTHS_PER_YEAR} entries, got {len(raw)}"
            )
        return TextList(tuple(raw))

    if isinstance(raw, dict):
        if set(raw) == {"literal"} and isinstance(raw["literal"], str):
            # Stamped once at load; the table stays immutable afterwards.
            year = (today or date.today()).year
            return Literal(raw["literal"].replace("{year}", str(year)))
        if set(raw) == {"template"} and isinstance(raw["template"], str):
            return Template(raw["template"])
        if set(raw) == {"one", "other"} and all(isinstance(v, str) for v in raw.values()):
            return Template(raw["one"], raw["other"])

    raise LocaleDataError(locale, f"{key}: unsupported value {raw!r}")
