from __future__ import annotations

from datetime import date

import pytest

from zeitkapsl_i18n.core.errors import LocaleDataError, TemplateArgumentError
from zeitkapsl_i18n.core.values import Literal, Template, TextList, decode_value

DAYS = Template("in {value} day!", "in {value} days!")


def test_decode_kinds() -> None:
    assert decode_value("en-US", "login", "Sign in") == Literal("Sign in")
    assert decode_value("en-US", "m", [str(i) for i in range(12)]).kind == "list"
    assert decode_value("en-US", "x", {"template": "Up to {value}"}) == Template("Up to {value}")
    assert decode_value("en-US", "x", {"one": "a {value}", "other": "b {value}"}).is_plural


def test_decode_stamps_year() -> None:
    value = decode_value("en-US", "rights", {"literal": "&copy; {year} zeitkapsl."}, today=date(2031, 5, 1))
    assert value == Literal("&copy; 2031 zeitkapsl.")


@pytest.mark.parametrize(
    "raw",
    [
        42,
        None,
        {"template": "a", "one": "b"},
        {"one": "a"},
        {"literal": 3},
        ["a"] * 11,
        ["a"] * 11 + [1],
    ],
)
def test_decode_rejects_unsupported(raw) -> None:
    with pytest.raises(LocaleDataError):
        decode_value("de-DE", "key", raw)


@pytest.mark.parametrize(
    "arg, expected",
    [
        (0, "in 0 day!"),
        (1, "in 1 day!"),
        (2, "in 2 days!"),
        (1.5, "in 1.5 days!"),
        (2.0, "in 2 days!"),
        (1.0, "in 1 day!"),
        ("7", "in 7 days!"),
        ("1", "in 1 day!"),
    ],
)
def test_plural_uses_greater_than_one(arg, expected) -> None:
    assert DAYS.render(arg) == expected


@pytest.mark.parametrize("arg", ["many", None, True, [2]])
def test_plural_rejects_non_counts(arg) -> None:
    with pytest.raises(TemplateArgumentError):
        DAYS.render(arg, "settings.days")


def test_single_template_accepts_any_argument() -> None:
    template = Template("valid until {value}")
    assert template.render("24.12.2025") == "valid until 24.12.2025"
    assert template.render(date(2025, 12, 24)) == "valid until 2025-12-24"


def test_template_is_pure() -> None:
    assert DAYS.render(3) == DAYS.render(3)
    assert DAYS == Template("in {value} day!", "in {value} days!")


def test_markup_braces_outside_placeholder_are_kept() -> None:
    assert Template("<b>{value}</b> {other}").render(1) == "<b>1</b> {other}"


def test_text_list_is_immutable() -> None:
    months = TextList(tuple("abcdefghijkl"))
    with pytest.raises(AttributeError):
        months.items = ()  # type: ignore[misc]


def test_whole_number_floats_render_without_decimals() -> None:
    assert Template("Up to {value} users").render(5.0) == "Up to 5 users"
    assert DAYS.render(2.50) == "in 2.5 days!"
