"""Localized UI text for the zeitkapsl photo storage app."""

from .core.errors import I18NError, LocaleDataError, TemplateArgumentError, TranslationTypeError
from .core.i18n import I18N, REFERENCE_LOCALE, chain, resolve, supported_locales, t

__all__ = [
    "I18N",
    "I18NError",
    "LocaleDataError",
    "REFERENCE_LOCALE",
    "TemplateArgumentError",
    "TranslationTypeError",
    "chain",
    "resolve",
    "supported_locales",
    "t",
]
