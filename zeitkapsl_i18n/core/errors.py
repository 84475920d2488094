from __future__ import annotations


class I18NError(Exception):
    """Base class for all translation table errors."""


class LocaleDataError(I18NError):
    """A locale resource or the locale inheritance declaration is invalid."""

    def __init__(self, locale: str, message: str) -> None:
        super().__init__(f"{locale}: {message}")
        self.locale = locale


class TranslationTypeError(I18NError, TypeError):
    """A key was used with the wrong value kind (e.g. a template read as plain text)."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key


class TemplateArgumentError(TranslationTypeError):
    """The argument passed to a template cannot be used by it."""


class AutoTranslateError(I18NError):
    pass
