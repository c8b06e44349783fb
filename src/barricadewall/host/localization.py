"""In-memory message catalog with locale fallback."""

from __future__ import annotations

from collections.abc import Mapping

DEFAULT_LOCALE = "en"


class Localizer:
    """MessageRenderer backed by per-locale dicts.

    Lookup order is the requested locale, then DEFAULT_LOCALE, then the key
    itself, so a missing translation degrades to something readable.
    """

    def __init__(self) -> None:
        self._messages: dict[str, dict[str, str]] = {}

    def register_messages(self, messages: Mapping[str, str], locale: str = DEFAULT_LOCALE) -> None:
        self._messages.setdefault(locale, {}).update(messages)

    def get_template(self, key: str, locale: str = DEFAULT_LOCALE) -> str:
        for candidate in (locale, DEFAULT_LOCALE):
            template = self._messages.get(candidate, {}).get(key)
            if template is not None:
                return template
        return key

    def render(self, key: str, locale: str = DEFAULT_LOCALE, *args: object) -> str:
        template = self.get_template(key, locale)
        if args:
            return template.format(*args)
        return template
