"""
Localized string catalog.

Every user facing text (runtime error messages, module documentation,
snippet placeholders) is looked up here by key. Keys missing from a
catalog fall back to en-US, except for documentation lookups which use
:func:`has_string` to decide whether a module documents itself at all.
"""

from __future__ import annotations

import logging
from typing import Dict

from . import en_us, pt_br

log = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en-US"

CATALOGS: Dict[str, Dict[str, str]] = {
    "en-US": en_us.STRINGS,
    "pt-BR": pt_br.STRINGS,
}

SUPPORTED_LANGUAGES = tuple(CATALOGS)


def normalize_language(language: str | None) -> str:
    """Map loose spellings (``pt_br``, ``PT-br``) to a catalog name."""
    if not language:
        return DEFAULT_LANGUAGE
    wanted = language.replace("_", "-").lower()
    for name in CATALOGS:
        if name.lower() == wanted:
            return name
    return language


def has_string(key: str, language: str) -> bool:
    catalog = CATALOGS.get(normalize_language(language), {})
    return key in catalog


def strings(key: str, language: str = DEFAULT_LANGUAGE, /, **values: object) -> str:
    catalog = CATALOGS.get(normalize_language(language), CATALOGS[DEFAULT_LANGUAGE])
    text = catalog.get(key)
    if text is None:
        text = CATALOGS[DEFAULT_LANGUAGE].get(key)
    if text is None:
        log.warning("Missing string %r for language %s", key, language)
        return key
    if values:
        return text.format(**values)
    return text
