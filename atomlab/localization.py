from __future__ import annotations
from typing import Callable, Optional
import logging

from . import constants as C
from .locales import TRANSLATIONS

logger = logging.getLogger(__name__)

Translate = Callable[[str], str]


def get_translator(language: str = C.DEFAULT_LANGUAGE) -> Translate:
    """
    Build a translate(key) callable for a language code.

    Unknown languages fall back to English; keys missing from the chosen table
    fall back to the English text, then to the key itself.
    """
    code = (language or C.DEFAULT_LANGUAGE).upper()
    if code not in TRANSLATIONS:
        logger.warning(f"Unknown language '{language}', falling back to {C.DEFAULT_LANGUAGE}")
        code = C.DEFAULT_LANGUAGE
    table = TRANSLATIONS[code]
    english = TRANSLATIONS[C.DEFAULT_LANGUAGE]

    def translate(key: str) -> str:
        return table.get(key) or english.get(key) or key

    return translate


def safe_translate(translate: Optional[Translate], key: str, fallback: Optional[str] = None) -> str:
    """
    Resolve a label through an externally supplied translate capability.

    A missing capability, an exception from it, or an empty/non-string result
    yields `fallback` when given, otherwise the raw key.
    """
    default = fallback if fallback is not None else key
    if translate is None:
        return default
    try:
        value = translate(key)
    except Exception:
        logger.warning(f"translate() failed for key '{key}'; using '{default}'")
        return default
    if not isinstance(value, str) or not value:
        return default
    return value


def display_name(entity, translate: Optional[Translate] = None) -> str:
    """Translated display name keyed by entity id, falling back to the authored name."""
    name = getattr(entity, "name", None) or getattr(entity, "id", "")
    entity_id = getattr(entity, "id", None)
    if not entity_id:
        return name
    value = safe_translate(translate, entity_id, fallback=name)
    # a translator that echoes unknown keys should not replace the authored name
    return name if value == entity_id else value
