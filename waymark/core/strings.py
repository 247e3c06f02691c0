"""Localized labels shown by the browsing screens."""

from __future__ import annotations

from typing import Dict


DEFAULT_LOCALE = "en"

STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        "bookmarks": "Bookmarks",
        "back": "Back",
        "zoom_in": "Zoom in",
        "zoom_out": "Zoom out",
        "recenter": "Recenter",
        "no_items": "No bookmarks",
    },
    "de": {
        "bookmarks": "Lesezeichen",
        "back": "Zurück",
        "zoom_in": "Vergrößern",
        "zoom_out": "Verkleinern",
        "recenter": "Zentrieren",
        "no_items": "Keine Lesezeichen",
    },
    "fr": {
        "bookmarks": "Signets",
        "back": "Retour",
        "zoom_in": "Zoom avant",
        "zoom_out": "Zoom arrière",
        "recenter": "Recentrer",
        "no_items": "Aucun signet",
    },
    "es": {
        "bookmarks": "Marcadores",
        "back": "Atrás",
        "zoom_in": "Acercar",
        "zoom_out": "Alejar",
        "recenter": "Centrar",
        "no_items": "Sin marcadores",
    },
}


def normalize_locale(locale: str) -> str:
    """
    Reduce a locale tag to a supported language key.

    "de_DE.UTF-8" and "de-AT" both become "de"; unknown languages become "en".
    """
    lang = (locale or "").strip().lower().replace("-", "_").split(".")[0].split("_")[0]
    return lang if lang in STRINGS else DEFAULT_LOCALE


def get_string(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Look up a label, falling back to English and then to the key itself."""
    table = STRINGS.get(normalize_locale(locale), STRINGS[DEFAULT_LOCALE])
    return table.get(key) or STRINGS[DEFAULT_LOCALE].get(key, key)
