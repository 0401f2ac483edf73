"""Internationalization utilities."""

import json
import logging
from typing import Dict, Optional

import streamlit as st

from ..config.paths import LANG_FILE_DIR

logger = logging.getLogger(__name__)

LANGUAGES = {"en": "English", "nl": "Nederlands"}


class Translator:
    """Handles translation and internationalization."""

    _cache: Dict[str, Dict[str, str]] = {}

    @staticmethod
    def _load(lang: str) -> Dict[str, str]:
        """Load a language file once per process."""
        if lang not in Translator._cache:
            path = LANG_FILE_DIR / f"{lang}.json"
            translations = {}
            if path.exists():
                try:
                    translations = json.loads(path.read_text(encoding="utf-8"))
                except (OSError, json.JSONDecodeError):
                    logger.warning("Could not read translations from %s", path)
            Translator._cache[lang] = translations
        return Translator._cache[lang]

    @staticmethod
    def t(key: str, default: Optional[str] = None) -> str:
        """Translate a key to the current language."""
        translations = Translator._load(Translator.get_language())
        return translations.get(key, default or key)

    @staticmethod
    def set_language(lang_code: str):
        """Set the current language."""
        if lang_code not in LANGUAGES:
            raise ValueError(f"Unsupported language: {lang_code}")
        st.session_state.lang = lang_code

    @staticmethod
    def get_language() -> str:
        """Get the current language code."""
        return st.session_state.get("lang", "en")
