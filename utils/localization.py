# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import gettext
import os
import locale
from PySide6.QtCore import QObject, Signal
from .path_utils import get_resource_path
import logging
logger = logging.getLogger(__name__)


class LanguageManager(QObject):
    language_changed = Signal()

    def __init__(self, app_name="lexikey", locale_dir=None):
        super().__init__()
        self.translator = lambda s: s
        self.app_name = app_name
        self.locale_dir = locale_dir or get_resource_path('locales')
        self.default_lang = 'en_US'
        self.current_lang_code = self.default_lang
        self.supported_languages = self._find_catalogues()

    def _find_catalogues(self):
        if not os.path.isdir(self.locale_dir):
            return []
        found = []
        for name in sorted(os.listdir(self.locale_dir)):
            mo_path = os.path.join(self.locale_dir, name, 'LC_MESSAGES', f'{self.app_name}.mo')
            if os.path.exists(mo_path):
                found.append(name)
        return found

    def get_system_language(self):
        system_lang = locale.getlocale()[0]
        if system_lang:
            return system_lang
        env_lang = os.getenv('LC_ALL') or os.getenv('LANG')
        if env_lang:
            return env_lang.split('.')[0]
        return None

    def get_best_match_language(self):
        system_lang = self.get_system_language()
        if not system_lang:
            return self.default_lang

        normalized = system_lang.replace('-', '_')
        if normalized in self.supported_languages:
            return normalized

        base_lang = normalized.split('_')[0].lower()
        for lang in self.supported_languages:
            if lang.lower().startswith(base_lang):
                return lang
        return self.default_lang

    def setup_translation(self, lang_code=None):
        lang_code = lang_code or self.get_best_match_language()
        self.current_lang_code = lang_code

        lang = gettext.translation(self.app_name, localedir=self.locale_dir, languages=[lang_code], fallback=True)
        self.translator = lang.gettext
        if isinstance(lang, gettext.NullTranslations) and not isinstance(lang, gettext.GNUTranslations):
            logger.info(f"No catalogue for '{lang_code}', using built-in English strings")
        else:
            logger.info(f"Successfully set up translation for '{lang_code}'")
        self.language_changed.emit()

    def get_translator(self):
        return self.translator

    def get_current_language(self):
        return self.current_lang_code


lang_manager = LanguageManager()
_ = lambda s: lang_manager.get_translator()(s)
