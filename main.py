# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import argparse
import sys
from pathlib import Path
from PySide6.QtWidgets import QApplication, QMessageBox
from PySide6.QtCore import QObject, QUrl
from PySide6.QtGui import QDesktopServices
from utils import debug_utils
debug_utils.setup_debug_mode()
import logging
logger = logging.getLogger(__name__)


class AppController(QObject):
    def __init__(self, config, project_root, context_file, literal):
        super().__init__()
        self.config = config
        self.project_root = Path(project_root)
        self.context_file = Path(context_file)
        self.literal = literal
        self.dialog = None

    def _initial_domain(self, index, requested):
        if requested:
            return requested
        domains = index.get_domains()
        for domain in (self.config.get("last_domain"), self.config.get("default_domain")):
            if domain and domain in domains:
                return domain
        return self.config.get("default_domain") or (domains[0] if domains else "")

    @staticmethod
    def describe_write_error(error):
        from utils.localization import _
        message = str(error)
        if error.written:
            files = "\n".join(str(p) for p in error.written)
            message += "\n\n" + _("The key was already added to:") + "\n" + files
        return message

    def run(self, domain=None, key=None):
        from dialogs.key_extractor_dialog import KeyExtractorDialog
        from services.extraction_session import ExtractionSession
        from services.key_validation_service import suggest_key
        from services.translation_index_service import TranslationIndex
        from services.translation_writer_service import TranslationWriter, TranslationWriteError
        from utils.config_manager import save_config
        from utils.localization import _

        index = TranslationIndex(self.project_root, excluded_dirs=self.config.get("excluded_dirs"))
        domain = self._initial_domain(index, domain)
        session = ExtractionSession(
            index=index,
            context_file=self.context_file,
            domains=index.get_domains(),
            current_domain=domain,
        )

        self.dialog = KeyExtractorDialog(
            None, session,
            default_key=key or suggest_key(self.literal, domain),
            navigate=self.config.get("navigate_to_file", True),
        )
        self.dialog.exec()
        result = self.dialog.get_result()
        if not result:
            logger.info("Key extraction cancelled")
            return 0

        try:
            written = TranslationWriter().write(result, self.literal)
        except TranslationWriteError as e:
            logger.error(str(e))
            QMessageBox.critical(None, _("Write Failed"), self.describe_write_error(e))
            return 1

        self.config["last_domain"] = session.current_domain
        self.config["navigate_to_file"] = result.navigate
        save_config(self.config)

        if result.navigate and written:
            QDesktopServices.openUrl(QUrl.fromLocalFile(str(written[0])))
        return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Extract a string literal into a translation key of a project catalogue."
    )
    parser.add_argument('project_root', help="Root directory of the project.")
    parser.add_argument('context_file', help="Source file the literal was found in.")
    parser.add_argument('literal', help="The literal text; becomes the value of the new key.")
    parser.add_argument('--domain', help="Translation domain to preselect.")
    parser.add_argument('--key', help="Key to propose instead of the generated one.")
    return parser.parse_args(argv)


def cli(argv=None):
    debug_utils.configure_logging()
    args = parse_args(argv)
    app = QApplication(sys.argv[:1])

    from utils.config_manager import load_config
    from utils.localization import lang_manager

    config = load_config()
    language_code = config.get('language')
    if not language_code:
        language_code = lang_manager.get_best_match_language()
        config['language'] = language_code
    lang_manager.setup_translation(language_code)

    controller = AppController(config, args.project_root, args.context_file, args.literal)
    return controller.run(domain=args.domain, key=args.key)


if __name__ == "__main__":
    sys.exit(cli())
