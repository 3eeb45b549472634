# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLabel, QLineEdit, QComboBox, QCheckBox,
    QDialogButtonBox, QTableView, QHeaderView, QAbstractItemView
)
from models.translation_file_table_model import TranslationFileTableModel, PATH_COLUMN
from services.extraction_session import ConfirmAction, Cancelled
from utils.localization import _
import logging
logger = logging.getLogger(__name__)


class KeyExtractorDialog(QDialog):
    def __init__(self, parent, session, default_key=None, navigate=True):
        super().__init__(parent)
        self.session = session
        self.result_value = Cancelled

        self.setWindowTitle(_("Extract Translation Key"))
        self.setModal(True)
        self.setMinimumWidth(560)

        self.setup_ui()

        if default_key is not None:
            self.key_edit.setText(default_key)
            self.session.key_text = default_key
        self.navigate_checkbox.setChecked(navigate)
        self.session.navigate = navigate

        self._populate_domains()
        self.key_edit.selectAll()

        self.key_edit.textChanged.connect(self._on_key_changed)
        self.note_edit.textChanged.connect(self._on_note_changed)
        self.navigate_checkbox.toggled.connect(self._on_navigate_toggled)
        self.domain_combo.currentTextChanged.connect(self.filter_list)
        self.check_for_existing_key()

    def setup_ui(self):
        main_layout = QVBoxLayout(self)

        form_layout = QFormLayout()
        self.key_edit = QLineEdit()
        form_layout.addRow(_("Key:"), self.key_edit)

        self.key_error_label = QLabel("")
        self.key_error_label.setStyleSheet("color: #F56C6C;")
        form_layout.addRow("", self.key_error_label)

        self.note_edit = QLineEdit()
        self.note_edit.setPlaceholderText(_("Optional note for translators"))
        form_layout.addRow(_("Note:"), self.note_edit)

        self.domain_combo = QComboBox()
        form_layout.addRow(_("Domain:"), self.domain_combo)
        main_layout.addLayout(form_layout)

        self.table_model = TranslationFileTableModel(parent=self)
        self.table_view = QTableView()
        self.table_view.setModel(self.table_model)
        self.table_view.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table_view.verticalHeader().setVisible(False)
        header = self.table_view.horizontalHeader()
        for column in range(self.table_model.columnCount()):
            width = self.table_model.column_width(column)
            if width is not None:
                header.setSectionResizeMode(column, QHeaderView.Fixed)
                header.resizeSection(column, width)
        header.setSectionResizeMode(PATH_COLUMN, QHeaderView.Stretch)
        main_layout.addWidget(self.table_view)

        self.navigate_checkbox = QCheckBox(_("Navigate to file"))
        main_layout.addWidget(self.navigate_checkbox)

        button_box = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        button_box.accepted.connect(self.on_ok)
        button_box.rejected.connect(self.reject)
        button_box.button(QDialogButtonBox.Ok).setDefault(True)
        main_layout.addWidget(button_box)

    def _populate_domains(self):
        domains = list(self.session.domains)
        current = self.session.current_domain
        if current and current not in domains:
            domains.append(current)
        self.domain_combo.blockSignals(True)
        self.domain_combo.addItems(domains)
        index = self.domain_combo.findText(current)
        if index != -1:
            self.domain_combo.setCurrentIndex(index)
        self.domain_combo.blockSignals(False)
        self.filter_list(self.domain_combo.currentText() or current)

    def filter_list(self, domain):
        candidates = self.session.filter_list(domain)
        self.table_model.set_candidates(candidates)

    def _on_key_changed(self, text):
        self.session.key_text = text
        self.check_for_existing_key()

    def _on_note_changed(self, text):
        self.session.note = text

    def _on_navigate_toggled(self, checked):
        self.session.navigate = checked

    def check_for_existing_key(self):
        message = self.session.key_error()
        self.key_error_label.setText(message or "")

    def on_ok(self):
        outcome = self.session.confirm()
        if outcome.action == ConfirmAction.REFUSED:
            self.check_for_existing_key()
            return
        if outcome.action == ConfirmAction.DISCARDED:
            self.reject()
            return
        self.result_value = outcome.result
        self.accept()

    def get_result(self):
        return self.result_value
