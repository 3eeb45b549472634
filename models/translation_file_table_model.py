# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from collections import namedtuple
from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication, QStyle
from services.candidate_service import toggle_include
from utils.constants import ICON_COLUMN_WIDTH, NAME_COLUMN_WIDTH, CREATE_COLUMN_WIDTH
from utils.localization import _

ColumnInfo = namedtuple("ColumnInfo", ["label", "extractor", "mutator", "width", "role"])

ICON_COLUMN = 0
PATH_COLUMN = 1
NAME_COLUMN = 2
CREATE_COLUMN = 3

COLUMNS = [
    ColumnInfo("", lambda m: m.is_primary, None, ICON_COLUMN_WIDTH, Qt.DecorationRole),
    ColumnInfo("Path", lambda m: m.get_display_path(), None, None, Qt.DisplayRole),
    ColumnInfo("Name", lambda m: m.name, None, NAME_COLUMN_WIDTH, Qt.DisplayRole),
    ColumnInfo("Create", lambda m: m.enabled, toggle_include, CREATE_COLUMN_WIDTH, Qt.CheckStateRole),
]


def is_checked(value):
    if isinstance(value, Qt.CheckState):
        return value == Qt.CheckState.Checked
    if isinstance(value, bool):
        return value
    return int(value) == Qt.CheckState.Checked.value


class TranslationFileTableModel(QAbstractTableModel):
    def __init__(self, candidates=None, parent=None):
        super().__init__(parent)
        self._data = list(candidates or [])
        self.columns = COLUMNS

    def set_candidates(self, candidates):
        self.beginResetModel()
        self._data = list(candidates)
        self.endResetModel()

    def candidates(self):
        return list(self._data)

    def item(self, row):
        return self._data[row]

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._data)

    def columnCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self.columns)

    def column_width(self, column):
        return self.columns[column].width

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        row, col = index.row(), index.column()
        if row >= len(self._data):
            return None
        model = self._data[row]
        column = self.columns[col]

        if role == Qt.UserRole:
            return model

        if role == Qt.FontRole and model.is_primary:
            font = QFont()
            font.setBold(True)
            return font

        if role == Qt.ToolTipRole:
            return str(model.path)

        if role != column.role:
            return None

        value = column.extractor(model)
        if role == Qt.CheckStateRole:
            return Qt.Checked if value else Qt.Unchecked
        if role == Qt.DecorationRole:
            app = QApplication.instance()
            if not isinstance(app, QApplication):
                return None
            icon = QStyle.SP_DirIcon if value else QStyle.SP_FileIcon
            return app.style().standardIcon(icon)
        return value

    def setData(self, index, value, role=Qt.EditRole):
        if not index.isValid():
            return False
        column = self.columns[index.column()]
        if column.mutator is None or role not in (Qt.CheckStateRole, Qt.EditRole):
            return False
        column.mutator(self._data[index.row()], is_checked(value))
        self.dataChanged.emit(index, index, [Qt.CheckStateRole])
        return True

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role == Qt.DisplayRole and orientation == Qt.Horizontal:
            if section < len(self.columns):
                label = self.columns[section].label
                return _(label) if label else ""
        return None

    def flags(self, index):
        if not index.isValid():
            return Qt.NoItemFlags
        flags = Qt.ItemIsEnabled | Qt.ItemIsSelectable
        if self.columns[index.column()].mutator is not None:
            flags |= Qt.ItemIsUserCheckable
        return flags
