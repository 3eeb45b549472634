import pytest
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication

from dialogs.key_extractor_dialog import KeyExtractorDialog
from models.translation_file_table_model import CREATE_COLUMN
from services.extraction_session import Cancelled, ExtractionSession


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


def _dialog(resolver, key):
    session = ExtractionSession(
        index=resolver,
        context_file="ctx.php",
        domains=resolver.get_domains(),
        current_domain="messages",
    )
    dialog = KeyExtractorDialog(None, session, default_key=key, navigate=False)
    events = []
    dialog.accepted.connect(lambda: events.append("accepted"))
    dialog.rejected.connect(lambda: events.append("rejected"))
    return dialog, session, events


def test_existing_key_keeps_dialog_open(qapp, make_resolver):
    resolver = make_resolver({"messages": ["c.xlf"]}, existing_keys={"app.greeting"})
    dialog, session, events = _dialog(resolver, "app.greeting")

    assert dialog.key_error_label.text() == "Key already exists"
    dialog.on_ok()

    assert events == []
    assert dialog.get_result() is Cancelled


def test_typing_updates_advisory(qapp, make_resolver):
    resolver = make_resolver({"messages": ["c.xlf"]}, existing_keys={"app.greeting"})
    dialog, session, _events = _dialog(resolver, "app.greeting")

    dialog.key_edit.setText("app.greeting.new")

    assert session.key_text == "app.greeting.new"
    assert dialog.key_error_label.text() == ""


def test_ok_returns_result_for_checked_rows(qapp, make_resolver):
    resolver = make_resolver({"messages": ["a.yml", "b.yml"], "forms": ["f.yml"]})
    dialog, session, events = _dialog(resolver, "app.title")
    model = dialog.table_model
    assert model.rowCount() == 2

    model.setData(model.index(1, CREATE_COLUMN), Qt.Checked, Qt.CheckStateRole)
    dialog.note_edit.setText("Page title")
    dialog.navigate_checkbox.setChecked(True)
    dialog.on_ok()

    assert events == ["accepted"]
    result = dialog.get_result()
    assert [f.name for f in result.files] == ["b.yml"]
    assert result.domain == "app"
    assert result.note == "Page title"
    assert result.navigate is True


def test_nothing_checked_closes_without_result(qapp, make_resolver):
    resolver = make_resolver({"messages": ["a.yml", "b.yml"]})
    dialog, _session, events = _dialog(resolver, "app.title")

    dialog.on_ok()

    assert events == ["rejected"]
    assert dialog.get_result() is Cancelled


def test_domain_change_refills_table(qapp, make_resolver):
    resolver = make_resolver({"messages": ["a.yml", "b.yml"], "forms": ["f.yml"]})
    dialog, session, _events = _dialog(resolver, "forms.name")

    dialog.domain_combo.setCurrentText("forms")

    assert session.current_domain == "forms"
    assert dialog.table_model.rowCount() == 1
    assert dialog.table_model.data(dialog.table_model.index(0, CREATE_COLUMN), Qt.CheckStateRole) == Qt.Checked
