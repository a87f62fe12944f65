from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from people_app.core.config import DialogConfig
from people_app.core.form import PersonForm
from people_app.core.person import Person


class SignalBlocker:
    """Context manager to temporarily suppress widget signals."""

    def __init__(self, widget) -> None:
        self._widget = widget
        self._previous = False

    def __enter__(self):
        self._previous = self._widget.blockSignals(True)
        return self

    def __exit__(self, exc_type, exc, tb):
        self._widget.blockSignals(self._previous)
        return False


class PersonDialog(QDialog):
    """
    Modal form for creating a person or editing an existing one.

    The confirm button stays disabled until the name is non-empty and the
    age parses as a whole number.
    """

    def __init__(
        self,
        existing: Person | None = None,
        config: DialogConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or DialogConfig()
        self.form = PersonForm(existing)
        self._confirmed = False
        self.setWindowTitle(self._config.title)
        self.setModal(True)
        self._build_ui()
        self._refresh_buttons()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        self.name_edit = QLineEdit()
        self.name_edit.setObjectName("nameEdit")
        self.name_edit.setPlaceholderText(self._config.name_placeholder)
        self.age_edit = QLineEdit()
        self.age_edit.setObjectName("ageEdit")
        self.age_edit.setPlaceholderText(self._config.age_placeholder)
        for widget, text in ((self.name_edit, self.form.name_text), (self.age_edit, self.form.age_text)):
            with SignalBlocker(widget):
                widget.setText(text)
        self.name_edit.textChanged.connect(self._on_name_changed)
        self.age_edit.textChanged.connect(self._on_age_changed)
        layout.addWidget(self.name_edit)
        layout.addWidget(self.age_edit)

        self.button_box = QDialogButtonBox()
        self.cancel_button: QPushButton = self.button_box.addButton(
            self._config.cancel_label, QDialogButtonBox.ButtonRole.RejectRole
        )
        self.confirm_button: QPushButton = self.button_box.addButton(
            self._config.confirm_label, QDialogButtonBox.ButtonRole.AcceptRole
        )
        self.button_box.accepted.connect(self.accept)
        self.button_box.rejected.connect(self.reject)
        layout.addWidget(self.button_box)

    def _on_name_changed(self, text: str) -> None:
        self.form.set_name(text)
        self._refresh_buttons()

    def _on_age_changed(self, text: str) -> None:
        self.form.set_age_text(text)
        self._refresh_buttons()

    def _refresh_buttons(self) -> None:
        self.confirm_button.setEnabled(self.form.is_valid)

    def accept(self) -> None:
        # Enter in a line edit can reach here even while the button is disabled.
        if not self.form.is_valid:
            return
        self._confirmed = True
        super().accept()

    def person(self) -> Optional[Person]:
        if not self._confirmed:
            return None
        return self.form.result()


def create_or_update_person(
    parent: QWidget | None = None,
    existing: Person | None = None,
    config: DialogConfig | None = None,
) -> Optional[Person]:
    """Show the dialog and return the confirmed person, or None when cancelled."""
    dialog = PersonDialog(existing, config, parent)
    dialog.exec()
    person = dialog.person()
    dialog.deleteLater()
    return person
