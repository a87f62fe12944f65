from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from people_app.core.config import AppConfig, DialogConfig
from people_app.core.controller import PeopleController
from people_app.core.person import Person
from people_app.core.store import PersonNotFoundError
from people_app.state_manager import StateManager
from people_app.ui.person_dialog import create_or_update_person

DialogRunner = Callable[[Optional[QWidget], Optional[Person], Optional[DialogConfig]], Optional[Person]]


class PeopleListWidget(QListWidget):
    """Renders each person's display name; the row order follows the store."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("peopleList")

    def set_people(self, people) -> None:
        selected = self.selected_uuid()
        self.clear()
        for person in people:
            item = QListWidgetItem(person.display_name)
            item.setData(Qt.ItemDataRole.UserRole, person.uuid)
            self.addItem(item)
            if person.uuid == selected:
                self.setCurrentItem(item)

    def selected_uuid(self) -> Optional[str]:
        item = self.currentItem()
        if item is None:
            return None
        return item.data(Qt.ItemDataRole.UserRole)

    def texts(self) -> list[str]:
        return [self.item(row).text() for row in range(self.count())]


class MainWindow(QMainWindow):
    def __init__(
        self,
        controller: PeopleController,
        config: AppConfig | None = None,
        state_manager: StateManager | None = None,
        dialog_runner: DialogRunner = create_or_update_person,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.config = config or AppConfig()
        self.state_manager = state_manager or StateManager()
        self._dialog_runner = dialog_runner
        self._file_filter = "CSV files (*.csv);;All files (*)"
        self.setWindowTitle(self.config.window.title)
        self.resize(*(self.state_manager.get_window_size() or self.config.window.to_tuple()))

        self._build_menu()
        self._build_ui()
        self._connect_signals()
        self._render_people()

    def _build_menu(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        export_action = file_menu.addAction("Export CSV…")
        export_action.triggered.connect(self.export_people)
        exit_action = file_menu.addAction("E&xit")
        exit_action.triggered.connect(self.close)

        people_menu = self.menuBar().addMenu("&People")
        self._add_action = people_menu.addAction("&Add…")
        self._add_action.triggered.connect(self.add_person)
        self._remove_action = people_menu.addAction("&Remove")
        self._remove_action.triggered.connect(self.remove_selected)

    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)

        self.count_label = QLabel("0 people")
        self.count_label.setObjectName("countLabel")
        layout.addWidget(self.count_label)

        self.people_list = PeopleListWidget()
        layout.addWidget(self.people_list, stretch=3)

        button_row = QHBoxLayout()
        button_row.addStretch(1)
        self.remove_button = QPushButton("Remove")
        self.remove_button.setEnabled(False)
        self.add_button = QPushButton("+")
        self.add_button.setToolTip("Add a person")
        button_row.addWidget(self.remove_button)
        button_row.addWidget(self.add_button)
        layout.addLayout(button_row)

        self.log_output = QTextEdit()
        self.log_output.setReadOnly(True)
        self.log_output.setMinimumHeight(100)
        log_label = QLabel("Event log")
        layout.addWidget(log_label)
        layout.addWidget(self.log_output, stretch=1)
        log_label.setVisible(self.config.window.show_event_log)
        self.log_output.setVisible(self.config.window.show_event_log)

        self.setCentralWidget(central)
        self.statusBar().showMessage("Ready")

    def _connect_signals(self) -> None:
        self.add_button.clicked.connect(self.add_person)
        self.remove_button.clicked.connect(self.remove_selected)
        self.people_list.itemActivated.connect(self._on_item_activated)
        self.people_list.currentItemChanged.connect(self._on_selection_changed)
        self.controller.people_changed.connect(self._render_people)
        self.controller.log_emitted.connect(self._append_log)

    def add_person(self) -> None:
        person = self._dialog_runner(self, None, self.config.dialog)
        if person is None:
            return
        self.controller.add_person(person)

    def edit_person(self, person: Person) -> None:
        updated = self._dialog_runner(self, person, self.config.dialog)
        if updated is None:
            return
        try:
            self.controller.update_person(updated)
        except PersonNotFoundError as exc:  # pragma: no cover - UI feedback
            QMessageBox.warning(self, "Update failed", str(exc))

    def remove_selected(self) -> None:
        person = self._selected_person()
        if person is None:
            return
        self.controller.remove_person(person)

    def export_people(self) -> None:
        suggested = self.state_manager.get_last_export_path() or (Path.cwd() / "people.csv")
        filename, _ = QFileDialog.getSaveFileName(self, "Export people", str(suggested), self._file_filter)
        if not filename:
            return
        path = Path(filename)
        try:
            self.controller.export_csv(path)
        except OSError as exc:  # pragma: no cover - UI feedback
            QMessageBox.critical(self, "Export failed", str(exc))
            return
        self.state_manager.set_last_export_path(path)

    def _selected_person(self) -> Optional[Person]:
        row = self.people_list.currentRow()
        people = self.controller.people
        if row < 0 or row >= len(people):
            return None
        return people[row]

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        row = self.people_list.row(item)
        people = self.controller.people
        if 0 <= row < len(people):
            self.edit_person(people[row])

    def _on_selection_changed(self, current, _previous) -> None:
        self.remove_button.setEnabled(current is not None)

    def _render_people(self) -> None:
        people = self.controller.people
        self.people_list.set_people(people)
        noun = "person" if len(people) == 1 else "people"
        self.count_label.setText(f"{len(people)} {noun}")
        self.remove_button.setEnabled(self.people_list.currentItem() is not None)

    def _append_log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.log_output.append(f"[{timestamp}] {message}")
        self.statusBar().showMessage(message, 5000)

    def closeEvent(self, event) -> None:  # noqa: N802
        self.state_manager.set_window_size(self.width(), self.height())
        self.controller.shutdown()
        super().closeEvent(event)
