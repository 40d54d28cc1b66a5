"""Modal dialogs for task create/edit and manual time entry.

Both dialogs hand the raw input to a submit callback. A ValidationError from
the callback is shown inline and the dialog stays open; closing or cancelling
never calls it.
"""
from typing import Callable

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton
)
from PyQt6.QtCore import Qt

from components.icon_picker import IconPicker
from constants import DEFAULT_ICON, BG_COLOR, BORDER_COLOR, ACCENT_COLOR, ERROR_COLOR
from models.duration import is_valid_time_string
from models.errors import ValidationError

DIALOG_STYLE = f"""
    QDialog {{ background-color: {BG_COLOR}; }}
    QLabel {{ color: #D8DEE9; }}
    QLineEdit {{ background: #2A3039; color: white; border: 1px solid {BORDER_COLOR}; padding: 4px; }}
    QLineEdit[invalid="true"] {{ border: 2px solid {ERROR_COLOR}; }}
    QPushButton {{ background: {BORDER_COLOR}; color: white; border: none; padding: 6px 14px; border-radius: 4px; }}
    QPushButton#submit {{ background: {ACCENT_COLOR}; font-weight: bold; }}
"""


class _FormDialog(QDialog):
    def __init__(self, title: str, submit_text: str, parent=None):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setStyleSheet(DIALOG_STYLE)
        self.layout = QVBoxLayout(self)

        self.error_label = QLabel()
        self.error_label.setStyleSheet(f"color: {ERROR_COLOR}; font-size: 11px;")
        self.error_label.hide()

        self.buttons = QHBoxLayout()
        self.buttons.addStretch()
        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.clicked.connect(self.reject)
        self.submit_btn = QPushButton(submit_text)
        self.submit_btn.setObjectName("submit")
        self.submit_btn.setDefault(True)
        self.submit_btn.clicked.connect(self.submit)
        self.buttons.addWidget(self.cancel_btn)
        self.buttons.addWidget(self.submit_btn)

    def show_error(self, message: str, field: QLineEdit):
        self.error_label.setText(message)
        self.error_label.show()
        field.setProperty("invalid", True)
        field.style().unpolish(field)
        field.style().polish(field)

    def clear_error(self, field: QLineEdit):
        self.error_label.hide()
        field.setProperty("invalid", False)
        field.style().unpolish(field)
        field.style().polish(field)

    def submit(self):
        raise NotImplementedError


class TaskFormDialog(_FormDialog):
    """Add / edit a task's name and icon"""
    def __init__(self, on_submit: Callable[[str, str], object], initial_name: str = "",
                 initial_icon: str = DEFAULT_ICON, editing: bool = False, parent=None):
        super().__init__("Edit Task" if editing else "Add New Task",
                         "Save Changes" if editing else "Add Task", parent)
        self.on_submit = on_submit

        self.layout.addWidget(QLabel("Task Name"))
        self.name_edit = QLineEdit(initial_name)
        self.name_edit.setPlaceholderText("E.g., Design new logo")
        self.name_edit.textChanged.connect(self._on_name_changed)
        self.layout.addWidget(self.name_edit)
        self.layout.addWidget(self.error_label)

        self.layout.addWidget(QLabel("Icon"))
        self.icon_picker = IconPicker(initial_icon or DEFAULT_ICON)
        self.layout.addWidget(self.icon_picker)
        self.layout.addLayout(self.buttons)
        self.name_edit.setFocus()

    def _on_name_changed(self, text: str):
        if text.strip():
            self.clear_error(self.name_edit)

    def submit(self):
        try:
            self.on_submit(self.name_edit.text(), self.icon_picker.selected_icon)
        except ValidationError as e:
            self.show_error(str(e), self.name_edit)
            return
        self.accept()


class TimeEditDialog(_FormDialog):
    """Replace a task's accumulated time with an HH:MM:SS value"""
    def __init__(self, task_name: str, initial_time: str, on_submit: Callable[[str], object], parent=None):
        super().__init__(f'Edit Time for "{task_name or "Task"}"', "Save Time", parent)
        self.on_submit = on_submit

        self.layout.addWidget(QLabel("Time (HH:MM:SS)"))
        self.time_edit = QLineEdit(initial_time)
        self.time_edit.setPlaceholderText("00:00:00")
        self.time_edit.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.time_edit.setStyleSheet("font-family: 'Consolas';")
        self.time_edit.textChanged.connect(self._on_time_changed)
        self.layout.addWidget(self.time_edit)
        self.layout.addWidget(self.error_label)
        self.layout.addLayout(self.buttons)
        self.time_edit.setFocus()
        self.time_edit.selectAll()

    def _on_time_changed(self, text: str):
        if is_valid_time_string(text):
            self.clear_error(self.time_edit)

    def submit(self):
        try:
            self.on_submit(self.time_edit.text())
        except ValidationError as e:
            self.show_error(str(e), self.time_edit)
            return
        self.accept()
