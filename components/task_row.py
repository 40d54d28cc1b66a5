from PyQt6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton
from PyQt6.QtCore import Qt, pyqtSignal

from components.timer_display import TimerDisplay
from constants import ROW_HEIGHT, PANEL_COLOR, BORDER_COLOR, RUNNING_COLOR, MUTED_TEXT
from models.task import Task
from models.timer import effective_seconds

BUTTON_STYLE = f"""
    QPushButton {{ background: transparent; color: white; border: none; font-size: 14px; }}
    QPushButton:hover {{ background: {BORDER_COLOR}; border-radius: 4px; }}
"""

class TaskRow(QWidget):
    """One task: icon, name, live timer and action buttons"""
    toggle_requested = pyqtSignal(str)
    edit_time_requested = pyqtSignal(str)
    edit_requested = pyqtSignal(str)
    delete_requested = pyqtSignal(str)

    def __init__(self, task: Task, now: int, parent=None):
        super().__init__(parent)
        self.task = task
        self.setFixedHeight(ROW_HEIGHT)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 4, 6, 4)
        layout.setSpacing(8)

        self.icon_label = QLabel()
        self.icon_label.setFixedWidth(36)
        self.icon_label.setStyleSheet("font-size: 22px;")
        layout.addWidget(self.icon_label)

        text_col = QVBoxLayout()
        text_col.setSpacing(0)
        self.name_label = QLabel()
        self.name_label.setStyleSheet("color: #FFFFFF; font-weight: bold; font-size: 13px;")
        self.name_label.setWordWrap(True)
        text_col.addWidget(self.name_label)
        self.timer_display = TimerDisplay()
        text_col.addWidget(self.timer_display)
        layout.addLayout(text_col, stretch=1)

        self.toggle_btn = self._make_button("", "Start timer")
        self.toggle_btn.clicked.connect(lambda: self.toggle_requested.emit(self.task.id))
        self.time_btn = self._make_button("🕒", "Edit Time")
        self.time_btn.clicked.connect(lambda: self.edit_time_requested.emit(self.task.id))
        self.edit_btn = self._make_button("✎", "Edit Task")
        self.edit_btn.clicked.connect(lambda: self.edit_requested.emit(self.task.id))
        self.delete_btn = self._make_button("🗑", "Delete Task")
        self.delete_btn.clicked.connect(lambda: self.delete_requested.emit(self.task.id))
        for btn in (self.toggle_btn, self.time_btn, self.edit_btn, self.delete_btn):
            layout.addWidget(btn)

        self.set_task(task, now)

    def _make_button(self, text: str, tip: str) -> QPushButton:
        btn = QPushButton(text)
        btn.setFixedSize(30, 30)
        btn.setToolTip(tip)
        btn.setStyleSheet(BUTTON_STYLE)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        return btn

    def set_task(self, task: Task, now: int):
        """Swap in a new snapshot of the same task"""
        self.task = task
        self.icon_label.setText(task.icon)
        self.name_label.setText(task.name)
        self.toggle_btn.setText("⏸" if task.is_running else "▶")
        self.toggle_btn.setToolTip("Pause timer" if task.is_running else "Start timer")
        self.timer_display.set_running(task.is_running)

        # running: green edge, has time: grey edge, untouched: none
        if task.is_running:
            edge = RUNNING_COLOR
        elif task.total_seconds > 0:
            edge = MUTED_TEXT
        else:
            edge = PANEL_COLOR
        self.setStyleSheet(f"TaskRow {{ background-color: {PANEL_COLOR}; border-left: 4px solid {edge}; }}")
        self.refresh(now)

    def refresh(self, now: int):
        """Recompute the displayed time; never touches stored state"""
        self.timer_display.set_seconds(effective_seconds(self.task, now))
