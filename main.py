#!/usr/bin/env python3
import sys
import os
import logging
from pathlib import Path
from typing import Dict

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout,
    QLabel, QScrollArea, QMessageBox, QFileDialog
)
from PyQt6.QtCore import Qt, QTimer

from components.dialogs import TaskFormDialog, TimeEditDialog
from components.task_row import TaskRow
from components.title_bar import CustomTitleBar
from config import Settings, load_settings
from constants import APP_NAME, BG_COLOR, BORDER_COLOR, MUTED_TEXT, ERROR_COLOR, WINDOW_WIDTH, WINDOW_HEIGHT
from logging_setup import setup_logging
from models.duration import format_time
from models.errors import NotFoundError, PersistenceError
from models.task import Task
from models.task_manager import TaskManager
from storage.csv_export import export_filename, export_tasks_to_csv
from storage.local_storage import LocalStorage
from storage.task_storage import TaskStorage

logger = logging.getLogger(__name__)

class TimeTrackView(QMainWindow):
    """Frameless always-on-top task list; all state lives in the TaskManager"""
    def __init__(self, manager: TaskManager, settings: Settings):
        super().__init__()
        self.manager = manager
        self.settings = settings
        self.rows: Dict[str, TaskRow] = {}

        self.setWindowTitle(APP_NAME)
        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint |
            Qt.WindowType.WindowStaysOnTopHint
        )

        self.init_ui()

        self.manager.task_added.connect(self.on_task_added)
        self.manager.task_updated.connect(self.on_task_updated)
        self.manager.task_deleted.connect(self.on_task_deleted)
        self.manager.tasks_loaded.connect(self.rebuild_content)
        self.manager.persistence_failed.connect(self.on_persistence_failed)

        # display refresh only; never commits time
        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(settings.tick_interval_ms)
        self.tick_timer.timeout.connect(self.refresh_running)

        screen = QApplication.primaryScreen().availableGeometry()
        self.setGeometry(screen.width() - WINDOW_WIDTH - 20, (screen.height() - WINDOW_HEIGHT) // 2,
                         WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setWindowOpacity(settings.window_opacity)

        self.rebuild_content()

    def init_ui(self):
        self.main_widget = QWidget()
        self.setCentralWidget(self.main_widget)
        self.main_layout = QVBoxLayout(self.main_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)

        self.custom_title_bar = CustomTitleBar(self)
        self.main_layout.addWidget(self.custom_title_bar)
        self.custom_title_bar.add_btn.clicked.connect(self.open_add_dialog)
        self.custom_title_bar.export_btn.clicked.connect(self.export_csv)
        self.custom_title_bar.close_btn.clicked.connect(QApplication.quit)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setStyleSheet(f"QScrollArea {{ background: {BG_COLOR}; border: none; }}")
        self.container = QWidget()
        self.container_layout = QVBoxLayout(self.container)
        self.container_layout.setContentsMargins(6, 6, 6, 6)
        self.container_layout.setSpacing(6)
        self.scroll.setWidget(self.container)
        self.main_layout.addWidget(self.scroll, stretch=1)

        self.empty_label = QLabel("No tasks yet!\nClick \"+ Add Task\" to get started.")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setStyleSheet(f"color: {MUTED_TEXT}; font-size: 14px; padding: 40px;")

        self.status_label = QLabel()
        self.status_label.setStyleSheet(f"color: {ERROR_COLOR}; font-size: 11px; padding: 4px 10px;")
        self.status_label.hide()
        self.main_layout.addWidget(self.status_label)

        self.setStyleSheet(f"QMainWindow {{ background-color: {BG_COLOR}; border: 1px solid {BORDER_COLOR}; }}")

    def clear_layout(self):
        while self.container_layout.count():
            item = self.container_layout.takeAt(0)
            if item.widget() and item.widget() is not self.empty_label:
                item.widget().deleteLater()
        self.rows = {}

    def rebuild_content(self):
        """Recreate all rows in list() order"""
        self.clear_layout()
        now = self.manager.clock()
        tasks = self.manager.list()
        if not tasks:
            self.container_layout.addWidget(self.empty_label)
            self.empty_label.show()
        else:
            self.empty_label.hide()
            for task in tasks:
                row = TaskRow(task, now)
                row.toggle_requested.connect(self.manager.toggle_timer)
                row.edit_time_requested.connect(self.open_time_dialog)
                row.edit_requested.connect(self.open_edit_dialog)
                row.delete_requested.connect(self.confirm_delete)
                self.rows[task.id] = row
                self.container_layout.addWidget(row)
        self.container_layout.addStretch()
        self.update_tick_timer()

    def update_tick_timer(self):
        if self.manager.running_tasks():
            if not self.tick_timer.isActive(): self.tick_timer.start()
        else:
            self.tick_timer.stop()

    def refresh_running(self):
        now = self.manager.clock()
        for task in self.manager.running_tasks():
            row = self.rows.get(task.id)
            if row: row.refresh(now)

    # --- signal handlers ---
    def on_task_added(self, task: Task):
        self.rebuild_content()

    def on_task_updated(self, task: Task):
        row = self.rows.get(task.id)
        if row is None:
            self.rebuild_content()
            return
        row.set_task(task, self.manager.clock())
        self.update_tick_timer()

    def on_task_deleted(self, task_id: str):
        self.rebuild_content()

    def on_persistence_failed(self, message: str):
        self.status_label.setText(f"Could not save: {message}")
        self.status_label.show()
        QTimer.singleShot(6000, self.status_label.hide)

    # --- user intents ---
    def open_add_dialog(self):
        dialog = TaskFormDialog(self.manager.create, parent=self)
        dialog.exec()

    def open_edit_dialog(self, task_id: str):
        try:
            task = self.manager.require_task(task_id)
        except NotFoundError as e:
            logger.warning("%s", e)
            return
        dialog = TaskFormDialog(
            lambda name, icon: self.manager.edit_task(task_id, name, icon),
            initial_name=task.name, initial_icon=task.icon, editing=True, parent=self
        )
        dialog.exec()

    def open_time_dialog(self, task_id: str):
        try:
            task = self.manager.require_task(task_id)
        except NotFoundError as e:
            logger.warning("%s", e)
            return
        dialog = TimeEditDialog(
            task.name, format_time(task.total_seconds),
            lambda value: self.manager.set_manual_time(task_id, value), parent=self
        )
        dialog.exec()

    def confirm_delete(self, task_id: str):
        answer = QMessageBox.question(
            self, "Delete Task",
            "Are you sure you want to delete this task? This action cannot be undone."
        )
        if answer == QMessageBox.StandardButton.Yes:
            self.manager.remove(task_id)

    def export_csv(self):
        tasks = self.manager.list()
        if not tasks:
            QMessageBox.information(self, "Export", "No tasks to export.")
            return
        default_path = str(Path.home() / export_filename())
        path, _ = QFileDialog.getSaveFileName(self, "Export Data (CSV)", default_path, "CSV files (*.csv)")
        if not path:
            return
        try:
            export_tasks_to_csv(tasks, Path(path))
        except PersistenceError as e:
            logger.error("%s", e)
            QMessageBox.warning(self, "Export", str(e))


def main():
    settings = load_settings()
    log_file = setup_logging(settings.log_dir, console_level=settings.log_level)
    logger.info("Starting %s, data in %s (log: %s)", APP_NAME, settings.home, log_file)

    storage = TaskStorage(LocalStorage(settings.storage_path))
    manager = TaskManager(storage)
    manager.load()

    if sys.platform == "linux" and "QT_QPA_PLATFORM" not in os.environ: os.environ["QT_QPA_PLATFORM"] = "xcb"
    app = QApplication(sys.argv)
    window = TimeTrackView(manager, settings)
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
