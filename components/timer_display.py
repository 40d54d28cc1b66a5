from PyQt6.QtWidgets import QLabel

from constants import RUNNING_COLOR
from models.duration import format_time

class TimerDisplay(QLabel):
    """Monospace HH:MM:SS label"""
    def __init__(self, seconds: int = 0, parent=None):
        super().__init__(parent)
        self.seconds = -1
        self.set_running(False)
        self.set_seconds(seconds)

    def set_seconds(self, seconds: int):
        if seconds == self.seconds: return
        self.seconds = seconds
        self.setText(format_time(seconds))

    def set_running(self, running: bool):
        color = RUNNING_COLOR if running else "#D8DEE9"
        self.setStyleSheet(f"color: {color}; font-family: 'Consolas'; font-size: 15px;")
