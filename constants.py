"""Shared constants for the TimeTrack widget"""
from typing import List, Tuple

APP_NAME = "TimeTrack"
DEFAULT_ICON = "⏱️"

# localStorage key used by the original browser widget; stored value format is shared
STORAGE_KEY_TASKS = "timeTrackerTasks_v1"

# (name, emoji)
AVAILABLE_ICONS: List[Tuple[str, str]] = [
    ("Clock", "⏱️"),
    ("Laptop", "💻"),
    ("Book", "📚"),
    ("Briefcase", "💼"),
    ("Brain", "🧠"),
    ("Lightbulb", "💡"),
    ("Target", "🎯"),
    ("Chart", "📊"),
    ("Pen", "✍️"),
    ("Palette", "🎨"),
    ("Atom", "⚛️"),
    ("Coffee", "☕"),
    ("Gym", "🏋️"),
    ("Music", "🎵"),
    ("World", "🌍"),
]

ICON_GRID_COLUMNS = 5

WINDOW_WIDTH = 420
WINDOW_HEIGHT = 560
TITLE_BAR_HEIGHT = 35
ROW_HEIGHT = 64

# palette
BG_COLOR = "#1F2329"
PANEL_COLOR = "#2A3039"
BORDER_COLOR = "#3A4049"
ACCENT_COLOR = "#4A90E2"
RUNNING_COLOR = "#A3BE8C"
ERROR_COLOR = "#BF616A"
MUTED_TEXT = "#888888"
