from PyQt6.QtWidgets import QWidget, QGridLayout, QPushButton, QButtonGroup
from PyQt6.QtCore import Qt, pyqtSignal

from constants import AVAILABLE_ICONS, ICON_GRID_COLUMNS, DEFAULT_ICON, BORDER_COLOR, ACCENT_COLOR

class IconPicker(QWidget):
    """Grid of emoji buttons, exactly one checked"""
    icon_selected = pyqtSignal(str)

    def __init__(self, selected_icon: str = DEFAULT_ICON, parent=None):
        super().__init__(parent)
        self.selected_icon = selected_icon
        self.group = QButtonGroup(self)
        self.group.setExclusive(True)
        self.buttons = {}

        grid = QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setSpacing(4)
        for i, (name, emoji) in enumerate(AVAILABLE_ICONS):
            btn = QPushButton(emoji)
            btn.setCheckable(True)
            btn.setFixedSize(40, 40)
            btn.setToolTip(f"Select icon: {name}")
            btn.setStyleSheet(f"""
                QPushButton {{ background: {BORDER_COLOR}; border: none; border-radius: 6px; font-size: 20px; }}
                QPushButton:checked {{ background: {ACCENT_COLOR}; }}
            """)
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.clicked.connect(lambda checked, e=emoji: self.select(e))
            self.group.addButton(btn)
            self.buttons[emoji] = btn
            grid.addWidget(btn, i // ICON_GRID_COLUMNS, i % ICON_GRID_COLUMNS)

        self.select(selected_icon)

    def select(self, emoji: str):
        # icons outside the catalogue are kept but no button is checked
        self.selected_icon = emoji
        btn = self.buttons.get(emoji)
        if btn is not None:
            btn.setChecked(True)
        self.icon_selected.emit(emoji)
