from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton
from PyQt6.QtCore import Qt

from constants import APP_NAME, DEFAULT_ICON, PANEL_COLOR, BORDER_COLOR, ACCENT_COLOR, TITLE_BAR_HEIGHT

class CustomTitleBar(QWidget):
    """Title bar of the frameless window: drag to move, export / add / close buttons"""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFixedHeight(TITLE_BAR_HEIGHT)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"background-color: {PANEL_COLOR};")
        self.layout = QHBoxLayout(self)
        self.layout.setContentsMargins(10, 0, 5, 0)
        self.layout.setSpacing(5)

        self.title_label = QLabel(f"{DEFAULT_ICON} {APP_NAME}")
        self.title_label.setStyleSheet("color: #FFFFFF; font-weight: bold; font-family: 'Consolas';")
        self.layout.addWidget(self.title_label)
        self.layout.addStretch()

        self.setCursor(Qt.CursorShape.SizeAllCursor)

        self.export_btn = QPushButton("⬇")
        self.export_btn.setToolTip("Export Data (CSV)")
        self.export_btn.setFixedSize(30, 30)
        self.export_btn.setStyleSheet(f"""
            QPushButton {{ background: transparent; color: white; border: none; font-size: 14px; }}
            QPushButton:hover {{ background: {BORDER_COLOR}; border-radius: 4px; }}
        """)
        self.export_btn.setCursor(Qt.CursorShape.ArrowCursor)
        self.layout.addWidget(self.export_btn)

        self.add_btn = QPushButton("+ Add Task")
        self.add_btn.setFixedHeight(26)
        self.add_btn.setStyleSheet(f"""
            QPushButton {{ background: {ACCENT_COLOR}; color: white; border: none; border-radius: 13px; padding: 0 10px; font-weight: bold; }}
            QPushButton:hover {{ background: #5AA0F2; }}
        """)
        self.add_btn.setCursor(Qt.CursorShape.ArrowCursor)
        self.layout.addWidget(self.add_btn)

        self.close_btn = QPushButton("✕")
        self.close_btn.setFixedSize(30, 30)
        self.close_btn.setStyleSheet("QPushButton { background: transparent; color: white; border: none; } QPushButton:hover { background: #e81123; }")
        self.close_btn.setCursor(Qt.CursorShape.ArrowCursor)
        self.layout.addWidget(self.close_btn)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._drag_offset = event.globalPosition().toPoint() - self.window().pos()
            event.accept()

    def mouseMoveEvent(self, event):
        if event.buttons() == Qt.MouseButton.LeftButton and hasattr(self, '_drag_offset'):
            self.window().move(event.globalPosition().toPoint() - self._drag_offset)
            event.accept()
