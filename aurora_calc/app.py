from PySide6.QtWidgets import (
    QDialog, QGridLayout, QHBoxLayout, QLabel, QListWidget, QListWidgetItem,
    QPushButton, QVBoxLayout, QWidget
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut

from .buttons import BUTTONS, EQUAL, FN, OP, find_button

STYLES = {
    EQUAL: "background-color: #14b8a6; color: white; font-size: 18px; padding: 15px;",
    OP: "background-color: #1e293b; color: #67e8f9; font-size: 18px; padding: 15px;",
    FN: "background-color: #334155; color: #f472b6; font-size: 18px; padding: 15px;",
    "num": "background-color: #1e293b; color: #e2e8f0; font-size: 18px; padding: 15px;",
}

# کلیدهای صفحه‌کلید -> برچسب دکمه
KEY_LABELS = {str(d): str(d) for d in range(10)}
KEY_LABELS.update({
    ".": ".", "(": "(", ")": ")", "+": "+", "-": "-", "%": "%",
    "*": "×", "/": "÷",
    "Backspace": "DEL", "Return": "RESULT", "Enter": "RESULT",
})


class HistoryDrawer(QDialog):
    """پنجره‌ی تاریخچه با امکان بارگذاری و پاک کردن"""

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.entries = ()
        self.setWindowTitle("History")
        self.resize(360, 480)
        self.setStyleSheet("background-color: #0f172a; color: white; font-size: 14px;")

        layout = QVBoxLayout(self)
        self.empty_label = QLabel("No history yet")
        self.empty_label.setStyleSheet("color: #94a3b8;")
        layout.addWidget(self.empty_label)

        self.list_widget = QListWidget()
        self.list_widget.itemDoubleClicked.connect(self.load_selected)
        layout.addWidget(self.list_widget)

        self.btn_load = QPushButton("Load")
        self.btn_load.clicked.connect(self.load_selected)
        layout.addWidget(self.btn_load)

        self.btn_clear = QPushButton("Clear History")
        self.btn_clear.setStyleSheet("background-color: #ec4899; color: white; padding: 8px;")
        self.btn_clear.clicked.connect(controller.clear_history)
        layout.addWidget(self.btn_clear)

        self.btn_close = QPushButton("Close")
        self.btn_close.clicked.connect(self.reject)
        layout.addWidget(self.btn_close)

        self.finished.connect(lambda _result: controller.hide_history())

    def refresh_list(self, entries):
        self.entries = entries
        self.list_widget.clear()
        for entry in entries:
            self.list_widget.addItem(QListWidgetItem(f"{entry.expression}\n= {entry.result}"))
        self.empty_label.setVisible(not entries)
        self.btn_load.setEnabled(bool(entries))

    def load_selected(self, *_args):
        row = self.list_widget.currentRow()
        if 0 <= row < len(self.entries):
            self.controller.load_entry(self.entries[row])


class CalculatorWindow(QWidget):
    def __init__(self, controller):
        super().__init__()
        self.controller = controller
        self.setWindowTitle("Calc")
        self.setStyleSheet("background-color: #0f172a; color: white; font-size: 18px;")

        # سربرگ
        header = QHBoxLayout()
        title = QLabel("Calc")
        title.setStyleSheet("color: #22d3ee; font-weight: bold;")
        header.addWidget(title)
        header.addStretch()
        btn_history = QPushButton("History")
        btn_history.clicked.connect(controller.show_history)
        header.addWidget(btn_history)
        btn_clear = QPushButton("Clear")
        btn_clear.clicked.connect(controller.clear_all)
        header.addWidget(btn_clear)

        # نمایشگر
        self.display = QLabel("0")
        self.display.setStyleSheet("color: #67e8f9; font-size: 40px; font-weight: bold; padding: 5px;")
        self.display.setAlignment(Qt.AlignRight)
        self.expression_line = QLabel("")
        self.expression_line.setStyleSheet("color: #94a3b8; font-size: 14px;")
        self.expression_line.setAlignment(Qt.AlignRight)

        # دکمه‌ها: چهار ستون، RESULT تمام عرض ردیف آخر
        grid = QGridLayout()
        for index, button in enumerate(BUTTONS):
            widget = QPushButton(button.label)
            widget.setStyleSheet(STYLES[button.kind])
            widget.clicked.connect(lambda _checked=False, b=button: controller.press(b))
            row, col = divmod(index, 4)
            if button.kind == EQUAL:
                grid.addWidget(widget, row, 0, 1, 4)
            else:
                grid.addWidget(widget, row, col)

        layout = QVBoxLayout()
        layout.addLayout(header)
        layout.addWidget(self.display)
        layout.addWidget(self.expression_line)
        layout.addLayout(grid)
        self.setLayout(layout)

        self.drawer = HistoryDrawer(controller, self)

        # اتصال کیبورد
        self.shortcuts()

        controller.subscribe(self.render)
        self.render(controller.state)

    def shortcuts(self):
        for key, label in KEY_LABELS.items():
            button = find_button(label)
            QShortcut(QKeySequence(key), self, activated=lambda b=button: self.controller.press(b))
        QShortcut(QKeySequence("Escape"), self, activated=self.controller.clear_all)

    def render(self, state):
        self.display.setText(state.display)
        self.expression_line.setText(state.expression)
        self.drawer.refresh_list(state.history)
        if state.history_visible and not self.drawer.isVisible():
            self.drawer.show()
        elif not state.history_visible and self.drawer.isVisible():
            self.drawer.hide()
