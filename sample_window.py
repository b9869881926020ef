"""
Numeric Edit sample application.
Shows a free numeric field and a constrained one, each with a button that
reports the value it currently holds.
"""
import sys
from dataclasses import replace
from typing import Optional

from PySide6.QtWidgets import (
    QApplication, QFormLayout, QGroupBox, QLabel, QMessageBox,
    QPushButton, QVBoxLayout, QWidget
)

from format_config import FormatConfig
from logger import LoggableMixin
from numeric_line_edit import NumericLineEdit

CONSTRAINED_DIGITS_BEFORE_DECIMAL = 5
CONSTRAINED_DIGITS_AFTER_DECIMAL = 2


class SampleWindow(QWidget, LoggableMixin):
    """Window with a free and a constrained numeric field."""

    def __init__(self, config: Optional[FormatConfig] = None, parent=None):
        QWidget.__init__(self, parent)
        LoggableMixin.__init__(self)
        config = config or FormatConfig()

        self.setWindowTitle("Numeric Edit Sample")
        layout = QVBoxLayout(self)

        self.numeric_field = NumericLineEdit(config)
        self.numeric_button = QPushButton("Show value")
        layout.addWidget(self._build_group("Numeric", self.numeric_field, self.numeric_button))

        self.constrained_field = NumericLineEdit(
            replace(
                config,
                max_digits_before_decimal=CONSTRAINED_DIGITS_BEFORE_DECIMAL,
                max_digits_after_decimal=CONSTRAINED_DIGITS_AFTER_DECIMAL,
            )
        )
        self.constrained_button = QPushButton("Show value")
        layout.addWidget(
            self._build_group("Constrained", self.constrained_field, self.constrained_button)
        )

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

        self.numeric_button.clicked.connect(lambda: self.show_value(self.numeric_field))
        self.constrained_button.clicked.connect(lambda: self.show_value(self.constrained_field))
        self.numeric_field.numeric_value_changed.connect(
            lambda value: self.status_label.setText(f"New value: {value}")
        )
        self.numeric_field.numeric_value_cleared.connect(
            lambda: self.status_label.setText("Value cleared")
        )

    def _build_group(self, title: str, field: NumericLineEdit, button: QPushButton) -> QGroupBox:
        group = QGroupBox(title)
        form = QFormLayout(group)
        form.addRow("Value", field)
        form.addRow(button)
        return group

    def show_value(self, field: NumericLineEdit):
        value = field.get_numeric_value()
        self.log_user_action("show_value", {"value": value})
        QMessageBox.information(self, "Numeric value", str(value))


def run_sample(config: Optional[FormatConfig] = None) -> int:
    """Run the sample window until it is closed."""
    app = QApplication.instance() or QApplication(sys.argv)
    window = SampleWindow(config)
    window.show()
    return app.exec()
