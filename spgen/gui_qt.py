"""
Qt GUI for the secure password generator.

One window:
- Result row: read-only password field + Copy button
- Options: length spin box and the four character-class toggles
- Generate button
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from .config import DEFAULT_CONFIG, GeneratorConfig
from .errors import ConfigError, EntropySourceError
from .generator import generate_with_meta
from .logging_config import configure_logging

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Click 'Generate' to create a password."


class GeneratorWindow(QMainWindow):
    """
    Collects length and class toggles, calls the core, shows the result.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        # Work on a copy; the shared default must not follow widget state.
        self.config = dataclasses.replace(config or DEFAULT_CONFIG)

        self.setWindowTitle("Random Password Generator")
        self.resize(450, 300)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)

        layout.addLayout(self._build_result_row())
        layout.addWidget(self._build_options_group())
        layout.addWidget(self._build_generate_button())
        layout.addWidget(self._build_status_label())

        self.setCentralWidget(central)

    # -- layout --

    def _build_result_row(self) -> QHBoxLayout:
        row = QHBoxLayout()

        self.password_field = QLineEdit()
        self.password_field.setReadOnly(True)
        self.password_field.setPlaceholderText(PLACEHOLDER_TEXT)
        pw_font = QFont("Monospace")
        pw_font.setStyleHint(QFont.StyleHint.Monospace)
        pw_font.setPointSize(14)
        self.password_field.setFont(pw_font)

        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self.copy_to_clipboard)

        row.addWidget(self.password_field, 1)
        row.addWidget(self.copy_button)
        return row

    def _build_options_group(self) -> QGroupBox:
        group = QGroupBox("Options")
        layout = QVBoxLayout()
        layout.setSpacing(5)

        length_row = QHBoxLayout()
        length_row.addWidget(QLabel("Password Length:"))
        self.length_spin = QSpinBox()
        self.length_spin.setRange(self.config.min_length, self.config.max_length)
        self.length_spin.setValue(self.config.password_length)
        length_row.addWidget(self.length_spin)
        length_row.addStretch()
        layout.addLayout(length_row)

        self.lower_check = QCheckBox("Include Lowercase (a-z)")
        self.lower_check.setChecked(self.config.include_lowercase)
        self.upper_check = QCheckBox("Include Uppercase (A-Z)")
        self.upper_check.setChecked(self.config.include_uppercase)
        self.numbers_check = QCheckBox("Include Numbers (0-9)")
        self.numbers_check.setChecked(self.config.include_digits)
        self.symbols_check = QCheckBox("Include Symbols (!@#...)")
        self.symbols_check.setChecked(self.config.include_symbols)

        for check in (
            self.lower_check,
            self.upper_check,
            self.numbers_check,
            self.symbols_check,
        ):
            layout.addWidget(check)

        group.setLayout(layout)
        return group

    def _build_generate_button(self) -> QPushButton:
        self.generate_button = QPushButton("Generate Password")
        gen_font = self.generate_button.font()
        gen_font.setPointSize(13)
        gen_font.setBold(True)
        self.generate_button.setFont(gen_font)
        self.generate_button.clicked.connect(self.on_generate_clicked)
        return self.generate_button

    def _build_status_label(self) -> QLabel:
        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        return self.status_label

    # -- actions --

    def _sync_config(self) -> None:
        self.config.password_length = self.length_spin.value()
        self.config.include_lowercase = self.lower_check.isChecked()
        self.config.include_uppercase = self.upper_check.isChecked()
        self.config.include_digits = self.numbers_check.isChecked()
        self.config.include_symbols = self.symbols_check.isChecked()

    def on_generate_clicked(self) -> None:
        self._sync_config()

        try:
            meta = generate_with_meta(self.config.to_request())
        except ConfigError as exc:
            self.password_field.clear()
            self.status_label.setText("")
            self._show_error(str(exc))
            return
        except EntropySourceError as exc:
            logger.error("Entropy source failure: %s", exc)
            self.password_field.clear()
            self.status_label.setText("")
            self._show_error(f"Error while generating password:\n{exc}")
            return

        self.password_field.setText(meta.password)
        self.status_label.setText(
            f"Generated {meta.request.length} characters "
            f"from a {meta.alphabet_size}-character alphabet."
        )

    def copy_to_clipboard(self) -> None:
        password = self.password_field.text()
        if not password:
            # Only the placeholder is showing.
            return

        QGuiApplication.clipboard().setText(password)
        self._show_info("Copied", "Password copied to clipboard!")

    def _show_error(self, message: str) -> None:
        QMessageBox.critical(self, "Error", message)

    def _show_info(self, title: str, message: str) -> None:
        QMessageBox.information(self, title, message)


def main() -> None:
    configure_logging()
    app = QApplication(sys.argv)
    window = GeneratorWindow()
    window.show()
    sys.exit(app.exec())
