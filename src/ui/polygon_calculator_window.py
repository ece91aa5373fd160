"""
Polygon Calculator Window - Enter polygon points and view edge lengths
"""

from PySide6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel,
                             QPlainTextEdit, QPushButton, QGroupBox,
                             QTableWidget, QTableWidgetItem, QHeaderView,
                             QAbstractItemView, QCheckBox)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont

from calculations import PolygonEdgeCalculator, EdgeCalculationResult, sample_input_text
from calculations.edge_report import format_length, format_perimeter, format_point
from utils import get_application_title, get_settings_manager

INPUT_PLACEHOLDER = 'Example: [{"x": 0, "y": 0}, {"x": 3, "y": 0}, {"x": 3, "y": 4}]'


class PolygonCalculatorWindow(QWidget):
    """Main window: point input, compute action and edge results"""

    calculation_finished = Signal(object)  # EdgeCalculationResult

    def __init__(self, settings_manager=None, parent=None):
        super().__init__(parent)
        self.settings_manager = settings_manager or get_settings_manager()
        self.result = EdgeCalculationResult.empty()
        self.init_ui()
        self.restore_geometry()
        self.display_result(self.result)

    def init_ui(self):
        """Initialize the user interface"""
        self.setWindowTitle(get_application_title())
        self.resize(640, 560)

        layout = QVBoxLayout()

        title = QLabel("Polygon Edge Calculator")
        title.setFont(QFont("Arial", 16, QFont.Bold))
        layout.addWidget(title)

        layout.addWidget(QLabel("Enter the polygon points as JSON:"))

        # Input section
        input_group = QGroupBox("Points")
        input_layout = QVBoxLayout()

        self.input_edit = QPlainTextEdit()
        self.input_edit.setPlaceholderText(INPUT_PLACEHOLDER)
        self.input_edit.setFont(QFont("Courier New", 10))
        self.input_edit.setMinimumHeight(140)
        input_layout.addWidget(self.input_edit)

        self.lenient_checkbox = QCheckBox("Accept unquoted keys (e.g. {x: 0, y: 0})")
        self.lenient_checkbox.setChecked(self.settings_manager.allow_lenient_syntax())
        self.lenient_checkbox.toggled.connect(self.settings_manager.set_allow_lenient_syntax)
        input_layout.addWidget(self.lenient_checkbox)

        # Buttons
        button_layout = QHBoxLayout()

        self.calculate_btn = QPushButton("Calculate")
        self.calculate_btn.setDefault(True)
        self.calculate_btn.clicked.connect(self.calculate)

        self.sample_btn = QPushButton("Load Sample Data")
        self.sample_btn.clicked.connect(self.load_sample_data)

        button_layout.addWidget(self.calculate_btn)
        button_layout.addWidget(self.sample_btn)
        button_layout.addStretch()
        input_layout.addLayout(button_layout)

        input_group.setLayout(input_layout)
        layout.addWidget(input_group)

        # Error display
        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(
            "color: #c0392b; background-color: #fdecea; border: 1px solid #e6b0aa; padding: 6px;"
        )
        layout.addWidget(self.error_label)

        # Results
        self.results_group = QGroupBox("Results")
        results_layout = QVBoxLayout()

        self.edges_table = QTableWidget()
        self.edges_table.setColumnCount(4)
        self.edges_table.setHorizontalHeaderLabels(["Edge", "Length", "From", "To"])
        self.edges_table.setAlternatingRowColors(True)
        self.edges_table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.edges_table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.edges_table.verticalHeader().setVisible(False)

        header = self.edges_table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(2, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)
        results_layout.addWidget(self.edges_table)

        self.perimeter_label = QLabel()
        self.perimeter_label.setFont(QFont("Arial", 11, QFont.Bold))
        results_layout.addWidget(self.perimeter_label)

        self.results_group.setLayout(results_layout)
        layout.addWidget(self.results_group)

        self.setLayout(layout)

    def input_text(self):
        return self.input_edit.toPlainText()

    def set_input_text(self, text):
        self.input_edit.setPlainText(text)

    def load_sample_data(self):
        """Fill the input with the right-triangle sample"""
        self.set_input_text(sample_input_text())

    def calculate(self):
        """Run one compute pass and replace the displayed result"""
        calculator = PolygonEdgeCalculator(allow_lenient=self.lenient_checkbox.isChecked())
        result = calculator.calculate(self.input_text())
        self.result = result
        self.display_result(result)
        self.calculation_finished.emit(result)
        return result

    def display_result(self, result):
        """Render a result; failures show only the error message"""
        if result.is_error:
            self.error_label.setText(result.error_message)
            self.error_label.setVisible(True)
            self.populate_edges_table(())
            self.results_group.setVisible(False)
            return

        self.error_label.clear()
        self.error_label.setVisible(False)
        self.populate_edges_table(result.edges)
        self.perimeter_label.setText(format_perimeter(result.perimeter))
        self.results_group.setVisible(result.edge_count > 0)

    def populate_edges_table(self, edges):
        """Refresh the edges table display"""
        self.edges_table.setRowCount(len(edges))

        for row, edge in enumerate(edges):
            index_item = QTableWidgetItem(f"Edge {edge.index}")
            self.edges_table.setItem(row, 0, index_item)

            length_item = QTableWidgetItem(format_length(edge.length))
            length_item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self.edges_table.setItem(row, 1, length_item)

            self.edges_table.setItem(row, 2, QTableWidgetItem(format_point(edge.start)))
            self.edges_table.setItem(row, 3, QTableWidgetItem(format_point(edge.end)))

    def restore_geometry(self):
        geometry = self.settings_manager.get_window_geometry()
        if geometry is not None:
            self.restoreGeometry(geometry)

    def closeEvent(self, event):
        """Handle window close event"""
        self.settings_manager.set_window_geometry(self.saveGeometry())
        event.accept()
