import logging
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QVBoxLayout, QHBoxLayout, QWidget, QPushButton,
    QFileDialog, QLabel, QMessageBox
)
from PySide6.QtCore import Qt

from ..core.cursor import Side
from ..core.dataset import load_dataset
from ..core.errors import SetupError, EmptyCatalogError
from ..core.viewer_session import ViewerSession
from ..ui.components import ImagePanel, SimilarityChart
from ..utils.preferences import Preferences, get_preferences

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main window: dataset header, similarity chart and the two image panels."""

    def __init__(self, preferences: Optional[Preferences] = None):
        super().__init__()
        self.preferences = preferences or get_preferences()
        self.session: Optional[ViewerSession] = None
        self.panels = {}
        self.chart: Optional[SimilarityChart] = None

        self.setWindowTitle("ReID Viewer")
        self.resize(
            self.preferences.get("ui.window_width", 1400),
            self.preferences.get("ui.window_height", 900),
        )
        self.setStyleSheet("QMainWindow { background-color: #1e1e1e; } QLabel { color: #cccccc; }")
        self.show_start_screen()

    def show_start_screen(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addStretch()

        title = QLabel("ReID Viewer")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 20px; font-weight: bold;")
        layout.addWidget(title)

        hint = QLabel("Select a directory containing an \"images\" folder and a similarity table")
        hint.setAlignment(Qt.AlignCenter)
        hint.setStyleSheet("color: #888;")
        layout.addWidget(hint)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.open_button = QPushButton("Select Directory")
        self.open_button.clicked.connect(self.select_directory)
        button_row.addWidget(self.open_button)
        button_row.addStretch()
        layout.addLayout(button_row)

        layout.addStretch()
        self.setCentralWidget(central)

    def select_directory(self):
        start_dir = self.preferences.get("dataset.last_directory", "")
        directory = QFileDialog.getExistingDirectory(self, "Select Directory", start_dir)
        self.open_directory(directory)

    def open_directory(self, directory: Optional[str]) -> bool:
        """Load a dataset and start a session. Setup failures are shown to the user."""
        try:
            dataset = load_dataset(
                directory,
                images_subdir=self.preferences.get("dataset.images_subdir", "images"),
                similarity_file=self.preferences.get("dataset.similarity_file", "cos_similarity.csv"),
            )
        except EmptyCatalogError as e:
            QMessageBox.information(self, "ReID Viewer", e.message)
            return False
        except SetupError as e:
            logger.warning("Could not open %s: %s", directory, e.message)
            QMessageBox.warning(self, "ReID Viewer", e.message)
            return False

        self.preferences.set("dataset.last_directory", dataset.directory)
        self.start_session(ViewerSession.from_dataset(dataset), dataset.directory)
        return True

    def start_session(self, session: ViewerSession, directory: str = ""):
        self.session = session
        total = len(session.catalog)
        max_image_size = self.preferences.get("ui.max_image_size", 700)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)

        # Header
        for text in (f"Path: {directory}", f"Images: {total}"):
            label = QLabel(text)
            label.setAlignment(Qt.AlignCenter)
            label.setStyleSheet("font-size: 12px; color: #888; font-family: monospace;")
            layout.addWidget(label)

        # Similarity score and chart
        score_row = QHBoxLayout()
        score_row.addStretch()
        caption = QLabel("Similarity")
        caption.setStyleSheet("font-size: 14px;")
        score_row.addWidget(caption)
        self.score_label = QLabel("-")
        score_row.addWidget(self.score_label)
        score_row.addStretch()
        layout.addLayout(score_row)

        self.chart = SimilarityChart()
        layout.addWidget(self.chart)

        # Dual viewer
        viewer_row = QHBoxLayout()
        self.panels = {}
        for side in (Side.REFERENCE, Side.TARGET):
            panel = ImagePanel(side, total, max_image_size=max_image_size)
            panel.navigate_requested.connect(self.on_navigate)
            panel.slider_moved.connect(self.on_slider_moved)
            viewer_row.addWidget(panel, 1)
            self.panels[side] = panel
        layout.addLayout(viewer_row, 1)

        self.setCentralWidget(central)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setFocus()
        self.refresh()

    def on_navigate(self, side: Side, delta: int):
        if self.session and self.session.navigate(side, delta):
            self.refresh()

    def on_slider_moved(self, side: Side, position: int):
        if self.session and self.session.select_from_slider(side, position):
            self.refresh()

    def keyPressEvent(self, event):
        """Left/Right move the target; with Shift they move the reference."""
        delta = {Qt.Key_Left: -1, Qt.Key_Right: 1}.get(event.key())
        if self.session is None or delta is None:
            super().keyPressEvent(event)
            return
        side = Side.REFERENCE if event.modifiers() & Qt.ShiftModifier else Side.TARGET
        self.on_navigate(side, delta)
        event.accept()

    def refresh(self):
        """Repaint every widget from a fresh snapshot of the session state."""
        if self.session is None:
            return
        state = self.session.view_state()
        self.panels[Side.REFERENCE].set_state(state.reference)
        self.panels[Side.TARGET].set_state(state.target)
        self.score_label.setText(state.score_text)
        self.score_label.setStyleSheet(
            f"font-size: 24px; font-weight: bold; color: {state.score_tier.color};"
        )
        self.chart.set_data(state.distribution, state.highlight_index)
