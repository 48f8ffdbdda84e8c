"""
One side of the dual viewer: image, caption, counter and navigation controls.
"""

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSlider, QSizePolicy
)
from PySide6.QtCore import Qt, Signal

from ...core.cursor import Side
from ...core.viewer_session import PanelState
from ..utils.image_utils import load_image_as_pixmap

PLACEHOLDER_TEXT = "Use controls to select image"

NAV_BUTTON_STYLE = """
    QPushButton {
        padding: 6px 14px;
        font-size: 14px;
        border: 1px solid #555;
        border-radius: 4px;
        background-color: #3c3c3c;
        color: #cccccc;
    }
    QPushButton:hover:enabled {
        background-color: #4a4a4a;
    }
    QPushButton:disabled {
        color: #666;
        background-color: #2d2d2d;
    }
"""


class ImagePanel(QWidget):
    """Viewer panel for the reference or the target image."""
    
    # Signals
    navigate_requested = Signal(object, int)  # side, delta
    slider_moved = Signal(object, int)  # side, 1-based position
    
    TITLES = {
        Side.REFERENCE: "Reference Image",
        Side.TARGET: "Target Image",
    }
    
    def __init__(self, side: Side, total: int, max_image_size: int = 700, parent=None):
        super().__init__(parent)
        self.side = side
        self.total = total
        self.max_image_size = max_image_size
        self.current_path = None
        
        self.init_ui()
    
    def init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(8)
        self.setStyleSheet("background-color: #2d2d2d; color: #cccccc;")
        
        # Header
        header_layout = QHBoxLayout()
        title = QLabel(self.TITLES[self.side])
        title.setStyleSheet("font-size: 14px; font-weight: bold;")
        header_layout.addWidget(title)
        header_layout.addStretch()
        self.header_counter = QLabel(f"- / {self.total}")
        self.header_counter.setStyleSheet("font-size: 12px; color: #888;")
        header_layout.addWidget(self.header_counter)
        layout.addLayout(header_layout)
        
        # Image area
        self.image_label = QLabel(PLACEHOLDER_TEXT)
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setMinimumSize(300, 300)
        self.image_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.image_label.setStyleSheet("""
            QLabel {
                background-color: #1e1e1e;
                border: 1px solid #444;
                border-radius: 6px;
                color: #888;
            }
        """)
        layout.addWidget(self.image_label, 1)
        
        self.info_label = QLabel("No image selected")
        self.info_label.setAlignment(Qt.AlignCenter)
        self.info_label.setStyleSheet("font-size: 12px; font-family: monospace;")
        layout.addWidget(self.info_label)
        
        # Controls
        controls = QHBoxLayout()
        
        self.prev_button = QPushButton("←")
        self.prev_button.setStyleSheet(NAV_BUTTON_STYLE)
        self.prev_button.setFocusPolicy(Qt.NoFocus)
        self.prev_button.clicked.connect(lambda: self.navigate_requested.emit(self.side, -1))
        controls.addWidget(self.prev_button)
        
        self.counter_label = QLabel(f"- / {self.total}")
        self.counter_label.setMinimumWidth(60)
        self.counter_label.setAlignment(Qt.AlignCenter)
        controls.addWidget(self.counter_label)
        
        self.slider = QSlider(Qt.Horizontal)
        self.slider.setMinimum(1)
        self.slider.setMaximum(max(1, self.total))
        self.slider.setValue(1)
        # Arrow keys belong to the window
        self.slider.setFocusPolicy(Qt.NoFocus)
        self.slider.valueChanged.connect(lambda value: self.slider_moved.emit(self.side, value))
        controls.addWidget(self.slider, 1)
        
        self.next_button = QPushButton("→")
        self.next_button.setStyleSheet(NAV_BUTTON_STYLE)
        self.next_button.setFocusPolicy(Qt.NoFocus)
        self.next_button.clicked.connect(lambda: self.navigate_requested.emit(self.side, 1))
        controls.addWidget(self.next_button)
        
        layout.addLayout(controls)
    
    def set_state(self, state: PanelState):
        """Show the given panel state."""
        self.header_counter.setText(state.counter)
        self.counter_label.setText(state.counter)
        self.info_label.setText(state.caption)
        
        # Programmatic moves must not echo back as user input
        self.slider.blockSignals(True)
        self.slider.setValue(state.slider_value)
        self.slider.blockSignals(False)
        
        self.prev_button.setEnabled(state.can_go_previous)
        self.next_button.setEnabled(state.can_go_next)
        
        if state.descriptor is None:
            self.current_path = None
            self.image_label.clear()
            self.image_label.setText(PLACEHOLDER_TEXT)
            return
        
        if state.descriptor.content_ref != self.current_path:
            self.load_image(state.descriptor.content_ref)
    
    def load_image(self, image_path: str):
        self.current_path = image_path
        pixmap = load_image_as_pixmap(image_path, max_size=self.max_image_size)
        if pixmap:
            self.image_label.setPixmap(pixmap)
        else:
            self.image_label.setText("⚠️ Error loading image")
