"""
Bar chart of one reference image's similarity to every catalog image.
"""

from typing import Sequence

from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ...core.cursor import NO_SELECTION
from ...core.similarity_view import (
    SimilarityPoint, classify, scale_for_chart, normalize_for_chart
)

BACKGROUND_COLOR = "#1e1e1e"
GRID_COLOR = "#444444"
HIGHLIGHT_COLOR = "#ffffff"
PADDING = 20
GRID_LINES = 10
BAR_GAP_RATIO = 0.1


class SimilarityChart(QWidget):
    """Bars coloured by tier; the current target's bar is highlighted."""
    
    def __init__(self, parent=None):
        super().__init__(parent)
        self.distribution: Sequence[SimilarityPoint] = ()
        self.highlight_index = NO_SELECTION
        self.setFixedHeight(180)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
    
    def set_data(self, distribution: Sequence[SimilarityPoint], highlight_index: int):
        self.distribution = tuple(distribution)
        self.highlight_index = highlight_index
        self.update()
    
    def bar_rects(self, width: float, height: float):
        """Yield ``(point, rect)`` for every bar at the given widget size."""
        if not self.distribution:
            return
        graph_width = width - PADDING * 2
        graph_height = height - PADDING * 2
        bar_width = graph_width / len(self.distribution)
        bar_gap = max(0.0, bar_width * BAR_GAP_RATIO)
        actual_bar_width = max(1.0, bar_width - bar_gap)
        
        heights = normalize_for_chart(self.distribution, scale_for_chart(self.distribution))
        for i, point in enumerate(self.distribution):
            x = PADDING + i * bar_width + bar_gap / 2
            bar_height = float(heights[i]) * graph_height
            y = PADDING + graph_height - bar_height
            yield point, QRectF(x, y, actual_bar_width, bar_height)
    
    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            width = self.width()
            height = self.height()
            painter.fillRect(0, 0, width, height, QColor(BACKGROUND_COLOR))
            if not self.distribution:
                return
            
            graph_width = width - PADDING * 2
            graph_height = height - PADDING * 2
            
            for point, rect in self.bar_rects(width, height):
                color = QColor(classify(point.similarity).color)
                if point.index == self.highlight_index:
                    column = QRectF(rect.x() - 1, PADDING, rect.width() + 2, graph_height)
                    painter.fillRect(column, QColor(HIGHLIGHT_COLOR))
                    painter.fillRect(rect, color)
                    painter.setPen(QPen(QColor(HIGHLIGHT_COLOR), 2))
                    painter.drawRect(rect)
                else:
                    painter.fillRect(rect, color)
            
            painter.setPen(QPen(QColor(GRID_COLOR), 1))
            for i in range(GRID_LINES + 1):
                y = PADDING + (graph_height / GRID_LINES) * i
                painter.drawLine(PADDING, int(y), PADDING + int(graph_width), int(y))
        finally:
            painter.end()
