from .image_panel import ImagePanel
from .similarity_chart import SimilarityChart

__all__ = ["ImagePanel", "SimilarityChart"]
