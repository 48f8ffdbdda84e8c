"""
Utility functions for image loading.
"""

import io
import logging
from typing import Optional

from PIL import Image
from PySide6.QtGui import QPixmap

logger = logging.getLogger(__name__)


def load_image_as_pixmap(image_path: str, max_size: Optional[int] = None) -> Optional[QPixmap]:
    """
    Load an image file and convert it to QPixmap with optional resizing.

    Args:
        image_path: Path to the image file
        max_size: Maximum dimension (width/height) for the image.
            If None, loads at original size

    Returns:
        QPixmap of the loaded image, or None if loading failed
    """
    try:
        with Image.open(image_path) as img:
            # Convert to RGB if needed (handles RGBA, LA, P modes)
            if img.mode not in ('RGB', 'L'):
                img = img.convert('RGB')

            if max_size:
                img.thumbnail((max_size, max_size), Image.Resampling.LANCZOS)

            img_buffer = io.BytesIO()
            img.save(img_buffer, format='PNG')

            pixmap = QPixmap()
            pixmap.loadFromData(img_buffer.getvalue(), 'PNG')

            return pixmap if not pixmap.isNull() else None

    except (OSError, ValueError) as e:
        logger.warning("Failed to load %s: %s", image_path, e)
        return None
