import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


class ImageScanner:
    SUPPORTED_EXTENSIONS = {
        '.jpg', '.jpeg', '.png', '.gif', '.bmp', '.webp'
    }
    
    def scan_images(self, folder_path: str) -> List[str]:
        """
        Scan a folder for supported image files.
        
        Only direct children are considered; order is left to the catalog.
        
        Args:
            folder_path: Path to the folder to scan
            
        Returns:
            List of image filenames (without directory)
        """
        filenames = []
        folder = Path(folder_path)
        
        if not folder.is_dir():
            return filenames
        
        try:
            for file_path in folder.iterdir():
                if file_path.is_file() and self._is_supported_image(file_path):
                    filenames.append(file_path.name)
        except OSError as e:
            logger.warning("Could not list %s: %s", folder_path, e)
            return []
        
        return filenames
    
    def _is_supported_image(self, file_path: Path) -> bool:
        """Check if file has a supported image extension."""
        return file_path.suffix.lower() in self.SUPPORTED_EXTENSIONS
