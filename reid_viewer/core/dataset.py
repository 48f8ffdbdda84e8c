"""
Open a dataset directory: an images folder plus a similarity table.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .catalog import ImageCatalog
from .errors import (
    ParseError, NoDirectorySelectedError, MissingImagesDirectoryError,
    MissingSimilarityFileError, InvalidSimilarityFileError, EmptyCatalogError
)
from .scanner import ImageScanner
from .similarity_table import SimilarityTable, load_similarity_file

logger = logging.getLogger(__name__)

DEFAULT_IMAGES_SUBDIR = "images"
DEFAULT_SIMILARITY_FILE = "cos_similarity.csv"


@dataclass(frozen=True)
class Dataset:
    directory: str
    images_dir: str
    catalog: ImageCatalog
    table: SimilarityTable


def load_dataset(directory: Optional[str],
                 images_subdir: str = DEFAULT_IMAGES_SUBDIR,
                 similarity_file: str = DEFAULT_SIMILARITY_FILE,
                 scanner: Optional[ImageScanner] = None) -> Dataset:
    """
    Check and load a dataset directory.

    Args:
        directory: Selected directory, or None/empty if the user cancelled
        images_subdir: Name of the subdirectory holding the images
        similarity_file: Name of the similarity table file
        scanner: Image scanner to use (default ImageScanner)

    Returns:
        Loaded Dataset

    Raises:
        SetupError: one of its subclasses, carrying the message for the user
    """
    if not directory:
        raise NoDirectorySelectedError()

    images_dir = os.path.join(directory, images_subdir)
    csv_path = os.path.join(directory, similarity_file)

    if not os.path.isdir(images_dir):
        raise MissingImagesDirectoryError(images_subdir)

    if not os.path.isfile(csv_path):
        raise MissingSimilarityFileError(similarity_file)

    scanner = scanner or ImageScanner()
    filenames = scanner.scan_images(images_dir)
    if not filenames:
        raise EmptyCatalogError()

    try:
        table = load_similarity_file(csv_path)
    except (OSError, UnicodeDecodeError, ParseError) as e:
        raise InvalidSimilarityFileError(similarity_file, str(e)) from e

    catalog = ImageCatalog.build(filenames, images_dir)
    logger.info("Opened %s: %d images, %d table rows", directory, len(catalog), len(table))
    return Dataset(directory, images_dir, catalog, table)
