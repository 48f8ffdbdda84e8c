"""
Map image base names onto similarity table keys.

Tables are keyed ``Image_<n>`` while image files are named freely
(``frame007.jpg``, ``image_3.png``, ``query.jpg`` ...).
"""

import logging
import re

from .similarity_table import SimilarityTable

logger = logging.getLogger(__name__)

KEY_PREFIX = "Image_"

_DIGITS = re.compile(r"(\d+)")
_IMAGE_PREFIX = re.compile(r"^image_?", re.IGNORECASE)
_DOT_SUFFIX = re.compile(r"\..*$")


def resolve_key(base_identifier: str, table: SimilarityTable) -> str:
    """
    Resolve a base identifier (filename without extension) to a table key.

    The first run of digits always wins and yields ``Image_<n>``, even when
    that key is missing from the table. Names without digits are matched
    against the table directly and then through a few spelling variants.
    Never fails: an unmatched name is returned unchanged.

    Args:
        base_identifier: Filename without its extension
        table: Table whose keys are searched

    Returns:
        Key to use for lookups in ``table``
    """
    match = _DIGITS.search(base_identifier)
    if match:
        key = f"{KEY_PREFIX}{int(match.group(1))}"
        logger.debug("Generated key %s for %s", key, base_identifier)
        return key

    if table.has_key(base_identifier):
        return base_identifier

    variations = (
        f"{KEY_PREFIX}{base_identifier}",
        _IMAGE_PREFIX.sub(KEY_PREFIX, base_identifier),
        _DOT_SUFFIX.sub("", base_identifier),
    )
    for variation in variations:
        if table.has_key(variation):
            logger.debug("Found variation match %s for %s", variation, base_identifier)
            return variation

    logger.debug("No match found for %s", base_identifier)
    return base_identifier
