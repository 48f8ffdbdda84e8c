"""
Similarity values derived from the catalog, the table and the cursor.
"""

import logging
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence

import numpy as np

from .catalog import ImageCatalog
from .cursor import DualCursor, NO_SELECTION
from .key_resolver import resolve_key
from .similarity_table import SimilarityTable

logger = logging.getLogger(__name__)

HIGH_THRESHOLD = 0.9
MEDIUM_THRESHOLD = 0.7
DEGENERATE_PADDING = 0.1
NOT_AVAILABLE = "N/A"
NO_PAIR = "-"


class Tier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def color(self) -> str:
        return TIER_COLORS[self]


TIER_COLORS = {
    Tier.HIGH: "#4CAF50",
    Tier.MEDIUM: "#FF9800",
    Tier.LOW: "#F44336",
}


class SimilarityPoint(NamedTuple):
    index: int
    similarity: float


class ChartScale(NamedTuple):
    min: float
    max: float


def classify(similarity: float) -> Tier:
    """Tier used for both the score colour and the bar colour."""
    if similarity >= HIGH_THRESHOLD:
        return Tier.HIGH
    if similarity >= MEDIUM_THRESHOLD:
        return Tier.MEDIUM
    return Tier.LOW


def format_score(similarity: Optional[float]) -> str:
    if similarity is None:
        return NOT_AVAILABLE
    return f"{similarity:.4f}"


def scale_for_chart(vector: Sequence[SimilarityPoint]) -> Optional[ChartScale]:
    """
    Value range for chart scaling.

    A flat vector is widened by 0.1 on each side so bars keep a height.
    Returns None for an empty vector.
    """
    if not vector:
        return None
    values = np.fromiter((point.similarity for point in vector), dtype=float, count=len(vector))
    min_val = float(values.min())
    max_val = float(values.max())
    if max_val == min_val:
        min_val -= DEGENERATE_PADDING
        max_val += DEGENERATE_PADDING
    return ChartScale(min_val, max_val)


def normalize_for_chart(vector: Sequence[SimilarityPoint],
                        scale: Optional[ChartScale] = None) -> np.ndarray:
    """Bar heights as fractions of the chart height, in [0, 1]."""
    if not vector:
        return np.zeros(0)
    scale = scale or scale_for_chart(vector)
    values = np.array([point.similarity for point in vector], dtype=float)
    return (values - scale.min) / (scale.max - scale.min)


class SimilarityView:
    """Pure derivations over a loaded catalog and table.

    Keys are resolved once per catalog entry; both inputs are read-only
    for the session.
    """

    def __init__(self, catalog: ImageCatalog, table: SimilarityTable):
        self.catalog = catalog
        self.table = table
        self._keys: List[str] = [
            resolve_key(descriptor.base_identifier, table) for descriptor in catalog
        ]

    def key_for(self, index: int) -> str:
        return self._keys[index]

    def similarity_between(self, index_a: int, index_b: int) -> Optional[float]:
        return self.table.lookup_symmetric(self._keys[index_a], self._keys[index_b])

    def pair_similarity(self, cursor: DualCursor) -> Optional[float]:
        """Similarity of the selected pair, or None if unselected or not found."""
        if not cursor.is_complete():
            return None

        ref_key = self._keys[cursor.reference_index]
        target_key = self._keys[cursor.target_index]
        similarity = self.table.lookup_symmetric(ref_key, target_key)
        if similarity is None:
            logger.debug(
                "No similarity found for keys %s, %s (row present: %s, %s)",
                ref_key, target_key,
                self.table.has_row(ref_key), self.table.has_row(target_key),
            )
        return similarity

    def distribution_vector(self, reference_index: int) -> List[SimilarityPoint]:
        """
        Similarity of the reference image to every catalog entry.

        Missing pairs are filled with 0 so the vector always has one entry
        per catalog image. An unselected reference yields an empty vector.
        """
        if reference_index == NO_SELECTION:
            return []

        vector = []
        for index in range(len(self.catalog)):
            similarity = self.similarity_between(reference_index, index)
            vector.append(SimilarityPoint(index, 0.0 if similarity is None else similarity))
        return vector
