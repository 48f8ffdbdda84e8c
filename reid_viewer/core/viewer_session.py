"""
Interaction state for one viewing session.

The session owns the DualCursor and the cached distribution vector. Each
user event applies its transition synchronously; the window then reads a
fresh ViewState snapshot and repaints from it.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .catalog import ImageCatalog, ImageDescriptor
from .cursor import DualCursor, Side, NO_SELECTION
from .similarity_table import SimilarityTable
from .similarity_view import (
    SimilarityPoint, SimilarityView, Tier, classify, format_score, NO_PAIR
)

NO_IMAGE_CAPTION = "No image selected"


@dataclass(frozen=True)
class PanelState:
    side: Side
    index: int
    total: int
    descriptor: Optional[ImageDescriptor]
    can_go_previous: bool
    can_go_next: bool

    @property
    def caption(self) -> str:
        return self.descriptor.filename if self.descriptor else NO_IMAGE_CAPTION

    @property
    def counter(self) -> str:
        position = self.descriptor.position_label if self.descriptor else "-"
        return f"{position} / {self.total}"

    @property
    def slider_value(self) -> int:
        """1-based slider position (1 when nothing is selected)."""
        return self.index + 1 if self.descriptor else 1


@dataclass(frozen=True)
class ViewState:
    reference: PanelState
    target: PanelState
    similarity: Optional[float]
    score_text: str
    score_tier: Tier
    distribution: Tuple[SimilarityPoint, ...]
    highlight_index: int


class ViewerSession:
    """Controller for the dual-image viewer."""

    def __init__(self, catalog: ImageCatalog, table: SimilarityTable):
        self.catalog = catalog
        self.table = table
        self.view = SimilarityView(catalog, table)
        self.cursor = DualCursor.initial(len(catalog))
        self._distribution: List[SimilarityPoint] = []
        self._refresh_distribution()

    @classmethod
    def from_dataset(cls, dataset) -> "ViewerSession":
        return cls(dataset.catalog, dataset.table)

    @property
    def is_empty(self) -> bool:
        return self.catalog.is_empty()

    def select(self, side: Side, index: int) -> bool:
        """Select an image on one side. Returns False if nothing changed."""
        cursor = self.cursor.select(side, index)
        return self._apply(cursor)

    def select_from_slider(self, side: Side, position: int) -> bool:
        """Select using a 1-based slider position."""
        return self.select(side, position - 1)

    def navigate(self, side: Side, delta: int) -> bool:
        cursor = self.cursor.navigate(side, delta)
        return self._apply(cursor)

    def _apply(self, cursor: DualCursor) -> bool:
        if cursor == self.cursor:
            return False
        reference_changed = cursor.reference_index != self.cursor.reference_index
        self.cursor = cursor
        # Target changes only move the chart highlight
        if reference_changed:
            self._refresh_distribution()
        return True

    def _refresh_distribution(self):
        self._distribution = self.view.distribution_vector(self.cursor.reference_index)

    @property
    def distribution(self) -> List[SimilarityPoint]:
        return list(self._distribution)

    def pair_similarity(self) -> Optional[float]:
        return self.view.pair_similarity(self.cursor)

    def score_text(self) -> str:
        if not self.cursor.is_complete():
            return NO_PAIR
        return format_score(self.pair_similarity())

    def score_tier(self) -> Tier:
        similarity = self.pair_similarity()
        # N/A keeps the default (high) colour
        if similarity is None:
            return Tier.HIGH
        return classify(similarity)

    def panel_state(self, side: Side) -> PanelState:
        index = self.cursor.current(side)
        descriptor = self.catalog[index] if index != NO_SELECTION else None
        return PanelState(
            side=side,
            index=index,
            total=len(self.catalog),
            descriptor=descriptor,
            can_go_previous=self.cursor.can_navigate(side, -1),
            can_go_next=self.cursor.can_navigate(side, 1),
        )

    def view_state(self) -> ViewState:
        similarity = self.pair_similarity()
        return ViewState(
            reference=self.panel_state(Side.REFERENCE),
            target=self.panel_state(Side.TARGET),
            similarity=similarity,
            score_text=self.score_text(),
            score_tier=self.score_tier(),
            distribution=tuple(self._distribution),
            highlight_index=self.cursor.target_index,
        )
