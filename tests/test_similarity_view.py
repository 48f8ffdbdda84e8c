import pytest

from reid_viewer.core.catalog import ImageCatalog
from reid_viewer.core.cursor import DualCursor, Side
from reid_viewer.core.similarity_table import SimilarityTable
from reid_viewer.core.similarity_view import (
    SimilarityPoint, SimilarityView, Tier, classify, format_score,
    normalize_for_chart, scale_for_chart
)


@pytest.fixture
def view():
    catalog = ImageCatalog.build(["img1.png", "img2.png", "img3.png"])
    table = SimilarityTable.from_text(
        ",Image_1,Image_2,Image_3\n"
        "Image_1,1.0,0.95\n"
        "Image_3,0.6\n"
    )
    return SimilarityView(catalog, table)


@pytest.mark.parametrize("similarity, tier", [
    (0.9, Tier.HIGH),
    (1.2, Tier.HIGH),
    (0.89999, Tier.MEDIUM),
    (0.7, Tier.MEDIUM),
    (0.69999, Tier.LOW),
    (-0.3, Tier.LOW),
])
def test_classify_boundaries(similarity, tier):
    assert classify(similarity) == tier


def test_tier_colors():
    assert Tier.HIGH.color == "#4CAF50"
    assert Tier.MEDIUM.color == "#FF9800"
    assert Tier.LOW.color == "#F44336"


def test_format_score():
    assert format_score(0.95) == "0.9500"
    assert format_score(0.123456) == "0.1235"
    assert format_score(None) == "N/A"


def test_pair_similarity(view):
    cursor = DualCursor.initial(3)
    assert view.pair_similarity(cursor) == 0.95
    # stored only as (Image_3, Image_1)
    assert view.pair_similarity(cursor.select(Side.TARGET, 2)) == 0.6
    assert view.pair_similarity(cursor.select(Side.REFERENCE, 1).select(Side.TARGET, 2)) is None


def test_pair_similarity_without_selection(view):
    assert view.pair_similarity(DualCursor(3, 0, -1)) is None
    assert view.pair_similarity(DualCursor(3, -1, 1)) is None


def test_distribution_vector_fills_missing_with_zero(view):
    vector = view.distribution_vector(0)
    assert len(vector) == 3
    assert vector == [
        SimilarityPoint(0, 1.0),
        SimilarityPoint(1, 0.95),
        SimilarityPoint(2, 0.6),
    ]
    vector = view.distribution_vector(1)
    assert [p.similarity for p in vector] == [0.95, 0, 0]


def test_distribution_vector_without_reference(view):
    assert view.distribution_vector(-1) == []


def test_scale_for_chart():
    vector = [SimilarityPoint(0, 0.2), SimilarityPoint(1, 0.9), SimilarityPoint(2, 0.5)]
    assert scale_for_chart(vector) == (0.2, 0.9)


def test_scale_for_flat_chart_is_widened():
    scale = scale_for_chart([SimilarityPoint(0, 0.5), SimilarityPoint(1, 0.5)])
    assert scale.min == pytest.approx(0.4)
    assert scale.max == pytest.approx(0.6)


def test_scale_for_empty_chart():
    assert scale_for_chart([]) is None


def test_normalize_for_chart():
    vector = [SimilarityPoint(0, 0.0), SimilarityPoint(1, 1.0), SimilarityPoint(2, 0.5)]
    heights = normalize_for_chart(vector)
    assert list(heights) == pytest.approx([0.0, 1.0, 0.5])
    flat = normalize_for_chart([SimilarityPoint(0, 0.3)])
    assert list(flat) == pytest.approx([0.5])
